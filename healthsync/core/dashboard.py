"""
Session controller for the wellness dashboard.

A DashboardSession owns the store-backed tracker, the activity log and every
timer handle for one running dashboard. Presentation layers call its actions
and render `render_view()`; they never touch the store directly.
"""

import random
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from healthsync.config import settings
from healthsync.core import advice, body_metrics, insights, simulations
from healthsync.core.activity_log import ActivityLog
from healthsync.core.timers import PeriodicTask
from healthsync.core.tracker import WellnessTracker
from healthsync.core.validation import positive_float
from healthsync.core.view_model import DashboardView
from healthsync.data_access import keys
from healthsync.data_access.store import KeyValueStore
from healthsync.infra import log_utils
from healthsync.infra.notifier import NullNotifier, Notifier

APP_NAME = "HealthSync+"
WATER_REMINDER_TEXT = "Time to drink water 💧"


class DashboardSession:
    def __init__(
        self,
        store: KeyValueStore,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
        on_update: Optional[Callable[[DashboardView], None]] = None,
    ):
        self.store = store
        self.notifier = notifier or NullNotifier()
        self.rng = rng or random.Random()
        self.clock = clock
        self.on_update = on_update
        self.activity_log = ActivityLog(store, clock=clock)
        self.tracker = WellnessTracker(store, self.activity_log, clock=clock)

        self.heartbeat: Optional[simulations.HeartbeatReading] = None
        self.breathing: Optional[simulations.BreathingState] = None
        self.quote = advice.daily_quote(clock().date())
        self._insight_time = ""
        self._breathing_started: Optional[datetime] = None
        self._breathing_duration = settings.BREATHING_DURATION_SECONDS

        self.insight_timer = PeriodicTask("insights", settings.INSIGHT_REFRESH_SECONDS, self.refresh)
        self.steps_walk_timer = PeriodicTask("steps_walk", settings.STEPS_WALK_SECONDS, self.walk_steps)
        self.heartbeat_timer = PeriodicTask(
            "heartbeat", settings.HEARTBEAT_SECONDS, self.tick_heartbeat, fire_immediately=True
        )
        self.breathing_timer = PeriodicTask("breathing", settings.BREATHING_TICK_SECONDS, self.tick_breathing)
        self.water_timer = PeriodicTask(
            "water_reminder", settings.water_reminder_interval, self.fire_water_reminder, fire_immediately=True
        )

    @property
    def timers(self):
        return (
            self.insight_timer,
            self.steps_walk_timer,
            self.heartbeat_timer,
            self.breathing_timer,
            self.water_timer,
        )

    # --- Lifecycle -----------------------------------------------------------
    def open(self) -> DashboardView:
        """Seed demo data on first run and produce the initial view."""
        self.tracker.bootstrap_demo_data()
        return self.refresh()

    def start_periodic_simulations(self) -> None:
        """Start insight refresh, the steps random walk and the heartbeat."""
        self.insight_timer.start()
        self.steps_walk_timer.start()
        self.heartbeat_timer.start()

    def stop_all(self) -> None:
        for timer in self.timers:
            timer.stop()

    # --- Rendering -----------------------------------------------------------
    def render_view(self) -> DashboardView:
        snapshot = insights.snapshot_from_store(self.store)
        return DashboardView(
            insights=insights.generate_insights(snapshot),
            insight_time=self._insight_time,
            sleep_hours=snapshot.sleep_hours,
            water_glasses=snapshot.water_glasses,
            water_goal=settings.WATER_GOAL_GLASSES,
            steps_today=snapshot.steps_today,
            hydration_progress=self.tracker.hydration_progress(),
            checklist=self.tracker.checklist(),
            moods=self.tracker.render_moods(),
            recent_logs=self.activity_log.render(),
            steps_week=self.tracker.steps_week(),
            heartbeat=self.heartbeat,
            breathing=self.breathing,
            water_reminders_on=self.water_timer.is_running,
        )

    def refresh(self) -> DashboardView:
        """Re-run the insight engine and push the view to the listener."""
        self._insight_time = self.clock().strftime("%H:%M:%S")
        view = self.render_view()
        if self.on_update:
            self.on_update(view)
        return view

    # --- Simulations ---------------------------------------------------------
    def tick_heartbeat(self) -> simulations.HeartbeatReading:
        self.heartbeat = simulations.heartbeat_reading(self.rng)
        return self.heartbeat

    def start_heartbeat(self) -> bool:
        return self.heartbeat_timer.start()

    def stop_heartbeat(self) -> bool:
        return self.heartbeat_timer.stop()

    def walk_steps(self) -> None:
        week = simulations.random_walk_steps(self.tracker.steps_week(), self.clock().weekday(), self.rng)
        self.store.set(keys.STEPS_WEEK, week)

    # --- Breathing exercise --------------------------------------------------
    def start_breathing(self, duration: Optional[int] = None) -> simulations.BreathingState:
        """(Re)start a breathing exercise of `duration` seconds."""
        self.breathing_timer.stop()
        self._breathing_duration = settings.BREATHING_DURATION_SECONDS if duration is None else duration
        self._breathing_started = self.clock()
        self.breathing = simulations.breathing_state(0, self._breathing_duration)
        self.breathing_timer.start()
        return self.breathing

    def tick_breathing(self) -> Optional[simulations.BreathingState]:
        if self._breathing_started is None:
            return self.breathing
        elapsed = (self.clock() - self._breathing_started).total_seconds()
        self.breathing = simulations.breathing_state(elapsed, self._breathing_duration)
        if self.breathing.completed:
            self.breathing_timer.stop()
            self._breathing_started = None
            self.activity_log.append("Completed breathing exercise")
        return self.breathing

    def stop_breathing(self) -> bool:
        stopped = self.breathing_timer.stop()
        self._breathing_started = None
        self.breathing = None
        return stopped

    # --- Water reminders -----------------------------------------------------
    def fire_water_reminder(self) -> bool:
        sent = self.notifier.notify(APP_NAME, WATER_REMINDER_TEXT)
        self.activity_log.append("Water reminder fired")
        return sent

    def start_water_reminders(self) -> bool:
        """Fire a reminder now and then every interval. No-op if running."""
        if self.water_timer.is_running:
            return False
        self.water_timer.start()
        self.activity_log.append("Water reminders started")
        if not self.notifier.request_permission():
            log_utils.log_message("Notifications unavailable; reminders are log-only.", "INFO")
        return True

    def stop_water_reminders(self) -> bool:
        if not self.water_timer.stop():
            return False
        self.activity_log.append("Water reminders stopped")
        return True

    # --- Tools ---------------------------------------------------------------
    def calculate_body_metrics(self, height_cm: Any, weight_kg: Any, activity: Any = None) -> Dict[str, Any]:
        age = positive_float(self.store.get(keys.DEMO_AGE))
        age = int(age) if age is not None else settings.BMR_ASSUMED_AGE
        result = body_metrics.calculate_body_metrics(height_cm, weight_kg, activity, age=age)
        if "error" not in result:
            self.activity_log.append(f"BMI calculated: {result['bmi']} ({result['category']})")
        return result

    def check_symptom(self, symptom: Optional[str]) -> str:
        text = advice.symptom_advice(symptom)
        if symptom:
            self.activity_log.append(f"Symptom checked: {symptom}")
        return text

    def new_quote(self) -> str:
        self.quote = advice.random_quote(self.rng)
        self.activity_log.append("Quote refreshed")
        return self.quote
