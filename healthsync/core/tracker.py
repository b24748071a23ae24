"""
User actions that write to the Metrics Store.

Every action persists its value, appends a line to the activity log and
returns the stored value, so a presentation layer can refresh straight away.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from healthsync.config import settings
from healthsync.core.activity_log import TIMESTAMP_FORMAT, ActivityLog
from healthsync.core.simulations import DEFAULT_STEPS_WEEK
from healthsync.core.validation import is_valid_email, keep_last, round_half_up, to_float
from healthsync.data_access import keys
from healthsync.data_access.store import KeyValueStore

EMPTY_MOODS = "No mood entries"


class Mood(str, Enum):
    HAPPY = "Happy"
    CALM = "Calm"
    NEUTRAL = "Neutral"
    TIRED = "Tired"
    STRESSED = "Stressed"
    SAD = "Sad"


class SubscribeResult(Enum):
    INVALID = "Enter a valid email."
    ALREADY_SUBSCRIBED = "Already subscribed."
    SUBSCRIBED = "Thanks for joining HealthSync+!"

    @property
    def message(self) -> str:
        return self.value


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


class WellnessTracker:
    def __init__(
        self,
        store: KeyValueStore,
        activity_log: Optional[ActivityLog] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.clock = clock
        self.activity_log = activity_log or ActivityLog(store, clock=clock)

    def _int(self, key: str, fallback: int) -> int:
        value = to_float(self.store.get(key))
        return fallback if value is None else int(value)

    # --- Steps, sleep, water -------------------------------------------------
    def steps_today(self) -> int:
        return self._int(keys.STEPS_TODAY, 0)

    def set_steps(self, steps: int) -> int:
        steps = max(0, int(steps))
        self.store.set(keys.STEPS_TODAY, steps)
        week = self.steps_week()
        week[self.clock().weekday()] = steps
        self.store.set(keys.STEPS_WEEK, week)
        self.activity_log.append(f"Steps set to {steps}")
        return steps

    def steps_week(self) -> List[int]:
        """Monday-first steps series for the current week."""
        week = _list(self.store.get(keys.STEPS_WEEK))
        if len(week) != 7:
            week = list(DEFAULT_STEPS_WEEK)
        return week

    def sleep_hours(self) -> float:
        value = to_float(self.store.get(keys.LAST_SLEEP))
        return settings.DEFAULT_SLEEP_HOURS if value is None else value

    def set_sleep(self, hours: float) -> float:
        hours = max(0.0, float(hours))
        self.store.set(keys.LAST_SLEEP, hours)
        self.activity_log.append(f"Sleep set to {hours:g}")
        return hours

    def water_count(self) -> int:
        return self._int(keys.WATER_COUNT, 0)

    def set_water(self, glasses: int) -> int:
        glasses = max(0, int(glasses))
        self.store.set(keys.WATER_COUNT, glasses)
        self.activity_log.append(f"Water set to {glasses}")
        return glasses

    # --- Hydration challenge -------------------------------------------------
    def challenge_count(self) -> int:
        return self._int(keys.CHALLENGE_HYDRATION, 0)

    def join_challenge(self) -> int:
        count = self.challenge_count() + 1
        self.store.set(keys.CHALLENGE_HYDRATION, count)
        self.activity_log.append("Joined hydration challenge")
        return count

    def log_glass(self) -> Tuple[int, int]:
        """One more glass: bumps the challenge and today's water (capped at goal)."""
        count = self.challenge_count() + 1
        self.store.set(keys.CHALLENGE_HYDRATION, count)
        water = min(settings.WATER_GOAL_GLASSES, self.water_count() + 1)
        self.store.set(keys.WATER_COUNT, water)
        self.activity_log.append("Logged a glass of water")
        return count, water

    def hydration_progress(self) -> int:
        """Challenge completion in percent, capped at 100."""
        value = self._int(keys.CHALLENGE_HYDRATION, settings.HYDRATION_CHALLENGE_DEFAULT)
        pct = int(round_half_up(value / settings.HYDRATION_CHALLENGE_DAYS * 100))
        return min(100, pct)

    # --- Daily checklist -----------------------------------------------------
    def is_checked(self, item_id: str) -> bool:
        return bool(self.store.get(keys.checklist_key(item_id), False))

    def set_check(self, item_id: str, checked: bool) -> bool:
        checked = bool(checked)
        self.store.set(keys.checklist_key(item_id), checked)
        self.activity_log.append(f"Checklist: {item_id} set to {str(checked).lower()}")
        return checked

    def checklist(self, item_ids: Optional[Iterable[str]] = None) -> Dict[str, bool]:
        item_ids = settings.CHECKLIST_ITEMS if item_ids is None else item_ids
        return {item_id: self.is_checked(item_id) for item_id in item_ids}

    def clear_checklist(self, item_ids: Optional[Iterable[str]] = None) -> Dict[str, bool]:
        item_ids = list(settings.CHECKLIST_ITEMS if item_ids is None else item_ids)
        for item_id in item_ids:
            self.store.set(keys.checklist_key(item_id), False)
        self.activity_log.append("Checklist cleared")
        return {item_id: False for item_id in item_ids}

    # --- Mood log ------------------------------------------------------------
    def log_mood(self, mood: Mood, note: str = "") -> Dict[str, str]:
        mood = Mood(mood)
        note = (note or "").strip()
        entry = {"mood": mood.value, "note": note, "when": self.clock().strftime(TIMESTAMP_FORMAT)}
        entries = _list(self.store.get(keys.MOOD_LOGS, []))
        entries.append(entry)
        self.store.set(keys.MOOD_LOGS, keep_last(entries, settings.MOOD_LOG_LIMIT))
        self.activity_log.append(f"Mood logged: {mood.value}" + (f" — {note}" if note else ""))
        return entry

    def mood_entries(self) -> List[Dict[str, str]]:
        """Stored mood entries, newest first."""
        return list(reversed(_list(self.store.get(keys.MOOD_LOGS, []))))

    def render_moods(self) -> List[str]:
        lines = []
        for m in self.mood_entries():
            line = f"{m.get('when', '')} — {m.get('mood', '')}"
            if m.get("note"):
                line += f" — {m['note']}"
            lines.append(line)
        return lines or [EMPTY_MOODS]

    # --- Newsletter ----------------------------------------------------------
    def subscribers(self) -> List[str]:
        return _list(self.store.get(keys.SUBSCRIBERS, []))

    def subscribe(self, email: str) -> SubscribeResult:
        if not is_valid_email(email):
            return SubscribeResult.INVALID
        email = email.strip()
        subscribers = self.subscribers()
        if email in subscribers:
            return SubscribeResult.ALREADY_SUBSCRIBED
        subscribers.append(email)
        self.store.set(keys.SUBSCRIBERS, subscribers)
        self.activity_log.append(f"Subscribed: {email}")
        return SubscribeResult.SUBSCRIBED

    # --- First run -----------------------------------------------------------
    def bootstrap_demo_data(self) -> bool:
        """Seed demo values on first run. Returns True if seeding happened."""
        if self.store.get(keys.HAS_DEMO):
            self.activity_log.append("App opened")
            return False
        self.store.set(keys.STEPS_TODAY, 3200)
        self.store.set(keys.LAST_SLEEP, settings.DEFAULT_SLEEP_HOURS)
        self.store.set(keys.WATER_COUNT, 2)
        self.store.set(keys.CHALLENGE_HYDRATION, settings.HYDRATION_CHALLENGE_DEFAULT)
        self.store.set(
            keys.MOOD_LOGS,
            [{"mood": Mood.NEUTRAL.value, "note": "Busy day", "when": self.clock().strftime(TIMESTAMP_FORMAT)}],
        )
        self.store.set(keys.HAS_DEMO, True)
        self.activity_log.append("Demo data loaded")
        return True
