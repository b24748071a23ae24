"""
Command-line front end for the HealthSync dashboard.

Each subcommand performs one dashboard action against the configured Metrics
Store and prints the result. `remind` and `breathe` run the session timers
on an asyncio loop for a fixed number of seconds.
"""
import argparse
import asyncio
from typing import List, Optional

from healthsync.config import settings
from healthsync.core import body_metrics
from healthsync.core.advice import SYMPTOM_ADVICE
from healthsync.core.dashboard import DashboardSession
from healthsync.core.tracker import Mood, SubscribeResult
from healthsync.core.validation import to_float
from healthsync.data_access.json_store import JsonStore
from healthsync.data_access.store import KeyValueStore
from healthsync.infra import log_utils
from healthsync.infra.notifier import default_notifier


def build_store() -> KeyValueStore:
    """Postgres in production when configured, JSON files otherwise."""
    if settings.DATABASE_URL and settings.ENVIRONMENT == "production":
        try:
            from healthsync.data_access.postgres_store import PostgresStore
            return PostgresStore()
        except Exception as e:
            log_utils.log_message(
                f"Postgres store init failed: {e}. Falling back to JSON.", "WARN"
            )
    return JsonStore()


def _finite_number(text: str) -> float:
    value = to_float(text)
    if value is None or value < 0:
        raise argparse.ArgumentTypeError(f"expected a finite, non-negative number, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="healthsync", description="HealthSync+ wellness dashboard.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Show the dashboard with fresh insights.")

    log = sub.add_parser("log", help="Record steps, sleep hours or water glasses.")
    log.add_argument("type", choices=["steps", "sleep", "water"])
    log.add_argument("value", type=_finite_number)

    sub.add_parser("glass", help="Log a glass of water for the hydration challenge.")
    sub.add_parser("join-challenge", help="Join the hydration challenge.")

    mood = sub.add_parser("mood", help="Log how you feel.")
    mood.add_argument("mood", choices=[m.value for m in Mood])
    mood.add_argument("--note", default="")

    check = sub.add_parser("check", help="Tick (or untick) a checklist item.")
    check.add_argument("item")
    check.add_argument("--off", action="store_true", help="Untick instead of tick.")

    clear = sub.add_parser("clear-checklist", help="Untick every checklist item.")
    clear.add_argument("items", nargs="*", help="Item ids (defaults to the configured checklist).")

    subscribe = sub.add_parser("subscribe", help="Subscribe an email to the newsletter.")
    subscribe.add_argument("email")

    bmi = sub.add_parser("bmi", help="Calculate BMI and estimated daily calories.")
    bmi.add_argument("--height", required=True, help="Height in cm.")
    bmi.add_argument("--weight", required=True, help="Weight in kg.")
    bmi.add_argument("--activity", default=None, help="Activity multiplier (default 1.2).")

    symptom = sub.add_parser("symptom", help="Simulated advice for a symptom.")
    symptom.add_argument("symptom", nargs="?", default="", help=f"One of: {', '.join(SYMPTOM_ADVICE)}.")

    quote = sub.add_parser("quote", help="Show a motivational quote.")
    quote.add_argument("--random", action="store_true", help="Pick a random quote instead of today's.")

    sub.add_parser("logs", help="Show recent activity, newest first.")

    remind = sub.add_parser("remind", help="Run water reminders for a while.")
    remind.add_argument("--seconds", type=float, required=True)
    remind.add_argument("--interval", type=float, default=None, help="Override the reminder interval.")

    breathe = sub.add_parser("breathe", help="Run a guided breathing exercise.")
    breathe.add_argument("--seconds", type=int, default=settings.BREATHING_DURATION_SECONDS)

    return parser


async def _run_reminders(session: DashboardSession, seconds: float, interval: Optional[float]) -> None:
    if interval:
        session.water_timer.interval = interval
    session.start_water_reminders()
    try:
        await asyncio.sleep(seconds)
    finally:
        session.stop_water_reminders()


async def _run_breathing(session: DashboardSession, seconds: int) -> None:
    last_phase = None

    def show(view):
        nonlocal last_phase
        if view.breathing and view.breathing.phase != last_phase:
            last_phase = view.breathing.phase
            print(f"{view.breathing.phase}  ({view.breathing.progress_text})")

    session.start_breathing(seconds)
    while session.breathing_timer.is_running:
        await asyncio.sleep(settings.BREATHING_TICK_SECONDS)
        show(session.render_view())
    if session.breathing and session.breathing.completed:
        print(session.breathing.progress_text)


def main(argv: Optional[List[str]] = None) -> int:
    """Parses CLI arguments and performs the requested dashboard action."""
    args = build_parser().parse_args(argv)
    log_utils.log_message(f"Dashboard CLI invoked: '{args.command}'.", "INFO")

    session = DashboardSession(build_store(), notifier=default_notifier())
    tracker = session.tracker

    if args.command == "show":
        print(session.open().render_text())
        print()
        print(f"“{session.quote}”")
    elif args.command == "log":
        if args.type == "steps":
            tracker.set_steps(int(args.value))
        elif args.type == "sleep":
            tracker.set_sleep(args.value)
        else:
            tracker.set_water(int(args.value))
        print("\n".join(session.refresh().insights))
    elif args.command == "glass":
        _, water = tracker.log_glass()
        print(f"Water: {water} / {settings.WATER_GOAL_GLASSES}. Challenge: {tracker.hydration_progress()}%")
    elif args.command == "join-challenge":
        tracker.join_challenge()
        print(f"Hydration challenge: {tracker.hydration_progress()}%")
    elif args.command == "mood":
        tracker.log_mood(Mood(args.mood), args.note)
        print("\n".join(tracker.render_moods()))
    elif args.command == "check":
        tracker.set_check(args.item, not args.off)
        print(f"{args.item}: {'done' if tracker.is_checked(args.item) else 'not done'}")
    elif args.command == "clear-checklist":
        tracker.clear_checklist(args.items or None)
        print("Checklist cleared.")
    elif args.command == "subscribe":
        result = tracker.subscribe(args.email)
        print(result.message)
        return 1 if result is SubscribeResult.INVALID else 0
    elif args.command == "bmi":
        result = session.calculate_body_metrics(args.height, args.weight, args.activity)
        print(body_metrics.describe(result))
        return 1 if "error" in result else 0
    elif args.command == "symptom":
        print(session.check_symptom(args.symptom))
    elif args.command == "quote":
        print(session.new_quote() if args.random else session.quote)
    elif args.command == "logs":
        print("\n".join(session.activity_log.render()))
    elif args.command == "remind":
        asyncio.run(_run_reminders(session, args.seconds, args.interval))
    elif args.command == "breathe":
        asyncio.run(_run_breathing(session, args.seconds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
