"""Key catalog for the Metrics Store."""

STEPS_TODAY = "stepsToday"
LAST_SLEEP = "lastSleep"
WATER_COUNT = "waterCount"
MOOD_LOGS = "moodLogs"
CHALLENGE_HYDRATION = "challengeHydration"
RECENT_LOGS = "recentLogs"
SUBSCRIBERS = "subscribers"
HAS_DEMO = "hasDemo"
STEPS_WEEK = "stepsWeek"
DEMO_AGE = "demoAge"

CHECKLIST_PREFIX = "check_"


def checklist_key(item_id: str) -> str:
    return f"{CHECKLIST_PREFIX}{item_id}"
