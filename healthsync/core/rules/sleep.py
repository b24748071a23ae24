from healthsync.config import settings

SHORT_SLEEP = "You slept less than 6 hrs — try a quick nap or a power-rest today."
SLIGHTLY_SHORT = "Sleep was slightly short — aim for 7–8 hrs."
GOOD_SLEEP = "Nice sleep last night — keep it up."


def interpret(snapshot) -> str:
    hours = snapshot.sleep_hours
    if hours < settings.SLEEP_SHORT_HOURS:
        return SHORT_SLEEP
    if hours < settings.SLEEP_TARGET_HOURS:
        return SLIGHTLY_SHORT
    return GOOD_SLEEP
