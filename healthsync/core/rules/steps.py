from typing import Optional

from healthsync.config import settings

TAKE_A_WALK = "Try a 15-min walk — short walks can boost mood and circulation."


def interpret(snapshot) -> Optional[str]:
    if snapshot.steps_today < settings.STEPS_WALK_THRESHOLD:
        return TAKE_A_WALK
    return None
