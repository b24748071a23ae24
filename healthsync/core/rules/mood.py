from typing import Optional

NO_MOOD_LOGGED = "You haven’t logged any mood entries this week — how are you feeling?"


def interpret(snapshot) -> Optional[str]:
    if snapshot.mood_entry_count == 0:
        return NO_MOOD_LOGGED
    return None
