from healthsync.config import settings

DRINK_NOW = "You have logged fewer than 4 glasses — have a glass of water now 💧"
HALFWAY = "You’re halfway to your water goal — keep sipping."
GOAL_REACHED = "Great — you reached your hydration goal today!"


def interpret(snapshot) -> str:
    glasses = snapshot.water_glasses
    if glasses < settings.WATER_HALFWAY_GLASSES:
        return DRINK_NOW
    if glasses < settings.WATER_GOAL_GLASSES:
        return HALFWAY
    return GOAL_REACHED
