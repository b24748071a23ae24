"""Canned advice: the simulated symptom checker and motivational quotes."""

import random
from datetime import date
from typing import Optional

SYMPTOM_ADVICE = {
    "Headache": "Headache → consider hydration, eye breaks, and rest; if severe or persistent, consult a doctor.",
    "Fatigue": "Fatigue → ensure 7–8 hrs sleep, balanced diet; consider checking iron levels if persistent.",
    "Cough": "Cough → rest, fluids, monitor for fever; seek care if breathing difficulty.",
    "Stomach ache": "Stomach ache → try bland foods and rest; see a clinician if severe or prolonged.",
    "Back pain": "Back pain → gentle stretches and posture correction; seek physiotherapy if ongoing.",
}
CHOOSE_SYMPTOM = "Choose a symptom to get simulated advice."
NO_ADVICE = "No advice available for that symptom in demo."

QUOTES = (
    "Health is the greatest wealth.",
    "Consistency beats intensity.",
    "Small daily habits lead to big changes.",
    "Take care of your body — it’s the only place you have to live.",
    "A short walk is better than no walk.",
    "Sleep, hydrate, move — repeat.",
)


def symptom_advice(symptom: Optional[str]) -> str:
    if not symptom:
        return CHOOSE_SYMPTOM
    return SYMPTOM_ADVICE.get(symptom, NO_ADVICE)


def daily_quote(day: Optional[date] = None) -> str:
    """Quote of the day, rotating on the day of the month."""
    day = day or date.today()
    return QUOTES[day.day % len(QUOTES)]


def random_quote(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(QUOTES)
