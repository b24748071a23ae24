"""
Simulated readouts: heartbeat, breathing pace and the weekly steps random walk.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_STEPS_WEEK = [1200, 3400, 4500, 6700, 2300, 7600, 4200]
RANDOM_WALK_BASE = 2000

# Inhale for 3 s, exhale for 3 s.
BREATH_CYCLE_SECONDS = 6
INHALE_SECONDS = 3
INHALE_SCALE = 1.08
EXHALE_SCALE = 0.86


@dataclass(frozen=True)
class HeartbeatReading:
    bpm: int
    pulse_seconds: float


@dataclass(frozen=True)
class BreathingState:
    phase: str
    scale: float
    elapsed: int
    duration: int
    completed: bool = False

    @property
    def progress_text(self) -> str:
        if self.completed:
            return "Completed"
        return f"Breathing — {self.elapsed}s / {self.duration}s"


def heartbeat_reading(rng: Optional[random.Random] = None) -> HeartbeatReading:
    """A resting heart rate between 60 and 94 bpm with a matching pulse speed."""
    rng = rng or random
    bpm = math.floor(60 + rng.random() * 35)
    pulse = round(0.9 + rng.random() * 0.5, 2)
    return HeartbeatReading(bpm=bpm, pulse_seconds=pulse)


def breathing_state(elapsed: float, duration: int) -> BreathingState:
    elapsed = int(elapsed)
    if elapsed >= duration:
        return BreathingState("Breathe", 1.0, duration, duration, completed=True)
    if elapsed % BREATH_CYCLE_SECONDS < INHALE_SECONDS:
        return BreathingState("Inhale", INHALE_SCALE, elapsed, duration)
    return BreathingState("Exhale", EXHALE_SCALE, elapsed, duration)


def random_walk_steps(week: List[int], index: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Nudge one day of the weekly steps series by a random delta biased upward.

    Returns a new list; `week` is left untouched.
    """
    rng = rng or random
    week = list(week)
    delta = math.floor((rng.random() - 0.4) * 1000 + 0.5)
    week[index] = max(0, (week[index] or RANDOM_WALK_BASE) + delta)
    return week
