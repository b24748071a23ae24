import random

import pytest

from healthsync.core.simulations import (
    DEFAULT_STEPS_WEEK,
    breathing_state,
    heartbeat_reading,
    random_walk_steps,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.mark.parametrize("r, bpm, pulse", [(0.0, 60, 0.9), (0.999, 94, 1.4)])
def test_heartbeat_bounds(r, bpm, pulse):
    reading = heartbeat_reading(FixedRandom(r))
    assert reading.bpm == bpm
    assert reading.pulse_seconds == pulse


@pytest.mark.parametrize(
    "elapsed, phase",
    [(0, "Inhale"), (2.9, "Inhale"), (3, "Exhale"), (5, "Exhale"), (6, "Inhale"), (10, "Exhale")],
)
def test_breathing_phase(elapsed, phase):
    assert breathing_state(elapsed, 60).phase == phase


def test_breathing_completion():
    state = breathing_state(61, 60)
    assert state.completed
    assert state.scale == 1.0
    assert state.progress_text == "Completed"
    assert breathing_state(12, 60).progress_text == "Breathing — 12s / 60s"


def test_random_walk_delta_and_floor():
    week = list(DEFAULT_STEPS_WEEK)
    # (0.9 - 0.4) * 1000 == +500
    assert random_walk_steps(week, 0, FixedRandom(0.9))[0] == 1700
    # (0.0 - 0.4) * 1000 == -400, never below zero
    assert random_walk_steps([100] * 7, 1, FixedRandom(0.0))[1] == 0
    assert week == DEFAULT_STEPS_WEEK


def test_random_walk_uses_base_for_empty_slot():
    assert random_walk_steps([0] * 7, 3, FixedRandom(0.4))[3] == 2000


def test_random_walk_with_real_rng():
    week = random_walk_steps(DEFAULT_STEPS_WEEK, 6, random.Random(1))
    assert len(week) == 7 and week[6] >= 0
