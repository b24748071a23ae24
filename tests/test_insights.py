import pytest

from healthsync.core.insights import (
    MetricsSnapshot,
    build_insight_report,
    generate_insights,
    snapshot_from_store,
)
from healthsync.core.rules import hydration, mood, sleep, steps
from healthsync.data_access.memory_store import MemoryStore


def make_snapshot(sleep_hours=7.5, water=8, moods=1, steps_today=5000) -> MetricsSnapshot:
    return MetricsSnapshot(
        sleep_hours=sleep_hours,
        water_glasses=water,
        mood_entry_count=moods,
        steps_today=steps_today,
    )


@pytest.mark.parametrize(
    "hours, expected",
    [
        (0, sleep.SHORT_SLEEP),
        (5.99, sleep.SHORT_SLEEP),
        (6, sleep.SLIGHTLY_SHORT),
        (6.9, sleep.SLIGHTLY_SHORT),
        (7, sleep.GOOD_SLEEP),
        (10, sleep.GOOD_SLEEP),
    ],
)
def test_sleep_buckets(hours, expected):
    result = generate_insights(make_snapshot(sleep_hours=hours))
    sleep_advisories = {sleep.SHORT_SLEEP, sleep.SLIGHTLY_SHORT, sleep.GOOD_SLEEP}
    assert [s for s in result if s in sleep_advisories] == [expected]
    assert result[0] == expected


@pytest.mark.parametrize(
    "glasses, expected",
    [
        (0, hydration.DRINK_NOW),
        (3, hydration.DRINK_NOW),
        (4, hydration.HALFWAY),
        (7, hydration.HALFWAY),
        (8, hydration.GOAL_REACHED),
        (12, hydration.GOAL_REACHED),
    ],
)
def test_exactly_one_hydration_advisory(glasses, expected):
    result = generate_insights(make_snapshot(water=glasses))
    hydration_advisories = {hydration.DRINK_NOW, hydration.HALFWAY, hydration.GOAL_REACHED}
    assert [s for s in result if s in hydration_advisories] == [expected]
    assert result[1] == expected


def test_mood_advisory_only_without_entries():
    assert mood.NO_MOOD_LOGGED in generate_insights(make_snapshot(moods=0))
    assert mood.NO_MOOD_LOGGED not in generate_insights(make_snapshot(moods=1))


def test_walk_advisory_below_threshold():
    assert steps.TAKE_A_WALK in generate_insights(make_snapshot(steps_today=2999))
    assert steps.TAKE_A_WALK not in generate_insights(make_snapshot(steps_today=3000))


def test_all_categories_evaluated_in_fixed_order():
    result = generate_insights(make_snapshot(sleep_hours=5, water=1, moods=0, steps_today=100))
    assert result == [
        sleep.SHORT_SLEEP,
        hydration.DRINK_NOW,
        mood.NO_MOOD_LOGGED,
        steps.TAKE_A_WALK,
    ]


def test_engine_is_deterministic():
    snapshot = make_snapshot(sleep_hours=6.5, water=5, moods=0, steps_today=4000)
    assert generate_insights(snapshot) == generate_insights(snapshot)
    assert len(generate_insights(snapshot)) == 3


def test_snapshot_defaults_for_empty_store():
    snapshot = snapshot_from_store(MemoryStore())
    assert snapshot == MetricsSnapshot(sleep_hours=6.2, water_glasses=0, mood_entry_count=0, steps_today=0)


def test_snapshot_ignores_malformed_values():
    store = MemoryStore({"lastSleep": "{oops", "waterCount": '"many"', "moodLogs": '"nope"'})
    store.set("stepsToday", 4100)
    snapshot = snapshot_from_store(store)
    assert snapshot.sleep_hours == 6.2
    assert snapshot.water_glasses == 0
    assert snapshot.mood_entry_count == 0
    assert snapshot.steps_today == 4100


def test_engine_does_not_write_to_store():
    store = MemoryStore()
    store.set("waterCount", 3)
    before = dict(store._data)
    build_insight_report(snapshot_from_store(store))
    assert store._data == before


def test_report_meta():
    report = build_insight_report(make_snapshot(sleep_hours=6.2, water=2, steps_today=3200))
    assert report["meta"] == {"sleep_hours": 6.2, "water_glasses": 2, "steps_today": 3200}
    assert len(report["insights"]) == 2
