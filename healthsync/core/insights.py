"""
Rule-based wellness insights.

The engine is read-only: it takes a snapshot of stored metrics and maps it to
an ordered list of advisories. All rule categories are always evaluated.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from healthsync.config import settings
from healthsync.core.rules import RULES
from healthsync.core.validation import to_float
from healthsync.data_access import keys
from healthsync.data_access.store import KeyValueStore


@dataclass(frozen=True)
class MetricsSnapshot:
    sleep_hours: float
    water_glasses: int
    mood_entry_count: int
    steps_today: int


def _number(value: Any, fallback: float) -> float:
    parsed = to_float(value)
    return fallback if parsed is None else parsed


def snapshot_from_store(store: KeyValueStore) -> MetricsSnapshot:
    """Read the values the engine needs, substituting defaults for gaps."""
    moods = store.get(keys.MOOD_LOGS, [])
    return MetricsSnapshot(
        sleep_hours=_number(store.get(keys.LAST_SLEEP), settings.DEFAULT_SLEEP_HOURS),
        water_glasses=int(_number(store.get(keys.WATER_COUNT), 0)),
        mood_entry_count=len(moods) if isinstance(moods, list) else 0,
        steps_today=int(_number(store.get(keys.STEPS_TODAY), 0)),
    )


def generate_insights(snapshot: MetricsSnapshot) -> List[str]:
    insights = []
    for rule in RULES:
        advisory = rule.interpret(snapshot)
        if advisory:
            insights.append(advisory)
    return insights


def build_insight_report(snapshot: MetricsSnapshot) -> Dict[str, Any]:
    """Insights plus the metrics they were derived from."""
    meta = asdict(snapshot)
    meta.pop("mood_entry_count")
    return {"insights": generate_insights(snapshot), "meta": meta}
