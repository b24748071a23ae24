"""Recent activity log, persisted under `recentLogs` and capped in size."""

from datetime import datetime
from typing import Callable, Dict, List, Optional

from healthsync.config import settings
from healthsync.core.validation import keep_last
from healthsync.data_access import keys
from healthsync.data_access.store import KeyValueStore

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
EMPTY_LOG = "No activity"


class ActivityLog:
    def __init__(
        self,
        store: KeyValueStore,
        limit: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.limit = limit if limit is not None else settings.ACTIVITY_LOG_LIMIT
        self.clock = clock

    def _load(self) -> List[Dict[str, str]]:
        entries = self.store.get(keys.RECENT_LOGS, [])
        return entries if isinstance(entries, list) else []

    def append(self, text: str) -> Dict[str, str]:
        """Timestamp and store an entry, evicting the oldest past the limit."""
        entry = {"t": self.clock().strftime(TIMESTAMP_FORMAT), "text": text}
        entries = self._load()
        entries.append(entry)
        self.store.set(keys.RECENT_LOGS, keep_last(entries, self.limit))
        return entry

    def entries(self) -> List[Dict[str, str]]:
        """Stored entries, newest first."""
        return list(reversed(self._load()))

    def render(self) -> List[str]:
        lines = [f"{e.get('t', '')} — {e.get('text', '')}" for e in self.entries()]
        return lines or [EMPTY_LOG]
