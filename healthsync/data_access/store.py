import json
from abc import ABC, abstractmethod
from typing import Any, Optional

from healthsync.infra import log_utils


class KeyValueStore(ABC):
    """
    Abstract Base Class for the Metrics Store.

    Values are JSON-serialisable and stored as their JSON text, one entry per
    key. Backends only implement the raw string primitives; the public
    `get`/`set`/`remove` methods enforce the contract shared by every backend:

    - `get` never raises. Absent, empty, unreadable or malformed values all
      come back as the caller's fallback.
    - `set` never raises. A backend that is unavailable or full, or a value
      that cannot be serialised, is logged and the write is dropped.
    - Keys are independent; there are no multi-key transactions.
    """

    @abstractmethod
    def _read_raw(self, key: str) -> Optional[str]:
        """Returns the stored JSON text for `key`, or None if absent."""
        pass

    @abstractmethod
    def _write_raw(self, key: str, raw: str) -> None:
        """Stores the JSON text for `key`, replacing any previous value."""
        pass

    @abstractmethod
    def _delete_raw(self, key: str) -> None:
        """Deletes `key`. Deleting an absent key is a no-op."""
        pass

    def get(self, key: str, fallback: Any = None) -> Any:
        try:
            raw = self._read_raw(key)
        except Exception as e:
            log_utils.log_failure(f"[{type(self).__name__}] read of '{key}' failed: {e}", "WARN")
            return fallback
        if not raw:
            return fallback
        try:
            return json.loads(raw)
        except ValueError as e:
            log_utils.log_failure(f"[{type(self).__name__}] malformed value for '{key}': {e}", "WARN")
            return fallback

    def set(self, key: str, value: Any) -> None:
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            log_utils.log_failure(f"[{type(self).__name__}] cannot serialise '{key}': {e}", "ERROR")
            return
        try:
            self._write_raw(key, raw)
        except Exception as e:
            log_utils.log_failure(f"[{type(self).__name__}] write of '{key}' failed: {e}", "WARN")

    def remove(self, key: str) -> None:
        try:
            self._delete_raw(key)
        except Exception as e:
            log_utils.log_failure(f"[{type(self).__name__}] remove of '{key}' failed: {e}", "WARN")

    def has(self, key: str) -> bool:
        return self.get(key) is not None
