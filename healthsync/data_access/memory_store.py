"""In-process implementation of the Metrics Store."""

from typing import Dict, Optional

from .store import KeyValueStore


class MemoryStore(KeyValueStore):
    """Keeps serialised values in a dict. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        # Raw JSON text per key, so reads always hand back fresh copies.
        self._data: Dict[str, str] = dict(initial or {})

    def _read_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write_raw(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def _delete_raw(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return sorted(self._data)
