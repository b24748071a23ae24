"""JSON file-based implementation of the Metrics Store."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote, unquote

from healthsync.config import settings
from .store import KeyValueStore


class JsonStore(KeyValueStore):
    """Metrics Store that keeps one JSON file per key on disk."""

    def __init__(self, root: Optional[Path] = None):
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path:
        # Resolved lazily so a patched settings.PROJECT_ROOT is honoured.
        return self._root if self._root is not None else settings.store_path

    def _path(self, key: str) -> Path:
        return self.root / f"{quote(key, safe='')}.json"

    def _read_raw(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write_raw(self, key: str, raw: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            f.write(raw)
        os.replace(tmp, path)

    def _delete_raw(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> List[str]:
        if not self.root.exists():
            return []
        return sorted(unquote(p.stem) for p in self.root.glob("*.json"))
