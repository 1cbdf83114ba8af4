"""JSON-file key-value store for SafeLink state."""

from __future__ import annotations

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Small persistent key-value store backed by a single JSON object on disk.

    Usage:
        store = KeyValueStore(Path("data/storage.json"))
        store.set({"safelink_blacklist": ["evil.com"]})
        store.get("safelink_blacklist", [])

    Values handed out are deep copies, so callers can never mutate stored
    state in place. Writes go through a temporary file and an atomic replace.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Failed to read store %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: top-level value is not an object", self.path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        tmp_path.replace(self.path)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a single value (deep copy), or default when absent."""
        with self._lock:
            data = self._read()
        if key not in data:
            return default
        return copy.deepcopy(data[key])

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._read()

    def set(self, items: dict[str, Any]) -> None:
        """Merge items into the store and persist."""
        with self._lock:
            data = self._read()
            data.update(copy.deepcopy(items))
            self._write(data)
