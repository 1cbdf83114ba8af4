"""Blacklist persistence and editing."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from ..constants import BLACKLIST_KEY
from ..utils.domains import clean_blacklist_entry
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def read_blacklist_file(path: Path) -> list[str]:
    """Read blacklist entries from a text file (one per line, file order kept)."""
    entries: list[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        value = line.strip().lower()
        if not value or value.startswith("#"):
            continue
        if value not in entries:
            entries.append(value)
    return entries


class BlacklistStore:
    """Reads and edits the blacklist kept under the well-known storage key."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._lock = threading.Lock()

    def initialize(self, seed_path: Path) -> bool:
        """Seed storage from the bundled blacklist file on first run.

        Does nothing when a blacklist is already stored, even an empty one.
        Returns True when the seed was written.
        """
        with self._lock:
            if self.store.contains(BLACKLIST_KEY):
                return False
            try:
                entries = read_blacklist_file(seed_path)
            except OSError as exc:
                logger.error("Failed to initialize blacklist from %s: %s", seed_path, exc)
                return False
            self.store.set({BLACKLIST_KEY: entries})
        logger.info("Initial blacklist loaded into storage (%d domains)", len(entries))
        return True

    def entries(self) -> tuple[str, ...]:
        """Snapshot of the current blacklist."""
        raw = self.store.get(BLACKLIST_KEY) or []
        if not isinstance(raw, list):
            logger.warning("Stored blacklist is not a list; treating as empty")
            return ()
        return tuple(item for item in raw if isinstance(item, str) and item.strip())

    def add(self, value: str) -> Optional[str]:
        """Add a domain after normalizing it. Returns the stored entry, or None
        when the input was empty or already listed."""
        clean = clean_blacklist_entry(value)
        if not clean:
            return None
        with self._lock:
            current = list(self.entries())
            if clean in current:
                logger.debug("Blacklist already contains %s", clean)
                return None
            current.append(clean)
            self.store.set({BLACKLIST_KEY: current})
        logger.info("Added %s to blacklist", clean)
        return clean

    def remove(self, index: int) -> Optional[str]:
        """Remove the entry at a position. Out-of-range positions are ignored."""
        with self._lock:
            current = list(self.entries())
            if index < 0 or index >= len(current):
                logger.warning("No blacklist entry at position %d", index)
                return None
            removed = current.pop(index)
            self.store.set({BLACKLIST_KEY: current})
        logger.info("Removed %s from blacklist", removed)
        return removed
