"""Settings persistence."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..constants import SETTINGS_KEY
from ..engine.classifier import Settings
from .store import KeyValueStore

logger = logging.getLogger(__name__)

# CLI/toggle names -> Settings field
SETTING_FIELDS = {
    "http": "check_http",
    "blacklist": "check_blacklist",
    "imposter": "check_imposter",
}


class SettingsStore:
    """Loads and saves the three check toggles."""

    def __init__(self, store: KeyValueStore, defaults: Optional[Settings] = None):
        self.store = store
        self.defaults = defaults or Settings()

    def load(self) -> Settings:
        """Current settings; flags that were never saved fall back to defaults."""
        raw = self.store.get(SETTINGS_KEY)
        if not isinstance(raw, dict):
            return self.defaults
        merged = {**self.defaults.to_mapping(), **{k: v for k, v in raw.items() if v is not None}}
        return Settings.from_mapping(merged)

    def save(self, settings: Settings) -> None:
        self.store.set({SETTINGS_KEY: settings.to_mapping()})

    def set_flag(self, name: str, enabled: bool) -> Settings:
        """Flip a single toggle by its short name (http, blacklist, imposter)."""
        field_name = SETTING_FIELDS.get(name)
        if field_name is None:
            raise ValueError(f"Unknown setting: {name}")
        updated = replace(self.load(), **{field_name: bool(enabled)})
        self.save(updated)
        logger.info("Setting %s %s", name, "enabled" if enabled else "disabled")
        return updated
