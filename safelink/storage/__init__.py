"""Storage modules for SafeLink."""

from .blacklist import BlacklistStore, read_blacklist_file
from .settings import SETTING_FIELDS, SettingsStore
from .store import KeyValueStore

__all__ = [
    "BlacklistStore",
    "KeyValueStore",
    "SETTING_FIELDS",
    "SettingsStore",
    "read_blacklist_file",
]
