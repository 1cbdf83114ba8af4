"""Global pytest configuration."""

from __future__ import annotations

import pytest

from safelink.storage import BlacklistStore, KeyValueStore, SettingsStore


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config lookups inside the test's temporary directory."""
    for name in (
        "SAFELINK_STORE_PATH",
        "SAFELINK_BLACKLIST_FILE",
        "SAFELINK_WARNING_PREFIX",
        "SAFELINK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SAFELINK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("SAFELINK_CONFIG_DIR", str(tmp_path / "config"))
    (tmp_path / "config").mkdir()
    return tmp_path


@pytest.fixture
def store(tmp_path):
    """Empty key-value store on disk."""
    return KeyValueStore(tmp_path / "data" / "storage.json")


@pytest.fixture
def blacklist_store(store):
    return BlacklistStore(store)


@pytest.fixture
def settings_store(store):
    return SettingsStore(store)
