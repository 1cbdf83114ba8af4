"""Configuration management for SafeLink."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from .constants import WARNING_PREFIX
from .engine.classifier import Settings

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Application configuration loaded from environment."""

    # Paths
    data_dir: Path = field(default_factory=lambda: Path("./data"))
    config_dir: Path = field(default_factory=lambda: Path("./config"))
    store_path: Optional[Path] = None  # defaults to <data_dir>/storage.json
    blacklist_file: Optional[Path] = None  # defaults to <config_dir>/blacklist.txt

    # Presentation
    warning_prefix: str = WARNING_PREFIX

    # Initial toggle values used until the user saves settings
    default_settings: Settings = field(default_factory=Settings)

    log_level: str = "INFO"

    def __post_init__(self):
        """Resolve derived paths and make sure the data directory exists."""
        self.data_dir = Path(self.data_dir)
        self.config_dir = Path(self.config_dir)
        self.store_path = Path(self.store_path) if self.store_path else self.data_dir / "storage.json"
        self.blacklist_file = (
            Path(self.blacklist_file) if self.blacklist_file else self.config_dir / "blacklist.txt"
        )
        self.log_level = (self.log_level or "INFO").upper()

        self.data_dir.mkdir(parents=True, exist_ok=True)


def _load_overrides(config_dir: Path) -> dict:
    """Load overrides from config/safelink.yaml (optional)."""
    path = Path(config_dir or ".") / "safelink.yaml"
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except Exception as exc:
        logger.warning("Failed to parse safelink.yaml: %s", exc)
        return {}
    if not isinstance(data, dict):
        return {}

    overrides: dict = {}
    settings_cfg = data.get("settings")
    if isinstance(settings_cfg, dict):
        overrides["default_settings"] = Settings(
            check_http=bool(settings_cfg.get("check_http", True)),
            check_blacklist=bool(settings_cfg.get("check_blacklist", True)),
            check_imposter=bool(settings_cfg.get("check_imposter", True)),
        )

    prefix = str(data.get("warning_prefix") or "").strip()
    if prefix:
        overrides["warning_prefix"] = prefix

    return overrides


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv()

    config_dir = Path(os.getenv("SAFELINK_CONFIG_DIR", "./config"))
    overrides = _load_overrides(config_dir)

    store_path = os.getenv("SAFELINK_STORE_PATH", "").strip()
    blacklist_file = os.getenv("SAFELINK_BLACKLIST_FILE", "").strip()
    prefix = os.getenv("SAFELINK_WARNING_PREFIX", "").strip()

    return Config(
        data_dir=Path(os.getenv("SAFELINK_DATA_DIR", "./data")),
        config_dir=config_dir,
        store_path=Path(store_path) if store_path else None,
        blacklist_file=Path(blacklist_file) if blacklist_file else None,
        warning_prefix=prefix or overrides.get("warning_prefix", WARNING_PREFIX),
        default_settings=overrides.get("default_settings", Settings()),
        log_level=os.getenv("SAFELINK_LOG_LEVEL", "INFO"),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages."""
    errors: list[str] = []
    if config.log_level not in LOG_LEVELS:
        errors.append(f"SAFELINK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    if not (config.warning_prefix or "").strip():
        errors.append("Warning prefix must not be empty")
    if config.store_path and config.store_path.exists() and config.store_path.is_dir():
        errors.append(f"Store path {config.store_path} is a directory")

    if not config.blacklist_file.exists():
        # First run will start with an empty blacklist.
        logger.info("No blacklist file at %s; blacklist will start empty", config.blacklist_file)

    return errors
