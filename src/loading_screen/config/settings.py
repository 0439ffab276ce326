"""Configuration and settings persistence."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from loading_screen.config.paths import get_paths

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 0.1
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV_VAR = "LOADING_SCREEN_LOG_LEVEL"


def get_config_dir() -> Path:
    """Get the loading-screen config directory, creating if needed.

    Returns XDG-compliant path: ~/.config/loading-screen/
    """
    config_dir = get_paths().global_config_dir
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


class Settings:
    """Persistent settings for loading-screen."""

    _defaults: dict[str, Any] = {
        "poll_interval_seconds": DEFAULT_POLL_INTERVAL_SECONDS,
        "log_level": DEFAULT_LOG_LEVEL,
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                loaded = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                loaded = {}
            self._data = loaded if isinstance(loaded, dict) else {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            get_config_dir()
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    @property
    def poll_interval_seconds(self) -> float:
        """Interval the synchronous runner waits between renderer checks.

        Invalid or non-positive values fall back to the default of 100ms.
        """
        raw_value = self._data.get("poll_interval_seconds")
        if raw_value in (None, ""):
            return DEFAULT_POLL_INTERVAL_SECONDS
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            return DEFAULT_POLL_INTERVAL_SECONDS
        if value <= 0:
            return DEFAULT_POLL_INTERVAL_SECONDS
        return value

    @poll_interval_seconds.setter
    def poll_interval_seconds(self, value: float | None) -> None:
        """Set the poll interval; None or a non-positive value resets it."""
        if value is None or value <= 0:
            self._data.pop("poll_interval_seconds", None)
            self._save()
        else:
            self.set("poll_interval_seconds", float(value))

    @property
    def log_level(self) -> str:
        """Get the log level name.

        Priority: LOADING_SCREEN_LOG_LEVEL env var > settings > INFO
        """
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_level:
            return env_level.strip().upper()
        saved = self._data.get("log_level")
        if saved:
            return str(saved).strip().upper()
        return DEFAULT_LOG_LEVEL

    @log_level.setter
    def log_level(self, value: str) -> None:
        """Set the log level name."""
        self.set("log_level", str(value).strip().upper())


# Global settings instance
settings = Settings()
