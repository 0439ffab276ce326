"""Where loading-screen keeps its settings file and debug log.

Only two XDG base directories are used:
- $XDG_CONFIG_HOME/loading-screen/settings.json for persistent settings
- $XDG_STATE_HOME/loading-screen/debug.log for the CLI debug log
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

APP_DIR_NAME = "loading-screen"


def _base_dir(env_var: str, fallback: Path) -> Path:
    value = os.environ.get(env_var)
    return Path(value) if value else fallback


def _config_base() -> Path:
    return _base_dir("XDG_CONFIG_HOME", Path.home() / ".config")


def _state_base() -> Path:
    return _base_dir("XDG_STATE_HOME", Path.home() / ".local" / "state")


@dataclass
class LoadingScreenPaths:
    """Settings and log locations, resolved once from the environment."""

    _config_home: Path = field(default_factory=_config_base)
    _state_home: Path = field(default_factory=_state_base)

    @property
    def global_config_dir(self) -> Path:
        return self._config_home / APP_DIR_NAME

    @property
    def global_settings(self) -> Path:
        """JSON file read by :class:`loading_screen.config.settings.Settings`."""
        return self.global_config_dir / "settings.json"

    @property
    def global_state_dir(self) -> Path:
        return self._state_home / APP_DIR_NAME

    @property
    def debug_log(self) -> Path:
        """Default target of the CLI file logger."""
        return self.global_state_dir / "debug.log"

    def ensure_global_dirs(self) -> None:
        """Create the config and state directories if missing."""
        self.global_config_dir.mkdir(parents=True, exist_ok=True)
        self.global_state_dir.mkdir(parents=True, exist_ok=True)


_paths: LoadingScreenPaths | None = None


def get_paths() -> LoadingScreenPaths:
    """Return the shared paths, resolving them on first use.

    Later changes to the XDG variables are picked up only after
    :func:`reset_paths`.
    """
    global _paths
    if _paths is None:
        _paths = LoadingScreenPaths()
    return _paths


def reset_paths() -> None:
    """Forget the resolved paths so the next call re-reads the environment."""
    global _paths
    _paths = None
