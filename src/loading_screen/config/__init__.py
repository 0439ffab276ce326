"""Configuration management for loading-screen."""
from __future__ import annotations

from loading_screen.config.paths import LoadingScreenPaths, get_paths, reset_paths
from loading_screen.config.settings import Settings, get_settings_path, settings

__all__ = [
    "LoadingScreenPaths",
    "Settings",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
