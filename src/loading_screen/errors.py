"""Exceptions raised by loading-screen."""

from __future__ import annotations


class LoadingScreenError(Exception):
    """Base exception for loading-screen errors."""

    pass


class UnknownRendererError(LoadingScreenError, ValueError):
    """Raised when a built-in renderer is requested by an unknown name."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown renderer '{name}' (available: {', '.join(available)})"
        )
