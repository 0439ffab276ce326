"""Built-in renderers."""

from __future__ import annotations

from loading_screen.errors import UnknownRendererError
from loading_screen.renderers.donut import DonutRenderer, donut
from loading_screen.renderers.spinner import SpinnerRenderer, spinner
from loading_screen.runtime.types import Renderer

BUILTIN_RENDERERS: dict[str, Renderer] = {
    "donut": donut,
    "spinner": spinner,
}


def get_renderer(name: str) -> Renderer:
    """Resolve a built-in renderer by name."""
    key = name.strip().lower()
    if key not in BUILTIN_RENDERERS:
        raise UnknownRendererError(name, tuple(sorted(BUILTIN_RENDERERS)))
    return BUILTIN_RENDERERS[key]


__all__ = [
    "BUILTIN_RENDERERS",
    "DonutRenderer",
    "SpinnerRenderer",
    "donut",
    "get_renderer",
    "spinner",
]
