"""Type aliases for the callables the runners coordinate."""

from collections.abc import Awaitable, Callable

# --- Sync callables ---

Renderer = Callable[[], None]
"""Paints the loading animation; blocks until its own loop ends."""

Task = Callable[[], None]
"""Caller-supplied unit of work, invoked at most once."""

# --- Async callables (accepted by the async runner only) ---

AsyncRenderer = Callable[[], Awaitable[None]]
AsyncTask = Callable[[], Awaitable[None]]
