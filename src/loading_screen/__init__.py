"""Play a terminal loading screen while a task runs.

Synchronous usage::

    from loading_screen import with_loading_screen

    with_loading_screen(None, do_work)

Asynchronous usage::

    from loading_screen import with_loading_screen_async

    await with_loading_screen_async(None, do_work)

The default animation is a spinning donut; pass any zero-argument callable
as the first argument to use your own.
"""

from loading_screen.renderers import (
    DonutRenderer,
    SpinnerRenderer,
    donut,
    get_renderer,
    spinner,
)
from loading_screen.runtime.async_runner import with_loading_screen_async
from loading_screen.runtime.completion import (
    CancellationToken,
    CompletionSignal,
    cancellation_requested,
)
from loading_screen.runtime.sync_runner import with_loading_screen

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "CompletionSignal",
    "DonutRenderer",
    "SpinnerRenderer",
    "cancellation_requested",
    "donut",
    "get_renderer",
    "spinner",
    "with_loading_screen",
    "with_loading_screen_async",
]
