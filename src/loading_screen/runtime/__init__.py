"""Runtime primitives shared by the runners and the renderers.

The runners themselves live in :mod:`loading_screen.runtime.sync_runner` and
:mod:`loading_screen.runtime.async_runner`; they are not imported here so the
renderers can depend on this package without a cycle.
"""

from loading_screen.runtime.completion import (
    CancellationToken,
    CompletionSignal,
    cancellation_requested,
)

__all__ = [
    "CancellationToken",
    "CompletionSignal",
    "cancellation_requested",
]
