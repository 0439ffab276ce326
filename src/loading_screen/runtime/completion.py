"""One-shot signals shared between runners and renderers."""

from __future__ import annotations

import threading
from contextvars import ContextVar


class CompletionSignal:
    """Latch set once by the renderer thread after the renderer returned.

    The flag is guarded by a single lock. Waiters release the lock while
    they sleep, so it is only held for one read or the single write.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._done = False

    def set(self) -> None:
        """Mark the renderer as finished and wake any waiter."""
        with self._condition:
            if self._done:
                raise RuntimeError("Completion signal already set")
            self._done = True
            self._condition.notify_all()

    def is_set(self) -> bool:
        with self._condition:
            return self._done

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the signal is set or ``timeout`` elapses.

        Returns the flag value observed when the wait ended.
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._done, timeout=timeout)


class CancellationToken:
    """Thread-safe stop request handed to a renderer by the async runner."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


_current_token: ContextVar[CancellationToken | None] = ContextVar(
    "loading_screen_cancellation_token", default=None
)


def bind_cancellation_token(token: CancellationToken) -> None:
    """Bind ``token`` to the current context.

    ``asyncio.to_thread`` copies the context, so a renderer running in a
    worker thread sees the token bound by its scheduling task.
    """
    _current_token.set(token)


def cancellation_requested() -> bool:
    """Return True once the runner asked the current renderer to stop.

    Always False outside the async runner.
    """
    token = _current_token.get()
    return token is not None and token.cancelled
