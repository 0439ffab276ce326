"""Single-line spinner renderer."""

from __future__ import annotations

import time

from rich.console import Console

from loading_screen.runtime.completion import cancellation_requested

DEFAULT_DURATION_SECONDS = 2.0
_CHECK_INTERVAL_SECONDS = 0.05


class SpinnerRenderer:
    """Show a rich status spinner for a fixed duration.

    Stops early when the async runner cancels it.
    """

    def __init__(
        self,
        message: str = "Loading...",
        *,
        duration_seconds: float = DEFAULT_DURATION_SECONDS,
        spinner_name: str = "dots",
        console: Console | None = None,
    ) -> None:
        self.message = message
        self.duration_seconds = duration_seconds
        self.spinner_name = spinner_name
        self._console = console
        self.finished = False

    def __repr__(self) -> str:
        return f"SpinnerRenderer(message={self.message!r})"

    def __call__(self) -> None:
        console = self._console or Console()
        self.finished = False
        deadline = time.monotonic() + self.duration_seconds
        with console.status(f"[bold blue]{self.message}[/]", spinner=self.spinner_name):
            while time.monotonic() < deadline:
                if cancellation_requested():
                    return
                time.sleep(min(_CHECK_INTERVAL_SECONDS, self.duration_seconds))
        self.finished = True


def spinner() -> None:
    """Play the default spinner to completion."""
    SpinnerRenderer()()
