"""Thread-based runner: play the loading screen while a blocking task runs."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from loading_screen.config.settings import settings
from loading_screen.renderers.donut import donut
from loading_screen.runtime.completion import CompletionSignal
from loading_screen.runtime.types import Renderer, Task

logger = logging.getLogger(__name__)


class _WorkerThread(threading.Thread):
    """Daemon thread that keeps the exception its target raised."""

    def __init__(self, target: Callable[[], None], *, name: str) -> None:
        super().__init__(name=name, daemon=True)
        self._target_fn = target
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self._target_fn()
        except BaseException as exc:
            self.error = exc


def with_loading_screen(
    renderer: Renderer | None,
    task: Task,
    *,
    poll_interval_seconds: float | None = None,
) -> None:
    """Run ``task`` on its own thread while ``renderer`` plays on another.

    Blocks until the task has finished and the renderer has reached its
    natural end; the animation is never cut short. An exception raised by
    the task is re-raised here once the renderer thread has been joined.

    Args:
        renderer: Zero-argument blocking renderer. Defaults to the donut.
        task: Zero-argument callable to execute.
        poll_interval_seconds: Interval between renderer completion checks.
            Defaults to ``settings.poll_interval_seconds``.

    Raises:
        ValueError: If ``poll_interval_seconds`` is not positive. Nothing is
            started in that case.
    """
    render = renderer if renderer is not None else donut
    if poll_interval_seconds is None:
        interval = settings.poll_interval_seconds
    elif poll_interval_seconds <= 0:
        raise ValueError(
            f"poll_interval_seconds must be positive, got {poll_interval_seconds}"
        )
    else:
        interval = poll_interval_seconds
    done = CompletionSignal()

    def _render_then_signal() -> None:
        try:
            render()
        finally:
            done.set()

    renderer_thread = _WorkerThread(
        _render_then_signal, name="loading-screen-renderer"
    )
    task_thread = _WorkerThread(task, name="loading-screen-task")

    logger.debug("Starting loading screen with renderer %r", render)
    renderer_thread.start()
    task_thread.start()

    task_thread.join()
    if task_thread.error is not None:
        logger.debug("Task raised %r, waiting for renderer", task_thread.error)

    while not done.wait(interval):
        pass

    renderer_thread.join()
    if renderer_thread.error is not None:
        logger.warning(
            "Renderer %r failed", render, exc_info=renderer_thread.error
        )

    logger.debug("Loading screen finished")
    if task_thread.error is not None:
        raise task_thread.error
