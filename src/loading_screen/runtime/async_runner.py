"""Asyncio runner: play the loading screen while an awaited task runs."""

from __future__ import annotations

import asyncio
import inspect
import logging

from loading_screen.renderers.donut import donut
from loading_screen.runtime.completion import (
    CancellationToken,
    bind_cancellation_token,
)
from loading_screen.runtime.types import AsyncRenderer, AsyncTask, Renderer, Task

logger = logging.getLogger(__name__)

# Strong references for tasks the caller no longer awaits.
_background_tasks: set[asyncio.Task[None]] = set()


async def _call(fn: Renderer | Task | AsyncRenderer | AsyncTask) -> None:
    if inspect.iscoroutinefunction(fn):
        await fn()
        return
    # Callable objects with an async __call__, or lambdas returning a
    # coroutine, only reveal the awaitable once called.
    result = await asyncio.to_thread(fn)
    if inspect.isawaitable(result):
        await result


async def _render(render: Renderer | AsyncRenderer, token: CancellationToken) -> None:
    bind_cancellation_token(token)
    await _call(render)


def _forget_renderer(renderer_task: asyncio.Task[None]) -> None:
    _background_tasks.discard(renderer_task)
    if renderer_task.cancelled():
        return
    exc = renderer_task.exception()
    if exc is not None:
        logger.debug("Renderer ended with %r after cancellation", exc, exc_info=exc)


class _WorkTaskWatcher:
    """Done callback that reports task faults nobody is awaiting anymore."""

    def __init__(self) -> None:
        self.abandoned = False

    def __call__(self, work_task: asyncio.Task[None]) -> None:
        _background_tasks.discard(work_task)
        if work_task.cancelled():
            return
        exc = work_task.exception()
        if exc is not None and self.abandoned:
            logger.error(
                "Task failed after its caller was cancelled", exc_info=exc
            )


async def with_loading_screen_async(
    renderer: Renderer | AsyncRenderer | None,
    task: Task | AsyncTask,
) -> None:
    """Run ``task`` while ``renderer`` plays, then cancel the renderer.

    Coroutine functions are awaited on the running loop; other callables
    are called in a worker thread via :func:`asyncio.to_thread`, and an
    awaitable they return is awaited on the loop. The task is never
    cancelled, even when the caller is; a fault it raises after that point
    is logged. Once it settles the renderer is cancelled without waiting
    for it to acknowledge, so the animation may stop mid-frame. Exceptions
    raised by the task propagate to the caller.
    """
    render = renderer if renderer is not None else donut
    token = CancellationToken()

    renderer_task = asyncio.create_task(
        _render(render, token), name="loading-screen-renderer"
    )
    _background_tasks.add(renderer_task)
    renderer_task.add_done_callback(_forget_renderer)

    watcher = _WorkTaskWatcher()
    work_task = asyncio.create_task(_call(task), name="loading-screen-task")
    _background_tasks.add(work_task)
    work_task.add_done_callback(watcher)

    logger.debug("Starting async loading screen with renderer %r", render)
    try:
        await asyncio.shield(work_task)
    except asyncio.CancelledError:
        if not work_task.done():
            watcher.abandoned = True
        raise
    finally:
        token.cancel()
        renderer_task.cancel()
        logger.debug("Requested renderer cancellation")
