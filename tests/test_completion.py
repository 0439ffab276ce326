"""Tests for the completion latch and cancellation token."""

from __future__ import annotations

import asyncio
import threading
import time

import pytest

from loading_screen.runtime.completion import (
    CancellationToken,
    CompletionSignal,
    bind_cancellation_token,
    cancellation_requested,
)


def test_completion_signal_starts_unset() -> None:
    signal = CompletionSignal()

    assert not signal.is_set()
    assert signal.wait(0.01) is False


def test_completion_signal_set_once() -> None:
    signal = CompletionSignal()
    signal.set()

    assert signal.is_set()
    assert signal.wait(0) is True
    with pytest.raises(RuntimeError):
        signal.set()


def test_completion_signal_wakes_waiter_before_timeout() -> None:
    signal = CompletionSignal()
    setter = threading.Timer(0.05, signal.set)
    setter.start()

    started = time.monotonic()
    assert signal.wait(5.0) is True
    setter.join()

    assert time.monotonic() - started < 2.0


def test_cancellation_token_flags_once_cancelled() -> None:
    token = CancellationToken()
    assert token.cancelled is False

    token.cancel()

    assert token.cancelled is True


def test_cancellation_requested_is_false_without_bound_token() -> None:
    assert cancellation_requested() is False


def test_bound_token_is_visible_in_worker_thread() -> None:
    token = CancellationToken()
    seen: list[bool] = []

    async def scenario() -> None:
        bind_cancellation_token(token)
        token.cancel()
        seen.append(await asyncio.to_thread(cancellation_requested))

    asyncio.run(scenario())

    assert seen == [True]
    # The binding stayed inside the event loop's context.
    assert cancellation_requested() is False
