"""Run a subprocess under the loading screen."""

from __future__ import annotations

import argparse
import asyncio
import logging
import shlex
import subprocess
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

from loading_screen.errors import UnknownRendererError
from loading_screen.renderers import get_renderer
from loading_screen.runtime.async_runner import with_loading_screen_async
from loading_screen.runtime.sync_runner import with_loading_screen

logger = logging.getLogger(__name__)

# Exit code shells use for "command not found".
COMMAND_NOT_FOUND_EXIT_CODE = 127


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of one subprocess run."""

    command: str
    exit_code: int
    stdout: str
    stderr: str
    duration_seconds: float


class CommandTask:
    """Zero-argument task wrapping a subprocess; keeps the result."""

    def __init__(self, command: Sequence[str]) -> None:
        self.command = list(command)
        self.result: CommandResult | None = None

    def __call__(self) -> None:
        started_at = time.perf_counter()
        completed = subprocess.run(
            self.command,
            capture_output=True,
            text=True,
            check=False,
        )
        self.result = CommandResult(
            command=_format_command(self.command),
            exit_code=completed.returncode,
            stdout=_decode_stream(completed.stdout),
            stderr=_decode_stream(completed.stderr),
            duration_seconds=time.perf_counter() - started_at,
        )


def cmd_run(args: argparse.Namespace) -> int:
    """Run ``args.cmd`` while the loading screen plays, then echo its output."""
    command = list(args.cmd)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        print("Error: No command given", file=sys.stderr)
        return 2

    try:
        renderer = get_renderer(args.renderer)
    except UnknownRendererError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    task = CommandTask(command)
    logger.info("Running %s (async=%s)", _format_command(command), args.use_async)
    try:
        if args.use_async:
            asyncio.run(with_loading_screen_async(renderer, task))
        else:
            with_loading_screen(renderer, task)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error("Command not found: %s", command[0])
        return COMMAND_NOT_FOUND_EXIT_CODE

    result = task.result
    if result is None:
        return 1

    logger.info(
        "Command finished with exit code %d in %.2fs",
        result.exit_code,
        result.duration_seconds,
    )
    if result.stdout:
        sys.stdout.write(result.stdout)
    if result.stderr:
        sys.stderr.write(result.stderr)
    return result.exit_code


def _decode_stream(data: str | bytes | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data


def _format_command(command: Sequence[str]) -> str:
    return shlex.join([str(part) for part in command])
