"""Argument parser construction for the loading-screen CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from loading_screen.renderers import BUILTIN_RENDERERS


def _add_runner_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--async",
        dest="use_async",
        action="store_true",
        help="Use the asyncio runner (renderer is cancelled when the task ends)",
    )
    parser.add_argument(
        "--renderer",
        "-r",
        default="donut",
        help=(
            "Built-in renderer to play "
            f"({', '.join(sorted(BUILTIN_RENDERERS))}; default: donut)"
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="loading-screen",
        description="Play a terminal loading screen while a task runs",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Debug log path (default: ~/.local/state/loading-screen/debug.log)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Sleep for a while under the loading screen",
    )
    demo_parser.add_argument(
        "--seconds",
        "-s",
        type=float,
        default=3.0,
        help="How long the demo task sleeps (default: 3)",
    )
    _add_runner_options(demo_parser)

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        help="Run a command under the loading screen and print its output",
    )
    _add_runner_options(run_parser)
    run_parser.add_argument(
        "cmd",
        nargs=argparse.REMAINDER,
        help="Command to run (prefix with -- to pass options through)",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
