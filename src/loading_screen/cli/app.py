"""CLI orchestration and command routing."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from loading_screen.cli.commands import cmd_demo, cmd_run
from loading_screen.cli.parser import build_parser, parse_args

logger = logging.getLogger(__name__)


def dispatch(args: argparse.Namespace) -> int:
    """Route parsed args to the correct command handler."""
    command_handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "demo": cmd_demo,
        "run": cmd_run,
    }

    handler = command_handlers.get(args.command) if args.command else None
    if handler is None:
        build_parser().print_help()
        return 1

    return handler(args)


def run(
    argv: Sequence[str] | None = None,
    *,
    configure_logging: Callable[[Path | None], None] | None = None,
) -> int:
    """Parse args, apply shared CLI setup, and execute command."""
    args = parse_args(argv)

    if configure_logging is not None:
        configure_logging(args.log_file)

    logger.info("Command: %s", args.command)
    return dispatch(args)
