"""Demo command: sleep under the loading screen."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time

from loading_screen.errors import UnknownRendererError
from loading_screen.renderers import get_renderer
from loading_screen.runtime.async_runner import with_loading_screen_async
from loading_screen.runtime.sync_runner import with_loading_screen

logger = logging.getLogger(__name__)


def cmd_demo(args: argparse.Namespace) -> int:
    """Sleep for ``args.seconds`` while the chosen renderer plays."""
    try:
        renderer = get_renderer(args.renderer)
    except UnknownRendererError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    seconds = max(0.0, args.seconds)
    logger.info(
        "Demo: sleeping %.2fs with renderer %s (async=%s)",
        seconds,
        args.renderer,
        args.use_async,
    )

    if args.use_async:

        async def _sleep() -> None:
            await asyncio.sleep(seconds)

        asyncio.run(with_loading_screen_async(renderer, _sleep))
    else:
        with_loading_screen(renderer, lambda: time.sleep(seconds))

    print(f"Done after {seconds:g}s")
    return 0
