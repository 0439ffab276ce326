"""Main module for loading-screen."""

import logging
import sys
from pathlib import Path

from loading_screen.cli import run
from loading_screen.config.paths import get_paths
from loading_screen.config.settings import settings


def setup_logging(log_file: Path | None = None) -> None:
    """Configure logging to file so log lines never tear the animation."""
    if log_file is None:
        paths = get_paths()
        paths.ensure_global_dirs()
        log_file = paths.debug_log
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    level = settings.log_level

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("loading-screen starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the loading-screen command."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
