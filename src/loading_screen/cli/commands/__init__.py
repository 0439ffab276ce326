"""CLI command handlers."""

from .demo import cmd_demo
from .run import cmd_run

__all__ = [
    "cmd_demo",
    "cmd_run",
]
