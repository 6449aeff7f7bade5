"""Logging configuration for the todo command."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Send todo's log records to stderr through rich.

    WARNING and above by default, everything with verbose. Safe to call
    more than once; the previous handler is replaced.
    """
    logger = logging.getLogger("todo")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
