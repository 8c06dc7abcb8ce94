"""Logging setup for the CLI.

Log records go to stderr through Rich so they never mix with table output
on stdout. ``setup_logging`` only attaches a handler the first time it is
called; later calls just adjust the level.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Configure the ``stackctl`` logger at ``level`` (case insensitive)."""
    logger = logging.getLogger("stackctl")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
