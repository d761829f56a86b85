"""Logging configuration (Rich handler on stderr).

Stdout is reserved for the result line, so every log record goes to stderr.
Only the `ght` logger tree is configured; the root logger is left alone.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "ght-rich"


def setup_logging(log_level: str = "WARNING") -> None:
    """Attach a single RichHandler to the `ght` logger at `log_level`."""

    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger("ght")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
