"""Logging for the harness itself.

The engine's verbosity is a separate concern (see `core.environment`).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def setup_logging(level: str | int | None = None, *, console: Console | None = None) -> None:
    """Send harness logs to stderr through Rich; unknown names fall back to WARNING."""

    if level is None:
        level = logging.WARNING
    if isinstance(level, str):
        level = _LEVELS.get(level.upper(), logging.WARNING)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )
