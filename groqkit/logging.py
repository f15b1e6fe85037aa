"""
Console logging for groqkit.

The library only creates loggers under the ``groqkit`` namespace; nothing
is printed until an application calls ``configure_logging()``.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "groqkit"
LOG_LEVEL_ENV = "GROQ_LOG"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class TransportErrorHighlightingHandler(RichHandler):
    """RichHandler that makes network failures stand out."""

    MARKERS = ("Network error", "Request timed out")

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record with transport error highlighting."""
        message = self.format(record)
        is_transport_error = any(marker in message for marker in self.MARKERS)

        if is_transport_error and record.levelno >= logging.ERROR:
            console = self.console
            console.print()
            console.print(f"[bold red on yellow]⚠ {message}[/bold red on yellow]", markup=True)
            console.print("[yellow]Tip: Check the base URL and that the API is reachable[/yellow]")
            console.print()
        else:
            super().emit(record)


def resolve_level(level: Union[str, int, None] = None) -> int:
    """Resolve a level from an argument, ``GROQ_LOG``, or default WARNING."""
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV) or "").strip().lower()
    return _LEVELS.get(name, logging.WARNING)


def configure_logging(level: Union[str, int, None] = None,
                      console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a Rich console handler to the ``groqkit`` logger.

    Calling it again replaces the previous handler instead of stacking
    another one.

    Args:
        level: Level name or number; falls back to ``GROQ_LOG``
        console: Rich console to print to

    Returns:
        The configured ``groqkit`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    # Disable propagation to avoid duplicate logs when root logger also has handlers
    logger.propagate = False

    for handler in list(logger.handlers):
        if isinstance(handler, TransportErrorHighlightingHandler):
            logger.removeHandler(handler)

    handler = TransportErrorHighlightingHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    return logger
