"""Logging setup shared by the API server and the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "quizcraft"


def configure_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """
    Attach a Rich handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Level name such as "INFO" or "DEBUG"
        console: Console to render to (stderr by default)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logger.setLevel(numeric)

    if not any(getattr(h, "_quizcraft_handler", False) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        handler._quizcraft_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False

    return logger
