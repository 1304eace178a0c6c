"""Package logger for sortedsearch.

The search routines themselves never log. Records come from the seams:
sortedness validation (``sortedsearch.core.types``, a child of this logger)
and the example runner.
"""

import logging
import sys
from typing import TextIO

from sortedsearch.core.config import Settings

__all__ = ["logger", "setup_logger"]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "sortedsearch",
    level: str | None = None,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing to a single stream handler.

    Environment settings are only consulted for what the caller leaves out, so an
    explicit ``level`` works whatever ``LOG_LEVEL`` holds.

    Args:
        name: Logger name. Children (``sortedsearch.core.types``) inherit the handler.
        level: Log level name. Defaults to ``Settings.load().LOG_LEVEL``.
        format_string: Record format. Defaults to ``Settings.load().LOG_FORMAT``.
        stream: Output stream, ``sys.stdout`` when omitted.

    Returns:
        The logger. A logger that already has handlers is returned untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if level is None or format_string is None:
        settings = Settings.load()
        level = level or settings.LOG_LEVEL
        format_string = format_string or settings.LOG_FORMAT

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=format_string, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False

    return logger


logger = setup_logger()
