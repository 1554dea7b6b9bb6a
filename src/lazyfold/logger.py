"""
Logging for the lazyfold package.

Package modules log to children of the ``lazyfold`` logger. It carries only
a NullHandler, so records go wherever the application's logging sends them;
its level follows the configured ``log_level``. Scripts without logging
setup of their own can call ``setup_logger`` to print to stderr.
"""

import logging
import sys

from .config import LOGGER_NAME, get_settings

__all__ = ["logger", "setup_logger"]

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
logger.setLevel(get_settings().log_level.upper())


def setup_logger(
    level: str | None = None,
    format_string: str | None = None,
    stream=None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Leaves the
            current level alone when omitted.
        format_string: Custom format string
        stream: Where to write; stderr by default.

    Returns:
        The package logger. Calling again does not add a second handler.
    """
    if level is not None:
        logger.setLevel(level.upper())

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        format_string = format_string or (
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = logging.StreamHandler(stream or sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
