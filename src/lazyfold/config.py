"""Runtime settings for lazyfold."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

__all__ = ["Settings", "get_settings", "configure"]

LOGGER_NAME = "lazyfold"


@dataclass(frozen=True)
class Settings:
    """
    Package-wide knobs.

    Attributes:
        repr_limit: Maximum number of already-evaluated elements shown by
            ``repr(LazyList)``.
        log_level: Level name for the ``lazyfold`` logger.
    """

    repr_limit: int = 20
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.repr_limit < 0:
            raise ValueError(f"repr_limit must be non-negative, got {self.repr_limit}")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``LAZYFOLD_REPR_LIMIT`` and ``LAZYFOLD_LOG_LEVEL``."""
        return cls(
            repr_limit=int(os.getenv("LAZYFOLD_REPR_LIMIT", cls.repr_limit)),
            log_level=os.getenv("LAZYFOLD_LOG_LEVEL", cls.log_level),
        )


_settings = Settings.from_env()


def get_settings() -> Settings:
    return _settings


def configure(**changes) -> Settings:
    """
    Replace the active settings with a copy carrying ``changes``.

    A new ``log_level`` is applied to the package logger straight away.
    """
    global _settings
    _settings = replace(_settings, **changes)
    if "log_level" in changes:
        logging.getLogger(LOGGER_NAME).setLevel(_settings.log_level.upper())
    return _settings
