"""Loguru sink configuration."""

from __future__ import annotations

import sys

from loguru import logger

from mailcraft.infrastructure.settings import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: Settings, sink=sys.stderr) -> int:
    """Replace the default loguru sink; returns the new handler id."""
    level = "DEBUG" if settings.debug else settings.log_level
    logger.remove()
    return logger.add(sink, format=LOG_FORMAT, level=level)
