"""Loguru sink setup shared by the HTTP and CLI entry points."""

from __future__ import annotations

import sys

from loguru import logger

from ghnotify.config import settings

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level), format=LOG_FORMAT)
