"""Timezone helpers."""

from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ghnotify.config import settings

DEFAULT_TIMEZONE = "UTC"


def _load_timezone(name: str, fallback: str = DEFAULT_TIMEZONE) -> tuple[ZoneInfo, str]:
    """Return a ``ZoneInfo`` instance and its canonical name with a fallback."""

    try:
        return ZoneInfo(name), name
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo(fallback), fallback


TZ, TZ_NAME = _load_timezone(settings.timezone or DEFAULT_TIMEZONE)


def now_local() -> dt.datetime:
    """Current timezone-aware datetime in the configured timezone."""

    return dt.datetime.now(TZ)


def to_local(value: dt.datetime) -> dt.datetime:
    """Convert ``value`` to the configured timezone; naive values are taken as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(TZ)
