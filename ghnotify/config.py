"""the beautiful world start from here."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    webhook_secret: str = os.getenv("GITHUB_WEBHOOK_SECRET", "")
    timezone: str = os.getenv("TIMEZONE", "UTC")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
