"""the beautiful world start from here."""

from __future__ import annotations

from fastapi import FastAPI

from ghnotify.log import configure_logging
from ghnotify.routers import gh, info

configure_logging()

app = FastAPI(title="GitHub → Telegram renderer")

app.include_router(info.router)
app.include_router(gh.router)
