"""Ruter Ingfo?"""

from __future__ import annotations

from textwrap import dedent

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ghnotify.services.render import ALLOWED_ACTIONS
from ghnotify.timezone import TZ_NAME
from ghnotify.utils import HELP_TEXT

router = APIRouter()


def _supported_events() -> str:
    lines = []
    for event, actions in ALLOWED_ACTIONS.items():
        allowed = ", ".join(sorted(actions)) if actions else "any action"
        lines.append(f"- {event}: {allowed}")
    return "\n".join(lines)


def render_help_text() -> str:
    """Plain-text summary of endpoints and supported events."""
    return dedent(
        """
GitHub → Telegram Renderer (HTTP Help)

Endpoints
---------
- GET  /      : Health check
- GET  /help  : This text
- POST /wh    : Render a GitHub delivery (X-GitHub-Event header required)

Usage
-----
{usage}

Supported events
----------------
{events}

Notes
-----
- Push footers are dated in {tz}.
"""
    ).strip().format(usage=HELP_TEXT, events=_supported_events(), tz=TZ_NAME)


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    return "ok"


@router.get("/help", response_class=PlainTextResponse)
async def http_help() -> str:
    return render_help_text()
