"""Ruter GH?"""

from __future__ import annotations

import json

from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from ghnotify.config import settings
from ghnotify.exceptions import RenderError
from ghnotify.schemas import parse_event
from ghnotify.services.render import render
from ghnotify.utils import gh_verify

router = APIRouter(prefix="/wh", tags=["github"])


@router.post("")
async def github_webhook(
    request: Request,
    x_hub_signature_256: str | None = Header(None),
    x_github_event: str | None = Header(None),
    x_github_delivery: str | None = Header(None),
):
    """
    GitHub webhook preview endpoint.

    The body is checked against `X-Hub-Signature-256` when a secret is configured,
    parsed according to `X-GitHub-Event` and rendered. Nothing is forwarded.
    """
    body = await request.body()
    if settings.webhook_secret and not gh_verify(
        settings.webhook_secret, body, x_hub_signature_256
    ):
        logger.error("Invalid signature for delivery {}", x_github_delivery)
        raise HTTPException(401, "Invalid signature")

    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise HTTPException(400, "Body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise HTTPException(400, "Body is not a JSON object")

    event = (x_github_event or "unknown").lower()
    logger.info("Received {} delivery {}", event, x_github_delivery)

    try:
        parsed = parse_event(event, payload)
        message = render(event, parsed)
    except RenderError as exc:
        logger.warning("Ignoring {} delivery {}: {}", event, x_github_delivery, exc)
        return JSONResponse(
            {"status": "ignored", "event": event, "reason": str(exc)},
            status_code=202,
        )
    except ValidationError as exc:
        raise HTTPException(422, f"Payload does not match {event} event") from exc

    button = None
    if message.has_button:
        button = {"label": message.button_label, "url": message.button_url}
    return {
        "status": "rendered",
        "event": event,
        "action": parsed.action,
        "text": message.text,
        "button": button,
    }
