"""
Render the current GitHub Actions event.

Inside a workflow, GitHub exposes the triggering event as ``GITHUB_EVENT_NAME``
and writes its payload to ``GITHUB_EVENT_PATH``; both can be overridden on
the command line::

    python -m ghnotify --event-name push --event-path event.json --format json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from ghnotify.exceptions import RenderError
from ghnotify.log import configure_logging
from ghnotify.schemas import parse_event
from ghnotify.services.render import RenderedMessage, render
from ghnotify.utils import load_event_file

EXIT_OK = 0
EXIT_UNSUPPORTED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghnotify",
        description="Render a GitHub webhook event as a Telegram HTML message.",
    )
    parser.add_argument(
        "--event-name",
        default=os.getenv("GITHUB_EVENT_NAME", ""),
        help="event name (default: $GITHUB_EVENT_NAME)",
    )
    parser.add_argument(
        "--event-path",
        default=os.getenv("GITHUB_EVENT_PATH", ""),
        help="path to the JSON payload (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="output format",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 when the event cannot be rendered",
    )
    parser.add_argument("--log-level", default=None, help="loguru level")
    return parser


def _dump(event_name: str, action: str, message: RenderedMessage, fmt: str) -> str:
    if fmt == "text":
        return message.text
    button = None
    if message.has_button:
        button = {"label": message.button_label, "url": message.button_url}
    return json.dumps(
        {"event": event_name, "action": action, "text": message.text, "button": button},
        ensure_ascii=False,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if not args.event_name or not args.event_path:
        logger.error("Both an event name and an event path are required")
        return EXIT_BAD_INPUT

    try:
        payload = load_event_file(args.event_path)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read event payload {}: {}", args.event_path, exc)
        return EXIT_BAD_INPUT

    event_name = args.event_name.lower()
    try:
        event = parse_event(event_name, payload)
        message = render(event_name, event)
    except RenderError as exc:
        logger.warning("Skipping {} event: {}", event_name, exc)
        return EXIT_UNSUPPORTED if args.strict else EXIT_OK
    except ValidationError as exc:
        logger.error("Payload does not match {} event: {}", event_name, exc)
        return EXIT_BAD_INPUT

    print(_dump(event_name, event.action, message, args.format))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
