"""Shared pytest fixtures: realistic webhook payloads and event builders."""

from __future__ import annotations

import copy
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from ghnotify.schemas import WebhookEvent, parse_event

SENDER = {
    "login": "octocat",
    "id": 1,
    "html_url": "https://github.com/octocat",
    "type": "User",
}

REPOSITORY = {
    "id": 1296269,
    "name": "ProxyChecker-v2",
    "full_name": "LogicCorporation/ProxyChecker-v2",
    "html_url": "https://github.com/LogicCorporation/ProxyChecker-v2",
    "forks_count": 7,
    "stargazers_count": 42,
    "private": False,
}

ISSUE = {
    "number": 12,
    "title": "Proxy timeout is ignored",
    "html_url": "https://github.com/LogicCorporation/ProxyChecker-v2/issues/12",
    "state": "open",
}

PULL_REQUEST = {
    "number": 34,
    "title": "Honour proxy timeout",
    "html_url": "https://github.com/LogicCorporation/ProxyChecker-v2/pull/34",
    "state": "open",
}

PAYLOADS: dict[str, dict[str, Any]] = {
    "fork": {
        "forkee": {
            "full_name": "octocat/ProxyChecker-v2",
            "html_url": "https://github.com/octocat/ProxyChecker-v2",
        },
    },
    "issue_comment": {
        "action": "created",
        "issue": ISSUE,
        "comment": {
            "html_url": "https://github.com/LogicCorporation/ProxyChecker-v2/issues/12#issuecomment-99",
            "body": "Same here",
        },
    },
    "issues": {
        "action": "opened",
        "issue": ISSUE,
    },
    "pull_request": {
        "action": "opened",
        "number": 34,
        "pull_request": PULL_REQUEST,
    },
    "pull_request_review_comment": {
        "action": "created",
        "pull_request": PULL_REQUEST,
        "comment": {
            "html_url": "https://github.com/LogicCorporation/ProxyChecker-v2/pull/34#discussion_r7",
            "body": "nit: rename",
        },
    },
    "push": {
        "ref": "refs/heads/main",
        "compare": "https://github.com/LogicCorporation/ProxyChecker-v2/compare/abc123...def456",
        "commits": [
            {"id": "abc123", "message": "Fix timeout handling", "timestamp": "2024-03-05T12:00:00+00:00"},
            {"id": "def456", "message": "Bump version", "timestamp": "2024-03-05T12:00:00+00:00"},
        ],
        "head_commit": {
            "id": "def456",
            "message": "Bump version",
            "timestamp": "2024-03-05T12:00:00+00:00",
        },
    },
    "release": {
        "action": "published",
        "release": {
            "name": "ProxyChecker 2.1",
            "tag_name": "v2.1.0",
            "html_url": "https://github.com/LogicCorporation/ProxyChecker-v2/releases/tag/v2.1.0",
            "prerelease": False,
            "assets": [],
        },
    },
    "watch": {
        "action": "started",
    },
}


@pytest.fixture
def payload_factory() -> Callable[..., dict[str, Any]]:
    """Build a raw payload for an event kind, with top-level overrides."""

    def _build(event_name: str, **overrides: Any) -> dict[str, Any]:
        data = copy.deepcopy(PAYLOADS[event_name])
        data.setdefault("sender", copy.deepcopy(SENDER))
        data.setdefault("repository", copy.deepcopy(REPOSITORY))
        data.update(overrides)
        return data

    return _build


@pytest.fixture
def make_event(payload_factory: Callable[..., dict[str, Any]]) -> Callable[..., WebhookEvent]:
    """Build a parsed event: make_event('issues', action='closed')."""

    def _build(event_name: str, **overrides: Any) -> WebhookEvent:
        return parse_event(event_name, payload_factory(event_name, **overrides))

    return _build


@pytest.fixture
def fixed_now() -> datetime:
    """Stable timestamp for push events without one of their own."""
    return datetime(2025, 1, 31, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def utc_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render dates in UTC whatever TIMEZONE the environment or .env sets."""
    monkeypatch.setattr("ghnotify.timezone.TZ", ZoneInfo("UTC"))
