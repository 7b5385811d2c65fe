"""Unit tests for payload parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ghnotify.exceptions import UnsupportedEventError
from ghnotify.schemas import (
    EVENT_MODELS,
    ForkEvent,
    PushEvent,
    ReleaseEvent,
    parse_event,
)


def test_every_supported_kind_has_a_model(payload_factory) -> None:
    for event_name, model in EVENT_MODELS.items():
        assert isinstance(parse_event(event_name, payload_factory(event_name)), model)


def test_parse_event_accepts_extra_fields(payload_factory) -> None:
    payload = payload_factory("fork", installation={"id": 5}, organization={"login": "acme"})

    event = parse_event("fork", payload)

    assert isinstance(event, ForkEvent)
    assert event.action == ""
    assert event.forkee.full_name == "octocat/ProxyChecker-v2"
    assert event.repository.forks_count == 7


def test_parse_event_unknown_name() -> None:
    with pytest.raises(UnsupportedEventError):
        parse_event("ping", {"zen": "Keep it logically awesome."})


def test_parse_event_missing_required_field(payload_factory) -> None:
    payload = payload_factory("issues")
    del payload["issue"]

    with pytest.raises(ValidationError):
        parse_event("issues", payload)


def test_push_commits_default_to_empty(payload_factory) -> None:
    payload = payload_factory("push")
    del payload["commits"]
    del payload["head_commit"]

    event = parse_event("push", payload)

    assert isinstance(event, PushEvent)
    assert event.commits == []
    assert event.created_at is None


def test_release_assets_are_typed(payload_factory) -> None:
    payload = payload_factory("release")
    payload["release"]["assets"] = [
        {"name": "a.zip", "browser_download_url": "https://example.com/a.zip", "size": 10}
    ]

    event = parse_event("release", payload)

    assert isinstance(event, ReleaseEvent)
    assert event.release.assets is not None
    assert event.release.assets[0].name == "a.zip"
    assert event.release.prerelease is False
