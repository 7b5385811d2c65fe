"""Typed GitHub webhook payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ghnotify.exceptions import UnsupportedEventError


class User(BaseModel):
    """The ``sender`` of a delivery."""

    login: str
    html_url: str = ""


class Repository(BaseModel):
    full_name: str
    html_url: str = ""
    forks_count: int = 0
    stargazers_count: int = 0
    # Epoch seconds in push payloads, ISO-8601 everywhere else.
    pushed_at: Optional[datetime] = None


class Issue(BaseModel):
    number: Optional[int] = None
    title: str = ""
    html_url: str = ""


class PullRequest(BaseModel):
    number: Optional[int] = None
    title: str = ""
    html_url: str = ""


class Comment(BaseModel):
    html_url: str = ""
    body: Optional[str] = None


class Asset(BaseModel):
    name: str
    browser_download_url: str = ""


class Release(BaseModel):
    name: Optional[str] = None
    tag_name: str
    html_url: str = ""
    prerelease: bool = False
    assets: Optional[list[Asset]] = None


class Commit(BaseModel):
    id: str = ""
    message: str = ""
    timestamp: Optional[datetime] = None


class WebhookEvent(BaseModel):
    """
    Fields shared by every supported delivery.
    Only fields used by the renderer are declared.
    """

    action: str = ""
    sender: User
    repository: Repository

    class Config:
        extra = "allow"


class ForkEvent(WebhookEvent):
    forkee: Repository


class IssueCommentEvent(WebhookEvent):
    issue: Issue
    comment: Comment


class IssuesEvent(WebhookEvent):
    issue: Issue


class PullRequestEvent(WebhookEvent):
    pull_request: PullRequest


class PullRequestReviewCommentEvent(WebhookEvent):
    pull_request: PullRequest
    comment: Comment


class PushEvent(WebhookEvent):
    ref: str = ""
    compare: str = ""
    commits: list[Commit] = []
    head_commit: Optional[Commit] = None

    @property
    def created_at(self) -> Optional[datetime]:
        """When the push happened, if the payload says so."""
        if self.head_commit and self.head_commit.timestamp:
            return self.head_commit.timestamp
        return self.repository.pushed_at


class ReleaseEvent(WebhookEvent):
    release: Release


class WatchEvent(WebhookEvent):
    pass


EVENT_MODELS: dict[str, type[WebhookEvent]] = {
    "fork": ForkEvent,
    "issue_comment": IssueCommentEvent,
    "issues": IssuesEvent,
    "pull_request": PullRequestEvent,
    "pull_request_review_comment": PullRequestReviewCommentEvent,
    "push": PushEvent,
    "release": ReleaseEvent,
    "watch": WatchEvent,
}


def parse_event(event_name: str, payload: Mapping[str, Any]) -> WebhookEvent:
    """
    Validate a decoded webhook body into the model registered for ``event_name``.

    Raises ``UnsupportedEventError`` for unknown names and
    ``pydantic.ValidationError`` when the payload does not fit the model.
    """
    model = EVENT_MODELS.get((event_name or "").lower())
    if model is None:
        raise UnsupportedEventError(event_name)
    return model.model_validate(dict(payload))
