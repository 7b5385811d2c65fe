"""Telegram messages for GitHub webhook events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from html import escape as _esc
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from ghnotify.exceptions import UnsupportedActionError, UnsupportedEventError
from ghnotify.schemas import (
    ForkEvent,
    IssueCommentEvent,
    IssuesEvent,
    PullRequestEvent,
    PullRequestReviewCommentEvent,
    PushEvent,
    ReleaseEvent,
    WatchEvent,
    WebhookEvent,
)
from ghnotify.timezone import now_local, to_local

DATE_FORMAT = "%d/%m/%y"
RELEASE_BUTTON = "🌐"

# ``None`` means the kind has no activity types to check.
ALLOWED_ACTIONS: dict[str, Optional[frozenset[str]]] = {
    "fork": None,
    "issue_comment": frozenset({"created", "deleted"}),
    "issues": frozenset({"created", "closed", "opened", "reopened", "locked", "unlocked"}),
    "pull_request": frozenset(
        {"created", "opened", "reopened", "locked", "unlocked", "closed", "synchronize"}
    ),
    "pull_request_review_comment": frozenset({"created", "deleted"}),
    "push": None,
    "release": frozenset({"published", "released"}),
    "watch": frozenset({"started"}),
}


@dataclass(frozen=True)
class RenderedMessage:
    """HTML text plus the optional single inline button."""

    text: str
    button_label: Optional[str] = None
    button_url: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.button_label is None) != (self.button_url is None):
            raise ValueError("button label and url must be set together")

    @property
    def has_button(self) -> bool:
        return self.button_url is not None


Handler = Callable[[Any, Optional[datetime]], RenderedMessage]


def _esc_html(value: Any) -> str:
    return _esc(str(value or ""), quote=True)


def _is_web_url(url: str | None) -> bool:
    if not url:
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _link(url: str | None, text: Any) -> str:
    label = _esc_html(text)
    if not _is_web_url(url):
        return label
    return f'<a href="{_esc_html(url)}">{label}</a>'


def _message(text: str, label: str, url: str | None) -> RenderedMessage:
    if not _is_web_url(url):
        return RenderedMessage(text)
    return RenderedMessage(text, label, url)


def _actor(event: WebhookEvent) -> str:
    return _link(event.sender.html_url, event.sender.login)


def _repo(event: WebhookEvent) -> str:
    return _link(event.repository.html_url, event.repository.full_name)


def _repo_display_name(full_name: str) -> str:
    """'LogicCorporation/ProxyChecker-v2' → 'ProxyChecker v2'"""
    return full_name.split("/")[-1].replace("-", " ")


def _render_fork(event: ForkEvent, _now: Optional[datetime]) -> RenderedMessage:
    forkee = _link(event.forkee.html_url, event.forkee.full_name)
    text = f"🍴 {_actor(event)} forked {_repo(event)} → {forkee}"
    repo_url = event.repository.html_url.rstrip("/")
    return _message(
        text,
        f"Total Forks: {event.repository.forks_count}",
        f"{repo_url}/network/members",
    )


def _render_issue_comment(event: IssueCommentEvent, _now: Optional[datetime]) -> RenderedMessage:
    issue = _link(event.issue.html_url, event.issue.title)
    text = f"🗣 {_actor(event)} commented on issue {issue} in {_repo(event)}"
    return _message(text, "Open Comment", event.comment.html_url)


def _render_issues(event: IssuesEvent, _now: Optional[datetime]) -> RenderedMessage:
    issue = _link(event.issue.html_url, event.issue.title)
    text = (
        f"🐛 {_actor(event)} {_esc_html(event.action)} issue {issue}"
        f" in {_repo(event)}"
    )
    return _message(text, "Open Issue", event.issue.html_url)


def _render_pull_request(event: PullRequestEvent, _now: Optional[datetime]) -> RenderedMessage:
    parts = [f"🔌 {_actor(event)} ", _esc_html(event.action)]
    if event.action == "opened":
        parts.append(" a new")
    parts.append(" pull request ")
    parts.append(_link(event.pull_request.html_url, event.pull_request.title))
    parts.append(f" in {_repo(event)}")
    return _message("".join(parts), "Open Pull Request", event.pull_request.html_url)


def _render_pull_request_review_comment(
    event: PullRequestReviewCommentEvent, _now: Optional[datetime]
) -> RenderedMessage:
    pr = _link(event.pull_request.html_url, event.pull_request.title)
    text = f"🧐 {_actor(event)} commented on PR review {pr} in {_repo(event)}"
    return _message(text, "Open Comment", event.comment.html_url)


def _render_push(event: PushEvent, now: Optional[datetime]) -> RenderedMessage:
    repo_name = _repo_display_name(event.repository.full_name)
    when = event.created_at or now or now_local()

    parts = [
        f"🚀 <b>{len(event.commits)} New Update(s) to <u>{_esc_html(repo_name)}</u></b>\n\n",
        "<blockquote><b><u>📌 Updates:</u></b>\n",
    ]
    for commit in event.commits:
        parts.append(f"• {_esc_html(commit.message)}\n")
    parts.append("</blockquote>")
    parts.append(
        "\nSpecial thanks to accompany, stay tuned for more."
        f" [ {to_local(when).strftime(DATE_FORMAT)} ]"
    )
    return _message("".join(parts), "Open Changes", event.compare)


def _render_release(event: ReleaseEvent, _now: Optional[datetime]) -> RenderedMessage:
    release = event.release
    parts = ["🎊 A new "]
    if release.prerelease:
        parts.append("pre")
    parts.append(
        f"release was {_esc_html(event.action)} in {_repo(event)} by {_actor(event)}\n"
    )
    name = _link(release.html_url, release.name or release.tag_name)
    parts.append(f"\n📍 {name} (<code>{_esc_html(release.tag_name)}</code>)\n\n")
    if release.assets:
        parts.append("📦 <b>Assets:</b>\n")
        for asset in release.assets:
            parts.append(f"• {_link(asset.browser_download_url, asset.name)}\n")
    return _message("".join(parts), RELEASE_BUTTON, release.html_url)


def _render_watch(event: WatchEvent, _now: Optional[datetime]) -> RenderedMessage:
    text = f"🌟 {_actor(event)} starred {_repo(event)}"
    repo_url = event.repository.html_url.rstrip("/")
    return _message(
        text,
        f"✨ Total stars: {event.repository.stargazers_count}",
        f"{repo_url}/stargazers",
    )


HANDLERS: dict[str, tuple[type[WebhookEvent], Handler]] = {
    "fork": (ForkEvent, _render_fork),
    "issue_comment": (IssueCommentEvent, _render_issue_comment),
    "issues": (IssuesEvent, _render_issues),
    "pull_request": (PullRequestEvent, _render_pull_request),
    "pull_request_review_comment": (
        PullRequestReviewCommentEvent,
        _render_pull_request_review_comment,
    ),
    "push": (PushEvent, _render_push),
    "release": (ReleaseEvent, _render_release),
    "watch": (WatchEvent, _render_watch),
}


def _check_action(key: str, action: str) -> None:
    allowed = ALLOWED_ACTIONS[key]
    if allowed is not None and action not in allowed:
        raise UnsupportedActionError(key, action)


def render(
    event_name: str,
    event: WebhookEvent,
    *,
    now: Optional[datetime] = None,
) -> RenderedMessage:
    """
    Render ``event`` as Telegram HTML.

    ``now`` is only used by push events whose payload carries no timestamp;
    it defaults to the current time in the configured timezone.

    Raises
    ------
    UnsupportedEventError
        ``event_name`` is not one of the supported kinds.
    UnsupportedActionError
        The event's action is not allowed for its kind.
    """
    key = (event_name or "").lower()
    entry = HANDLERS.get(key)
    if entry is None:
        raise UnsupportedEventError(event_name)
    model, handler = entry
    if not isinstance(event, model):
        raise TypeError(f"{key} expects {model.__name__}, got {type(event).__name__}")
    _check_action(key, event.action)
    return handler(event, now)
