"""Errors raised while turning a webhook delivery into a message."""

from __future__ import annotations


class RenderError(ValueError):
    """A delivery that cannot be rendered; callers should ignore it."""


class UnsupportedEventError(RenderError):
    """Raised for an event name outside the supported kinds."""

    def __init__(self, event_name: str):
        self.event_name = event_name
        super().__init__(f"unsupported event '{event_name}'")


class UnsupportedActionError(RenderError):
    """Raised when the action is not in the allow-list of its event kind."""

    def __init__(self, event_name: str, action: str):
        self.event_name = event_name
        self.action = action
        super().__init__(f"unsupported event type '{action}' for {event_name}")
