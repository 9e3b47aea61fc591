"""Event context consumed by mode selection.

An `EventContext` is a read-only view of the repository event that woke the
bot up. The selector never looks at raw webhook payloads; callers build a
context with `build_event_context()` (or construct one directly in tests).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from repobot.dispatch.exceptions import EventPayloadError

logger = logging.getLogger(__name__)


class EventKind(StrEnum):
    """Category of repository event."""

    COMMENT_CREATED = "comment_created"
    COMMENT_EDITED = "comment_edited"
    REVIEW_COMMENT = "review_comment"
    PULL_REQUEST_OPENED = "pull_request_opened"
    PULL_REQUEST = "pull_request"
    ISSUE_OPENED = "issue_opened"
    ISSUE = "issue"
    WORKFLOW_DISPATCH = "workflow_dispatch"
    SCHEDULE = "schedule"
    REPOSITORY_DISPATCH = "repository_dispatch"
    PUSH = "push"
    OTHER = "other"


# Events whose payload carries human-authored comment text.
COMMENT_EVENT_KINDS: frozenset[EventKind] = frozenset(
    {
        EventKind.COMMENT_CREATED,
        EventKind.COMMENT_EDITED,
        EventKind.REVIEW_COMMENT,
    }
)


@dataclass(frozen=True, slots=True)
class EventContext:
    """Read-only view of a triggering event plus the configured bot inputs.

    Attributes:
        event_kind: Category of the event.
        comment_body: Comment text, only for comment-style events.
        explicit_prompt: Instruction supplied directly through configuration.
        trigger_phrase: Phrase that tag mode searches for in `comment_body`.
        is_pull_request: Whether the event concerns a pull request.
        event_name: Raw event name (e.g. "issue_comment"), for diagnostics.
        event_action: Raw payload action (e.g. "created"), for diagnostics.
    """

    event_kind: EventKind
    comment_body: str | None = None
    explicit_prompt: str | None = None
    trigger_phrase: str | None = None
    is_pull_request: bool = False
    event_name: str | None = None
    event_action: str | None = None

    @property
    def is_comment_event(self) -> bool:
        return self.event_kind in COMMENT_EVENT_KINDS

    @property
    def has_explicit_prompt(self) -> bool:
        return bool(self.explicit_prompt and self.explicit_prompt.strip())

    @property
    def effective_trigger_phrase(self) -> str | None:
        """The configured trigger phrase without surrounding whitespace, or None if blank."""
        phrase = (self.trigger_phrase or "").strip()
        return phrase or None


def resolve_event_kind(event_name: str, action: str | None = None) -> EventKind:
    """Map a GitHub event name and payload action to an `EventKind`."""

    match event_name:
        case "issue_comment":
            return EventKind.COMMENT_EDITED if action == "edited" else EventKind.COMMENT_CREATED
        case "pull_request_review_comment":
            return EventKind.REVIEW_COMMENT
        case "pull_request" | "pull_request_target":
            return EventKind.PULL_REQUEST_OPENED if action == "opened" else EventKind.PULL_REQUEST
        case "issues":
            return EventKind.ISSUE_OPENED if action == "opened" else EventKind.ISSUE
        case "workflow_dispatch":
            return EventKind.WORKFLOW_DISPATCH
        case "schedule":
            return EventKind.SCHEDULE
        case "repository_dispatch":
            return EventKind.REPOSITORY_DISPATCH
        case "push":
            return EventKind.PUSH
        case _:
            logger.debug(f"Unrecognized event name {event_name!r}, treating as 'other'")
            return EventKind.OTHER


class PayloadComment(BaseModel):
    """The `comment` object of a comment event."""

    model_config = ConfigDict(extra="ignore")

    body: str | None = None

    @field_validator("body", mode="before")
    @classmethod
    def ignore_non_text_body(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


class PayloadIssue(BaseModel):
    """The `issue` object; `pull_request` is only present on PR conversations."""

    model_config = ConfigDict(extra="ignore")

    pull_request: Any = None

    @property
    def is_pull_request(self) -> bool:
        return "pull_request" in self.model_fields_set


class EventPayload(BaseModel):
    """The parts of a webhook payload that mode selection reads."""

    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    comment: PayloadComment | None = None
    issue: PayloadIssue | None = None

    @field_validator("action", mode="before")
    @classmethod
    def ignore_non_text_action(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @field_validator("comment", "issue", mode="before")
    @classmethod
    def ignore_non_object(cls, v: Any) -> Any:
        return v if isinstance(v, dict | BaseModel) else None


def _is_pull_request(event_name: str, payload: EventPayload) -> bool:
    if event_name in ("pull_request", "pull_request_target", "pull_request_review_comment"):
        return True
    # Comments on PR conversations arrive as issue_comment with a pull_request link.
    return payload.issue is not None and payload.issue.is_pull_request


def build_event_context(
    event_name: str,
    payload: EventPayload | dict[str, Any] | None = None,
    *,
    prompt: str | None = None,
    trigger_phrase: str | None = None,
) -> EventContext:
    """Build an `EventContext` from an event name, its payload and bot inputs.

    Args:
        event_name: GitHub event name (``GITHUB_EVENT_NAME``).
        payload: Webhook payload, parsed or raw; scheduled and dispatch events may have none.
        prompt: Explicit prompt input, if configured.
        trigger_phrase: Trigger phrase input, if configured.
    """
    if not isinstance(payload, EventPayload):
        payload = EventPayload.model_validate(payload or {})

    kind = resolve_event_kind(event_name, payload.action)
    comment_body = None
    if kind in COMMENT_EVENT_KINDS and payload.comment is not None:
        comment_body = payload.comment.body

    return EventContext(
        event_kind=kind,
        comment_body=comment_body,
        explicit_prompt=prompt or None,
        trigger_phrase=trigger_phrase or None,
        is_pull_request=_is_pull_request(event_name, payload),
        event_name=event_name,
        event_action=payload.action,
    )


def load_event_payload(path: Path) -> EventPayload:
    """Read and validate a JSON event payload file.

    Raises:
        EventPayloadError: If the file is unreadable, not JSON, or not a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise EventPayloadError(f"Cannot read event payload {path}: {e}") from e

    try:
        return EventPayload.model_validate_json(content)
    except ValidationError as e:
        if any(err["type"] == "json_invalid" for err in e.errors()):
            raise EventPayloadError(f"Event payload {path} is not valid JSON: {e}") from e
        raise EventPayloadError(f"Event payload {path} must be a JSON object: {e}") from e
