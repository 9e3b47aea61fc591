"""Tag mode implementation.

Tag mode is the opt-in, mention-gated mode: a user writes the trigger phrase
(e.g. "@claude") in a comment and the rest of the comment becomes the request.
"""

from __future__ import annotations

from typing_extensions import override

from repobot.dispatch.context import EventContext
from repobot.dispatch.modes.base import Mode


def strip_trigger_phrase(body: str, trigger_phrase: str) -> str:
    """Remove the first occurrence of `trigger_phrase` from `body` and trim."""

    if not trigger_phrase:
        return body.strip()
    return body.replace(trigger_phrase, "", 1).strip()


class TagMode(Mode):
    """Mode activated by mentioning the trigger phrase in a comment."""

    @property
    @override
    def name(self) -> str:
        return "tag"

    @property
    @override
    def description(self) -> str:
        return "Responds to comments that mention the trigger phrase"

    @property
    @override
    def tracks_progress(self) -> bool:
        return True

    @override
    def build_prompt(self, context: EventContext) -> str:
        return strip_trigger_phrase(
            context.comment_body or "", context.effective_trigger_phrase or ""
        )
