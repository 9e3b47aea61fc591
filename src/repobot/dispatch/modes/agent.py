"""Agent mode implementation.

Agent mode is the autonomous default: it runs without requiring anyone to
mention the bot. Scheduled runs, manual dispatch, pull request events and any
comment without the trigger phrase end up here, as does every event for which
an explicit prompt was configured.
"""

from __future__ import annotations

from typing_extensions import override

from repobot.dispatch.context import EventContext, EventKind
from repobot.dispatch.modes.base import Mode

_DEFAULT_INSTRUCTIONS: dict[EventKind, str] = {
    EventKind.PULL_REQUEST_OPENED: "Review the newly opened pull request.",
    EventKind.PULL_REQUEST: "Review the latest changes to the pull request.",
    EventKind.ISSUE_OPENED: "Triage the newly opened issue.",
    EventKind.SCHEDULE: "Run the scheduled repository maintenance task.",
    EventKind.WORKFLOW_DISPATCH: "Run the manually dispatched task.",
}

_FALLBACK_INSTRUCTION = "Handle the repository event."


class AgentMode(Mode):
    """Autonomous mode; the permissive default."""

    @property
    @override
    def name(self) -> str:
        return "agent"

    @property
    @override
    def description(self) -> str:
        return "Autonomous execution without a mention; used for automation and explicit prompts"

    @override
    def build_prompt(self, context: EventContext) -> str:
        prompt = (context.explicit_prompt or "").strip()
        if prompt:
            return prompt
        return _DEFAULT_INSTRUCTIONS.get(context.event_kind, _FALLBACK_INSTRUCTION)
