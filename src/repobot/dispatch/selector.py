"""Mode selection.

Precedence is an ordered rule list, evaluated top-to-bottom, first match wins:

1. explicit_prompt         -> agent (a direct instruction beats any mention)
2. automation_event        -> agent (no human-authored text to scan)
3. trigger_phrase_mention  -> tag   (the only path to tag mode)
4. default                 -> agent
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from repobot.dispatch.context import EventContext
from repobot.dispatch.modes import MODE_REGISTRY, Mode, ModeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectionRule:
    """One row of the precedence table."""

    name: str
    mode_name: str
    applies: Callable[[EventContext], bool]


def _has_explicit_prompt(context: EventContext) -> bool:
    return context.has_explicit_prompt


def _is_automation_event(context: EventContext) -> bool:
    return not context.is_comment_event or context.comment_body is None


def _mentions_trigger_phrase(context: EventContext) -> bool:
    phrase = context.effective_trigger_phrase
    if not context.is_comment_event or phrase is None:
        return False
    return phrase in (context.comment_body or "")


SELECTION_RULES: tuple[SelectionRule, ...] = (
    SelectionRule("explicit_prompt", "agent", _has_explicit_prompt),
    SelectionRule("automation_event", "agent", _is_automation_event),
    SelectionRule("trigger_phrase_mention", "tag", _mentions_trigger_phrase),
)

DEFAULT_RULE = SelectionRule("default", "agent", lambda _context: True)


def explain_selection(context: EventContext) -> SelectionRule:
    """Return the first rule that applies to `context` (or `DEFAULT_RULE`)."""
    for rule in SELECTION_RULES:
        if rule.applies(context):
            return rule
    return DEFAULT_RULE


def select_mode(context: EventContext, registry: ModeRegistry = MODE_REGISTRY) -> Mode:
    """Pick the mode that should handle `context`.

    Pure function of its inputs; never raises for a well-formed context as long
    as `registry` holds the catalog modes.
    """
    rule = explain_selection(context)
    mode = registry.lookup(rule.mode_name)
    logger.debug(
        f"Selected mode '{mode.name}' via rule '{rule.name}' "
        f"(event={context.event_kind.value}, pr={context.is_pull_request})"
    )
    return mode
