"""Tests for mode selection precedence."""

from __future__ import annotations

import pytest

from repobot.dispatch.context import COMMENT_EVENT_KINDS, EventContext, EventKind, build_event_context
from repobot.dispatch.exceptions import ModeNotFoundError
from repobot.dispatch.modes import AGENT_MODE, MODE_REGISTRY, TAG_MODE, AgentMode, ModeRegistry
from repobot.dispatch.selector import (
    DEFAULT_RULE,
    SELECTION_RULES,
    explain_selection,
    select_mode,
)

NON_COMMENT_KINDS = [kind for kind in EventKind if kind not in COMMENT_EVENT_KINDS]


def test_select_mode_agent_for_issue_comment_without_trigger():
    context = build_event_context(
        "issue_comment",
        {"action": "created", "comment": {"body": "Test comment without trigger"}},
    )
    mode = select_mode(context)
    assert mode is AGENT_MODE
    assert mode.name == "agent"


def test_select_mode_agent_for_workflow_dispatch():
    mode = select_mode(build_event_context("workflow_dispatch"))
    assert mode is AGENT_MODE


def test_select_mode_agent_for_schedule_event():
    mode = select_mode(build_event_context("schedule"))
    assert mode is AGENT_MODE


def test_select_mode_agent_for_pr_opened():
    context = EventContext(EventKind.PULL_REQUEST_OPENED, is_pull_request=True)
    assert select_mode(context) is AGENT_MODE


def test_select_mode_agent_when_prompt_is_provided_even_with_mention():
    context = build_event_context(
        "issue_comment",
        {"action": "created", "comment": {"body": "@claude please help"}},
        prompt="/review",
        trigger_phrase="@claude",
    )
    assert select_mode(context) is AGENT_MODE
    assert explain_selection(context).name == "explicit_prompt"


def test_select_mode_tag_for_mention_without_prompt():
    context = build_event_context(
        "issue_comment",
        {"action": "created", "comment": {"body": "@claude please help"}},
        trigger_phrase="@claude",
    )
    mode = select_mode(context)
    assert mode is TAG_MODE
    assert mode.name == "tag"
    assert explain_selection(context).name == "trigger_phrase_mention"


@pytest.mark.parametrize("kind", sorted(COMMENT_EVENT_KINDS))
def test_every_comment_kind_can_reach_tag_mode(kind: EventKind):
    context = EventContext(kind, comment_body="hey @bot look", trigger_phrase="@bot")
    assert select_mode(context) is TAG_MODE


@pytest.mark.parametrize("kind", NON_COMMENT_KINDS)
def test_non_comment_events_always_select_agent(kind: EventKind):
    # Even with a body that mentions the trigger phrase.
    context = EventContext(kind, comment_body="@claude do it", trigger_phrase="@claude")
    assert select_mode(context) is AGENT_MODE
    assert explain_selection(context).name == "automation_event"


@pytest.mark.parametrize("kind", sorted(COMMENT_EVENT_KINDS))
@pytest.mark.parametrize("prompt", ["/review", "fix the bug", "  go  "])
def test_explicit_prompt_always_wins(kind: EventKind, prompt: str):
    context = EventContext(
        kind,
        comment_body="@claude please help",
        explicit_prompt=prompt,
        trigger_phrase="@claude",
    )
    assert select_mode(context) is AGENT_MODE


@pytest.mark.parametrize("prompt", [None, "", "   \n"])
def test_blank_prompt_does_not_block_tag_mode(prompt: str | None):
    context = EventContext(
        EventKind.COMMENT_CREATED,
        comment_body="@claude please help",
        explicit_prompt=prompt,
        trigger_phrase="@claude",
    )
    assert select_mode(context) is TAG_MODE


@pytest.mark.parametrize("phrase", [None, "", "   "])
def test_unconfigured_trigger_phrase_falls_back_to_agent(phrase: str | None):
    context = EventContext(
        EventKind.COMMENT_CREATED,
        comment_body="@claude please help",
        trigger_phrase=phrase,
    )
    assert select_mode(context) is AGENT_MODE
    assert explain_selection(context) is DEFAULT_RULE


@pytest.mark.parametrize(
    "body",
    ["@Claude please help", "@ claude help", "claude help", ""],
)
def test_trigger_phrase_match_is_literal_and_case_sensitive(body: str):
    context = EventContext(EventKind.COMMENT_CREATED, comment_body=body, trigger_phrase="@claude")
    assert select_mode(context) is AGENT_MODE


def test_trigger_phrase_matches_as_substring_anywhere():
    context = EventContext(
        EventKind.COMMENT_EDITED,
        comment_body="Could you take a look?\n\ncc @claude-bot",
        trigger_phrase="@claude",
    )
    assert select_mode(context) is TAG_MODE


def test_comment_event_without_body_is_treated_as_automation():
    context = EventContext(EventKind.COMMENT_CREATED, trigger_phrase="@claude")
    assert explain_selection(context).name == "automation_event"
    assert select_mode(context) is AGENT_MODE


def test_select_mode_is_idempotent():
    context = EventContext(
        EventKind.COMMENT_CREATED, comment_body="@claude hi", trigger_phrase="@claude"
    )
    assert select_mode(context) is select_mode(context)
    assert explain_selection(context) is explain_selection(context)


def test_rules_are_ordered_and_only_one_selects_tag():
    assert [rule.name for rule in SELECTION_RULES] == [
        "explicit_prompt",
        "automation_event",
        "trigger_phrase_mention",
    ]
    assert [rule.mode_name for rule in SELECTION_RULES if rule.mode_name == "tag"] == ["tag"]
    assert DEFAULT_RULE.mode_name == "agent"


def test_every_rule_points_at_a_registered_mode():
    for rule in (*SELECTION_RULES, DEFAULT_RULE):
        assert MODE_REGISTRY.is_valid_mode(rule.mode_name)


def test_select_mode_uses_given_registry():
    registry = ModeRegistry((AgentMode(),))
    context = EventContext(EventKind.SCHEDULE)
    mode = select_mode(context, registry)
    assert mode.name == "agent"
    assert mode is not AGENT_MODE

    tag_context = EventContext(
        EventKind.COMMENT_CREATED, comment_body="@claude hi", trigger_phrase="@claude"
    )
    with pytest.raises(ModeNotFoundError):
        select_mode(tag_context, registry)


def test_select_mode_logs_matched_rule(caplog: pytest.LogCaptureFixture):
    context = EventContext(EventKind.SCHEDULE)
    with caplog.at_level("DEBUG", logger="repobot.dispatch.selector"):
        select_mode(context)
    assert "automation_event" in caplog.text


def test_trigger_phrase_is_matched_without_surrounding_whitespace():
    context = EventContext(
        EventKind.COMMENT_CREATED,
        comment_body="@claude please help",
        trigger_phrase=" @claude ",
    )
    assert select_mode(context) is TAG_MODE
