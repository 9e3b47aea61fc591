"""Bot modes.

A mode is a named strategy for handling a repository event: `agent` runs
autonomously, `tag` only answers comments that mention the trigger phrase.
"""

from __future__ import annotations

from repobot.dispatch.modes.agent import AgentMode
from repobot.dispatch.modes.base import Mode
from repobot.dispatch.modes.registry import (
    AGENT_MODE,
    MODE_REGISTRY,
    TAG_MODE,
    ModeRegistry,
    get_mode,
    is_valid_mode,
)
from repobot.dispatch.modes.tag import TagMode

__all__ = [
    "AGENT_MODE",
    "MODE_REGISTRY",
    "TAG_MODE",
    "AgentMode",
    "Mode",
    "ModeRegistry",
    "TagMode",
    "get_mode",
    "is_valid_mode",
]
