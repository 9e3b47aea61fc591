"""Dispatch package public API."""

from .context import EventContext, EventKind, build_event_context
from .modes import Mode, get_mode, is_valid_mode
from .selector import select_mode

__all__ = [
    "EventContext",
    "EventKind",
    "Mode",
    "build_event_context",
    "get_mode",
    "is_valid_mode",
    "select_mode",
]
