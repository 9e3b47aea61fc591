"""Base types for bot modes.

A *mode* is a named strategy for handling a triggered event. Modes do not run
anything themselves; they describe how the execution layer should invoke the
bot:
- the instruction text to run
- whether a progress/tracking comment should be posted

The mode interface is intentionally small; the catalog is closed to `agent`
and `tag`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from repobot.dispatch.context import EventContext


class Mode(ABC):
    """Interface for bot modes."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier for the mode (e.g., "agent")."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line human-friendly description."""

    @property
    def tracks_progress(self) -> bool:
        """Whether the mode posts a tracking comment while it works."""
        return False

    @abstractmethod
    def build_prompt(self, context: EventContext) -> str:
        """Return the instruction text the execution layer should run."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
