"""Mode registry.

The catalog of modes is closed: the default registry is populated once at
import time with `agent` and `tag` and never changes afterwards, so it can be
read from any thread without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from repobot.dispatch.exceptions import ModeNotFoundError, ModeRegistrationError
from repobot.dispatch.modes.agent import AgentMode
from repobot.dispatch.modes.base import Mode
from repobot.dispatch.modes.tag import TagMode

logger = logging.getLogger(__name__)


class ModeRegistry:
    """Name -> Mode table."""

    _modes: dict[str, Mode]
    _sealed: bool

    def __init__(self, modes: tuple[Mode, ...] = (), *, sealed: bool = False) -> None:
        self._modes = {}
        self._sealed = False
        for mode in modes:
            self.register(mode)
        self._sealed = sealed

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Reject any further registration."""
        self._sealed = True

    def register(self, mode: Mode) -> None:
        """Add a mode keyed by its name.

        Raises:
            ModeRegistrationError: If the registry is sealed or a mode with the same
                name is already registered.
        """
        if self._sealed:
            raise ModeRegistrationError(
                f"Cannot register mode '{mode.name}': the mode catalog is closed"
            )
        if mode.name in self._modes:
            raise ModeRegistrationError(f"Mode '{mode.name}' is already registered")
        self._modes[mode.name] = mode
        logger.debug(f"Registered mode '{mode.name}'")

    def get_all_mode_names(self) -> frozenset[str]:
        return frozenset(self._modes)

    def is_valid_mode(self, name: object) -> bool:
        return isinstance(name, str) and name in self._modes

    def lookup(self, name: str) -> Mode:
        """Return the mode registered under exactly `name`.

        Raises:
            ModeNotFoundError: If no such mode exists.
        """
        try:
            return self._modes[name]
        except KeyError:
            available = ", ".join(sorted(self._modes))
            raise ModeNotFoundError(
                f"Mode '{name}' not found. Available modes: {available or '(none)'}"
            ) from None

    def __contains__(self, name: object) -> bool:
        return self.is_valid_mode(name)

    def __iter__(self) -> Iterator[Mode]:
        return iter(self._modes.values())

    def __len__(self) -> int:
        return len(self._modes)


AGENT_MODE = AgentMode()
TAG_MODE = TagMode()

# Global registry instance, closed after construction.
MODE_REGISTRY = ModeRegistry((AGENT_MODE, TAG_MODE), sealed=True)


def is_valid_mode(name: object) -> bool:
    """Check a mode name (e.g. from user configuration) against the catalog."""
    return MODE_REGISTRY.is_valid_mode(name)


def get_mode(name: str) -> Mode:
    """Resolve an externally supplied mode name; raises `ModeNotFoundError`."""
    return MODE_REGISTRY.lookup(name)
