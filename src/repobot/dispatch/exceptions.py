"""Custom exception types used by mode dispatch."""


class DispatchError(Exception):
    """Base class for repobot dispatch errors."""


class ModeRegistrationError(DispatchError):
    """Raised when two modes are registered under the same name."""


class ModeNotFoundError(DispatchError, KeyError):
    """Raised when an unknown mode name is looked up."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0]) if self.args else ""


class EventPayloadError(DispatchError):
    """Raised when an event payload file cannot be read or parsed."""
