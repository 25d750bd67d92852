"""Errors raised by the compose-and-send flow.

Every error carries a stable ``code`` that the API layer exposes to clients.
"""

from __future__ import annotations


class ComposeError(Exception):
    """Base class for failures detected while composing a notification."""

    code = "compose_error"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class MessageValidationError(ComposeError):
    """Title, body or batch constraints are not satisfied."""

    code = "validation_error"

    def __init__(
        self, message: str, *, field: str | None = None, code: str | None = None
    ) -> None:
        super().__init__(message, field=field)
        if code is not None:
            self.code = code


class EmptyAudienceError(ComposeError):
    """Explicit selection mode was chosen without selecting any customer."""

    code = "empty_audience"


class NoRecipientsError(ComposeError):
    """The chosen customers hold no usable device token."""

    code = "no_recipients"


class DispatchInProgressError(ComposeError):
    """A dispatch for the same session is still outstanding."""

    code = "dispatch_in_progress"


class DispatchCancelledError(ComposeError):
    """The outstanding dispatch was cancelled before the platform answered."""

    code = "dispatch_cancelled"


class InvalidComposeStateError(ComposeError):
    """The requested transition is not allowed from the current state."""

    code = "invalid_state"


__all__ = [
    "ComposeError",
    "DispatchCancelledError",
    "DispatchInProgressError",
    "EmptyAudienceError",
    "InvalidComposeStateError",
    "MessageValidationError",
    "NoRecipientsError",
]
