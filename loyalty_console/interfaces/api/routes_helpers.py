"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from loyalty_console.domain.errors import (
    ComposeError,
    DispatchCancelledError,
    DispatchInProgressError,
    InvalidComposeStateError,
)
from loyalty_console.infrastructure.platform_client import PlatformTransportError

_UNPROCESSABLE = 422
_CONFLICT_ERRORS = (DispatchCancelledError, DispatchInProgressError, InvalidComposeStateError)


def compose_error_to_http(exc: ComposeError) -> HTTPException:
    """Return the HTTP error describing ``exc`` to the client.

    Flow conflicts answer 409; validation failures of the draft or the
    audience answer 422. The body always exposes the error ``code``.
    """

    status_code = (
        status.HTTP_409_CONFLICT
        if isinstance(exc, _CONFLICT_ERRORS)
        else _UNPROCESSABLE
    )
    detail = {"code": exc.code, "message": exc.message}
    if exc.field:
        detail["field"] = exc.field
    return HTTPException(status_code=status_code, detail=detail)


def transport_error_to_http(exc: PlatformTransportError) -> HTTPException:
    """Return a 502 error carrying the platform's message."""

    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"code": "platform_error", "message": str(exc)},
    )
