"""Translate platform JSON payloads into domain entities.

Field-name differences between platform versions (``_id``/``id``,
``phone``/``phoneNumber`` and so on) are absorbed here so the rest of the
application only sees the domain model.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from loyalty_console.application.use_cases.permissions import decode_capabilities
from loyalty_console.domain.entities import (
    Customer,
    DeliveryResult,
    DispatchResponse,
    ErrorResponse,
    MalformedResponse,
    Principal,
    PrincipalKind,
    ResultsResponse,
    SentNotification,
    catalog_for,
)
from loyalty_console.utils import parse_iso_datetime


def _first_present(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value not in (None, ""):
            return value
    return None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _identifier(payload: Mapping[str, Any]) -> str | None:
    value = _first_present(payload, "_id", "id")
    return None if value is None else str(value)


def customer_from_payload(payload: Mapping[str, Any]) -> Customer | None:
    """Return a :class:`Customer` or ``None`` when the payload has no identifier."""

    customer_id = _identifier(payload)
    if customer_id is None:
        return None

    device_token = _first_present(payload, "deviceToken", "device_token")
    return Customer(
        id=customer_id,
        username=_text(payload.get("username")),
        email=_text(payload.get("email")),
        phone_number=_text(_first_present(payload, "phone", "phoneNumber")),
        country=_text(payload.get("country")),
        device_token=str(device_token) if device_token is not None else None,
        address=_text(payload.get("address")),
        google_sign_up=bool(
            payload.get("isGoogleSignup") or payload.get("googleSignUp") or False
        ),
        created_at=parse_iso_datetime(payload.get("createdAt")),
    )


def principal_from_payload(
    kind: PrincipalKind, payload: Mapping[str, Any]
) -> Principal | None:
    """Return a :class:`Principal` with its capability map decoded."""

    principal_id = _identifier(payload)
    if principal_id is None:
        return None

    company_name = None
    if kind is PrincipalKind.EMPLOYEE:
        company = payload.get("company")
        if isinstance(company, Mapping):
            company_name = company.get("name")
        company_name = _first_present(payload, "companyName") or company_name

    return Principal(
        id=principal_id,
        kind=kind,
        username=_text(_first_present(payload, "username", "name")),
        email=_text(payload.get("email")),
        is_active=payload.get("isActive") is not False,
        capabilities=decode_capabilities(payload.get("permissions"), catalog_for(kind)),
        created_at=parse_iso_datetime(payload.get("createdAt")),
        company_name=_text(company_name) or None,
    )


def sent_notification_from_payload(payload: Mapping[str, Any]) -> SentNotification | None:
    """Return a history entry for a previously sent notification."""

    notification_id = _identifier(payload)
    if notification_id is None:
        return None

    return SentNotification(
        id=notification_id,
        title=_text(_first_present(payload, "title", "titleText")),
        message=_text(_first_present(payload, "message", "bodyText")),
        target=_text(_first_present(payload, "type", "target")) or "both",
        created_at=parse_iso_datetime(_first_present(payload, "createdAt", "sentAt")),
    )


def describe_error(value: Any) -> str | None:
    """Return a human readable message for an error value of unknown shape.

    ``False``, zero and empty containers carry no message and yield ``None``.
    """

    if isinstance(value, str):
        return value.strip() or None
    if not value:
        return None
    if isinstance(value, Mapping):
        message = value.get("message")
        if message:
            return str(message)
        errors = value.get("errors")
        if isinstance(errors, list):
            messages = [
                str(item["message"])
                for item in errors
                if isinstance(item, Mapping) and item.get("message")
            ]
            if messages:
                return "; ".join(messages)
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return str(value)


def _delivery_result(item: Any) -> DeliveryResult:
    if not isinstance(item, Mapping):
        return DeliveryResult(success=False, error="unexpected result entry")
    return DeliveryResult(
        success=item.get("success") is True,
        error=describe_error(item.get("error")),
    )


def dispatch_response_from_payload(body: Any) -> DispatchResponse:
    """Classify the body returned by the notifications endpoint.

    ``results`` wins over ``error``; anything else is reported as malformed.
    The platform may wrap either shape in its ``data`` envelope.
    """

    if not isinstance(body, Mapping):
        return MalformedResponse(raw=body)

    candidates: list[Mapping[str, Any]] = [body]
    data = body.get("data")
    if isinstance(data, Mapping):
        candidates.append(data)

    for candidate in candidates:
        results = candidate.get("results")
        if isinstance(results, list):
            return ResultsResponse(results=tuple(_delivery_result(item) for item in results))

    for candidate in candidates:
        error = describe_error(candidate.get("error"))
        if error:
            return ErrorResponse(error=error)

    if body.get("success") is False:
        message = describe_error(body.get("message"))
        if message:
            return ErrorResponse(error=message)

    return MalformedResponse(raw=body)


__all__ = [
    "customer_from_payload",
    "describe_error",
    "dispatch_response_from_payload",
    "principal_from_payload",
    "sent_notification_from_payload",
]
