"""Domain entities describing a push notification dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Union

UNEXPECTED_RESPONSE_SHAPE = "unexpected response shape"


@dataclass(frozen=True)
class NotificationRequest:
    """Single batched push request submitted to the platform."""

    title_text: str
    body_text: str
    device_tokens: tuple[str, ...]
    image_url: str | None = None
    click_action: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body expected by the platform notifications endpoint."""

        payload: dict[str, Any] = {
            "titleText": self.title_text,
            "bodyText": self.body_text,
            "deviceTokens": list(self.device_tokens),
        }
        if self.image_url:
            payload["imageUrl"] = self.image_url
        if self.click_action:
            payload["clickAction"] = self.click_action
        return payload


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome reported by the platform for one submitted token."""

    success: bool
    error: str | None = None


@dataclass(frozen=True)
class ResultsResponse:
    """Response carrying one delivery result per submitted token."""

    results: tuple[DeliveryResult, ...]


@dataclass(frozen=True)
class ErrorResponse:
    """Response carrying a top-level error message."""

    error: str


@dataclass(frozen=True)
class MalformedResponse:
    """Response matching neither known shape."""

    raw: Any = None


DispatchResponse = Union[ResultsResponse, ErrorResponse, MalformedResponse]


class DispatchOutcome(str, Enum):
    """Terminal classification of a dispatch."""

    SUCCEEDED = "succeeded"
    PARTIALLY_FAILED = "partially_failed"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatchSummary:
    """Aggregate counts derived from a dispatch response."""

    success_count: int
    failure_count: int
    fatal_error: str | None = None

    @property
    def outcome(self) -> DispatchOutcome:
        if self.fatal_error is not None or self.success_count == 0:
            return DispatchOutcome.FAILED
        if self.failure_count > 0:
            return DispatchOutcome.PARTIALLY_FAILED
        return DispatchOutcome.SUCCEEDED


@dataclass
class SentNotification:
    """Notification stored in the platform history."""

    id: str
    title: str
    message: str
    target: str = "both"
    created_at: datetime | None = None


__all__ = [
    "UNEXPECTED_RESPONSE_SHAPE",
    "DeliveryResult",
    "DispatchOutcome",
    "DispatchResponse",
    "DispatchSummary",
    "ErrorResponse",
    "MalformedResponse",
    "NotificationRequest",
    "ResultsResponse",
    "SentNotification",
]
