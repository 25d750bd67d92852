"""Submission of a batched push notification and interpretation of the result."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from loyalty_console.domain.entities import (
    UNEXPECTED_RESPONSE_SHAPE,
    DispatchOutcome,
    DispatchResponse,
    DispatchSummary,
    ErrorResponse,
    NotificationRequest,
    ResultsResponse,
)
from loyalty_console.infrastructure.platform_client import (
    NotificationGateway,
    PlatformTransportError,
)

logger = logging.getLogger(__name__)


def summarize_response(response: DispatchResponse) -> DispatchSummary:
    """Reduce a dispatch response to success and failure counts.

    Unknown shapes fail closed.
    """

    if isinstance(response, ResultsResponse):
        success_count = sum(1 for result in response.results if result.success)
        failure_count = len(response.results) - success_count
        if success_count > 0:
            return DispatchSummary(success_count=success_count, failure_count=failure_count)

        first_error = next(
            (result.error for result in response.results if result.error), None
        )
        if not response.results:
            fatal_error = "The platform returned no delivery results"
        elif first_error:
            fatal_error = f"All {failure_count} deliveries failed: {first_error}"
        else:
            fatal_error = f"All {failure_count} deliveries failed"
        return DispatchSummary(
            success_count=0, failure_count=failure_count, fatal_error=fatal_error
        )

    if isinstance(response, ErrorResponse):
        return DispatchSummary(success_count=0, failure_count=0, fatal_error=response.error)

    logger.warning("Notification dispatch returned an unexpected response shape")
    return DispatchSummary(
        success_count=0, failure_count=0, fatal_error=UNEXPECTED_RESPONSE_SHAPE
    )


async def dispatch_notification(
    gateway: NotificationGateway,
    *,
    title_text: str,
    body_text: str,
    tokens: Sequence[str],
    image_url: str | None = None,
    click_action: str | None = None,
) -> DispatchSummary:
    """Submit one request for every token and summarize the platform answer.

    Transport failures are reported as a failed summary; nothing is retried.
    """

    request = NotificationRequest(
        title_text=title_text,
        body_text=body_text,
        device_tokens=tuple(tokens),
        image_url=image_url,
        click_action=click_action,
    )
    logger.info("Submitting push notification to %d device tokens", len(request.device_tokens))

    try:
        response = await gateway.submit_notification(request)
    except PlatformTransportError as exc:
        logger.error("Push notification submission failed: %s", exc)
        return DispatchSummary(success_count=0, failure_count=0, fatal_error=str(exc))

    summary = summarize_response(response)
    if summary.outcome is DispatchOutcome.FAILED:
        logger.warning("Push notification dispatch failed: %s", summary.fatal_error)
    else:
        logger.info(
            "Push notification dispatched: %d succeeded, %d failed",
            summary.success_count,
            summary.failure_count,
        )
    return summary


def describe_summary(summary: DispatchSummary) -> str:
    """Return the user-facing message for ``summary``."""

    outcome = summary.outcome
    if outcome is DispatchOutcome.SUCCEEDED:
        return f"Notification sent to {summary.success_count} device(s)"
    if outcome is DispatchOutcome.PARTIALLY_FAILED:
        return (
            f"Notification sent to {summary.success_count} device(s); "
            f"{summary.failure_count} failed"
        )
    return f"Failed to send notification: {summary.fatal_error or 'unknown error'}"


__all__ = ["describe_summary", "dispatch_notification", "summarize_response"]
