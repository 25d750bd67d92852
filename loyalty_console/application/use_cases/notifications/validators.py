"""Validation helpers for notification drafts."""

from __future__ import annotations

from collections.abc import Sequence

from loyalty_console.domain.errors import MessageValidationError


def ensure_message_content(title: str | None, body: str | None) -> tuple[str, str]:
    """Return the stripped title and body or raise ``MessageValidationError``."""

    normalized_title = (title or "").strip()
    if not normalized_title:
        raise MessageValidationError("Title is required", field="title")

    normalized_body = (body or "").strip()
    if not normalized_body:
        raise MessageValidationError("Message is required", field="body")

    return normalized_title, normalized_body


def ensure_batch_size(tokens: Sequence[str], limit: int | None) -> None:
    """Reject token lists larger than ``limit`` when a limit is configured."""

    if limit is None or len(tokens) <= limit:
        return
    raise MessageValidationError(
        f"Cannot notify {len(tokens)} devices at once; the limit is {limit}",
        field="audience",
        code="batch_too_large",
    )


__all__ = ["ensure_batch_size", "ensure_message_content"]
