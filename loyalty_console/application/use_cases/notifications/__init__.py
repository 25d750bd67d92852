"""Use cases for composing and dispatching push notifications."""

from .compose import TERMINAL_STATUSES, ComposeDraft, ComposeSession, ComposeStatus
from .dispatch import describe_summary, dispatch_notification, summarize_response
from .tokens import collect_device_tokens
from .validators import ensure_batch_size, ensure_message_content

__all__ = [
    "TERMINAL_STATUSES",
    "ComposeDraft",
    "ComposeSession",
    "ComposeStatus",
    "collect_device_tokens",
    "describe_summary",
    "dispatch_notification",
    "ensure_batch_size",
    "ensure_message_content",
    "summarize_response",
]
