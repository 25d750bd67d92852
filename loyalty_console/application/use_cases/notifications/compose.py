"""State machine for the compose-and-send notification flow.

``IDLE -> COMPOSING -> SUBMITTING -> {SUCCEEDED | PARTIALLY_FAILED | FAILED}``.
Closing from any state returns to ``IDLE`` and discards the draft, the filters
and the selection.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from loyalty_console.application.use_cases.audience import AudienceSelector
from loyalty_console.domain.entities import (
    BroadcastMode,
    Customer,
    CustomerFilters,
    DispatchOutcome,
    DispatchSummary,
)
from loyalty_console.domain.errors import (
    DispatchCancelledError,
    DispatchInProgressError,
    InvalidComposeStateError,
)
from loyalty_console.infrastructure.platform_client import NotificationGateway

from .dispatch import describe_summary, dispatch_notification
from .tokens import collect_device_tokens
from .validators import ensure_batch_size, ensure_message_content

logger = logging.getLogger(__name__)


class ComposeStatus(str, Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    PARTIALLY_FAILED = "partially_failed"
    FAILED = "failed"


_OUTCOME_STATUS: dict[DispatchOutcome, ComposeStatus] = {
    DispatchOutcome.SUCCEEDED: ComposeStatus.SUCCEEDED,
    DispatchOutcome.PARTIALLY_FAILED: ComposeStatus.PARTIALLY_FAILED,
    DispatchOutcome.FAILED: ComposeStatus.FAILED,
}

TERMINAL_STATUSES = frozenset(_OUTCOME_STATUS.values())


@dataclass
class ComposeDraft:
    """Form fields of the notification being written."""

    title: str = ""
    body: str = ""
    image_url: str | None = None
    click_action: str | None = None


class ComposeSession:
    """One open instance of the compose-and-send flow."""

    def __init__(
        self, *, session_id: str | None = None, max_batch_size: int | None = None
    ) -> None:
        self.id = session_id or uuid4().hex
        self.status = ComposeStatus.IDLE
        self.selector = AudienceSelector()
        self.draft = ComposeDraft()
        self.summary: DispatchSummary | None = None
        self.message: str | None = None
        self._max_batch_size = max_batch_size
        self._task: asyncio.Task[DispatchSummary] | None = None

    def open(self, customers: Sequence[Customer]) -> None:
        """Start composing over ``customers`` with a fresh draft and selection."""

        if self.status is ComposeStatus.SUBMITTING:
            raise DispatchInProgressError("A notification is still being sent")
        self._discard()
        self.selector.load(customers)
        self.status = ComposeStatus.COMPOSING

    def close(self) -> None:
        """Return to ``IDLE``, cancelling any outstanding dispatch."""

        self.status = ComposeStatus.IDLE
        self._detach_task()
        self._discard()
        self.selector.load(())

    def acknowledge(self) -> None:
        """Leave a terminal state and start a new draft over the same customers."""

        if self.status not in TERMINAL_STATUSES:
            raise InvalidComposeStateError("There is no finished dispatch to acknowledge")
        self.open(self.selector.customers)

    def _discard(self) -> None:
        self.selector.reset()
        self.draft = ComposeDraft()
        self.summary = None
        self.message = None
        self._task = None

    def _detach_task(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    def _ensure_composing(self) -> None:
        if self.status is ComposeStatus.SUBMITTING:
            raise DispatchInProgressError("A notification is still being sent")
        if self.status is not ComposeStatus.COMPOSING:
            raise InvalidComposeStateError(
                f"The compose flow is {self.status.value}, not composing"
            )

    def update_draft(
        self,
        *,
        title: str,
        body: str,
        image_url: str | None = None,
        click_action: str | None = None,
    ) -> None:
        self._ensure_composing()
        self.draft = ComposeDraft(
            title=title, body=body, image_url=image_url, click_action=click_action
        )

    def set_filters(self, filters: CustomerFilters) -> None:
        self._ensure_composing()
        self.selector.set_filters(filters)

    def set_mode(self, mode: BroadcastMode) -> None:
        self._ensure_composing()
        self.selector.set_mode(mode)

    def toggle_customer(self, customer_id: str) -> bool:
        self._ensure_composing()
        return self.selector.toggle(customer_id)

    def toggle_all_filtered(self) -> bool:
        self._ensure_composing()
        return self.selector.toggle_all_filtered()

    async def send(self, gateway: NotificationGateway) -> DispatchSummary:
        """Validate the draft, resolve recipients and dispatch once.

        Local validation errors leave the session composing. While the
        dispatch is outstanding further calls raise ``DispatchInProgressError``.
        A dispatch detached by ``cancel`` or ``close`` raises
        ``DispatchCancelledError`` and never touches the session again.
        """

        self._ensure_composing()
        title, body = ensure_message_content(self.draft.title, self.draft.body)
        audience = self.selector.resolve_audience()
        tokens = collect_device_tokens(audience)
        ensure_batch_size(tokens, self._max_batch_size)

        self.status = ComposeStatus.SUBMITTING
        self.summary = None
        self.message = None
        task = asyncio.ensure_future(
            dispatch_notification(
                gateway,
                title_text=title,
                body_text=body,
                tokens=tokens,
                image_url=self.draft.image_url,
                click_action=self.draft.click_action,
            )
        )
        self._task = task

        try:
            summary = await task
        except asyncio.CancelledError:
            if self._task is not task:
                logger.info("Dispatch for compose session %s was cancelled", self.id)
                raise DispatchCancelledError("The notification dispatch was cancelled") from None
            # The caller itself was cancelled; the dispatch went down with it.
            self._task = None
            self.status = ComposeStatus.COMPOSING
            raise
        except Exception as exc:
            logger.exception("Unexpected error while dispatching session %s", self.id)
            summary = DispatchSummary(
                success_count=0,
                failure_count=0,
                fatal_error=str(exc) or exc.__class__.__name__,
            )

        if self._task is not task:
            logger.info("Discarding the outcome of a cancelled dispatch for %s", self.id)
            raise DispatchCancelledError("The notification dispatch was cancelled")
        self._task = None
        self._finish(summary)
        return summary

    def _finish(self, summary: DispatchSummary) -> None:
        self.summary = summary
        self.message = describe_summary(summary)
        self.status = _OUTCOME_STATUS[summary.outcome]

    def cancel(self) -> None:
        """Abandon the outstanding dispatch and return to ``COMPOSING``."""

        if self.status is not ComposeStatus.SUBMITTING:
            raise InvalidComposeStateError("There is no dispatch in progress")
        self.status = ComposeStatus.COMPOSING
        self._detach_task()


__all__ = ["TERMINAL_STATUSES", "ComposeDraft", "ComposeSession", "ComposeStatus"]
