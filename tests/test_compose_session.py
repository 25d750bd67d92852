"""Tests for the compose-and-send state machine."""

from __future__ import annotations

import asyncio

import pytest

from loyalty_console.application.use_cases.notifications import ComposeSession, ComposeStatus
from loyalty_console.domain.entities import (
    BroadcastMode,
    CustomerFilters,
    DeliveryResult,
    MalformedResponse,
    ResultsResponse,
)
from loyalty_console.domain.errors import (
    DispatchCancelledError,
    DispatchInProgressError,
    EmptyAudienceError,
    InvalidComposeStateError,
    MessageValidationError,
    NoRecipientsError,
)

PARTIAL = ResultsResponse(
    results=(DeliveryResult(True), DeliveryResult(False, "NotRegistered"), DeliveryResult(True))
)


class RecordingGateway:
    def __init__(self, response=PARTIAL) -> None:
        self.response = response
        self.requests = []

    async def submit_notification(self, request):
        self.requests.append(request)
        return self.response


class BlockingGateway(RecordingGateway):
    """Gateway whose answer is held back until ``release`` is set."""

    def __init__(self, response=PARTIAL) -> None:
        super().__init__(response)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def submit_notification(self, request):
        self.requests.append(request)
        self.started.set()
        await self.release.wait()
        return self.response


@pytest.fixture
def session(customers) -> ComposeSession:
    compose = ComposeSession()
    compose.open(customers)
    compose.update_draft(title=" Weekend sale ", body=" 20% off everything ")
    return compose


@pytest.mark.asyncio
async def test_send_to_everyone_reports_partial_failure(session) -> None:
    gateway = RecordingGateway()

    summary = await session.send(gateway)

    assert (summary.success_count, summary.failure_count) == (2, 1)
    assert session.status is ComposeStatus.PARTIALLY_FAILED
    assert session.message == "Notification sent to 2 device(s); 1 failed"
    request = gateway.requests[0]
    assert request.title_text == "Weekend sale"
    assert request.body_text == "20% off everything"
    assert request.device_tokens == ("tok-ann", "tok-anna", "tok-carla")


@pytest.mark.asyncio
async def test_send_to_selection_only_uses_selected_tokens(session) -> None:
    session.set_mode(BroadcastMode.SELECTED)
    session.set_filters(CustomerFilters(name="ann"))
    session.toggle_all_filtered()
    gateway = RecordingGateway(ResultsResponse(results=(DeliveryResult(True), DeliveryResult(True))))

    await session.send(gateway)

    assert session.status is ComposeStatus.SUCCEEDED
    assert gateway.requests[0].device_tokens == ("tok-ann", "tok-anna")


@pytest.mark.asyncio
async def test_empty_selection_is_rejected_before_dispatch(session) -> None:
    session.set_mode(BroadcastMode.SELECTED)
    gateway = RecordingGateway()

    with pytest.raises(EmptyAudienceError):
        await session.send(gateway)

    assert session.status is ComposeStatus.COMPOSING
    assert gateway.requests == []


@pytest.mark.asyncio
async def test_selection_without_tokens_is_rejected(session) -> None:
    session.set_mode(BroadcastMode.SELECTED)
    session.toggle_customer("c3")
    gateway = RecordingGateway()

    with pytest.raises(NoRecipientsError):
        await session.send(gateway)

    assert session.status is ComposeStatus.COMPOSING
    assert gateway.requests == []


@pytest.mark.asyncio
async def test_blank_title_is_rejected(session) -> None:
    session.update_draft(title="  ", body="Body")

    with pytest.raises(MessageValidationError) as exc_info:
        await session.send(RecordingGateway())

    assert exc_info.value.field == "title"
    assert session.status is ComposeStatus.COMPOSING


@pytest.mark.asyncio
async def test_batch_limit_is_enforced(customers) -> None:
    session = ComposeSession(max_batch_size=2)
    session.open(customers)
    session.update_draft(title="Title", body="Body")

    with pytest.raises(MessageValidationError) as exc_info:
        await session.send(RecordingGateway())

    assert exc_info.value.code == "batch_too_large"


@pytest.mark.asyncio
async def test_malformed_response_fails_the_dispatch(session) -> None:
    await session.send(RecordingGateway(MalformedResponse(raw={})))

    assert session.status is ComposeStatus.FAILED
    assert session.summary.fatal_error == "unexpected response shape"
    assert session.message == "Failed to send notification: unexpected response shape"


@pytest.mark.asyncio
async def test_second_send_while_submitting_is_rejected(session) -> None:
    gateway = BlockingGateway()
    first = asyncio.ensure_future(session.send(gateway))
    await gateway.started.wait()

    assert session.status is ComposeStatus.SUBMITTING
    with pytest.raises(DispatchInProgressError):
        await session.send(gateway)
    with pytest.raises(DispatchInProgressError):
        session.update_draft(title="Other", body="Other")

    gateway.release.set()
    await first

    assert len(gateway.requests) == 1
    assert session.status is ComposeStatus.PARTIALLY_FAILED


@pytest.mark.asyncio
async def test_cancel_returns_to_composing(session) -> None:
    gateway = BlockingGateway()
    pending = asyncio.ensure_future(session.send(gateway))
    await gateway.started.wait()

    session.cancel()

    with pytest.raises(DispatchCancelledError):
        await pending
    assert session.status is ComposeStatus.COMPOSING
    assert session.summary is None
    assert session.draft.title == " Weekend sale "

    await session.send(RecordingGateway())
    assert session.status is ComposeStatus.PARTIALLY_FAILED


@pytest.mark.asyncio
async def test_resend_right_after_cancel_keeps_the_submission_guard(session) -> None:
    first_gateway = BlockingGateway()
    first = asyncio.ensure_future(session.send(first_gateway))
    await first_gateway.started.wait()

    session.cancel()
    second_gateway = BlockingGateway()
    second = asyncio.ensure_future(session.send(second_gateway))
    await second_gateway.started.wait()

    with pytest.raises(DispatchCancelledError):
        await first

    assert session.status is ComposeStatus.SUBMITTING
    third_gateway = RecordingGateway()
    with pytest.raises(DispatchInProgressError):
        await session.send(third_gateway)
    assert third_gateway.requests == []

    second_gateway.release.set()
    await second

    assert session.status is ComposeStatus.PARTIALLY_FAILED
    assert session.summary.success_count == 2


@pytest.mark.asyncio
async def test_late_answer_of_a_cancelled_dispatch_is_discarded(session) -> None:
    first_gateway = BlockingGateway()
    first = asyncio.ensure_future(session.send(first_gateway))
    await first_gateway.started.wait()
    first_gateway.release.set()
    await asyncio.sleep(0)

    session.cancel()
    second_gateway = BlockingGateway(ResultsResponse(results=(DeliveryResult(True),)))
    second = asyncio.ensure_future(session.send(second_gateway))
    await second_gateway.started.wait()

    with pytest.raises(DispatchCancelledError):
        await first
    assert session.status is ComposeStatus.SUBMITTING
    assert session.summary is None

    second_gateway.release.set()
    await second
    assert session.status is ComposeStatus.SUCCEEDED


@pytest.mark.asyncio
async def test_unexpected_gateway_error_ends_in_failed(session) -> None:
    class BrokenGateway:
        async def submit_notification(self, request):
            raise RuntimeError("serializer exploded")

    summary = await session.send(BrokenGateway())

    assert summary.fatal_error == "serializer exploded"
    assert session.status is ComposeStatus.FAILED
    assert session.message == "Failed to send notification: serializer exploded"


def test_cancel_without_dispatch_is_invalid(session) -> None:
    with pytest.raises(InvalidComposeStateError):
        session.cancel()


@pytest.mark.asyncio
async def test_close_during_dispatch_discards_everything(session) -> None:
    session.set_mode(BroadcastMode.SELECTED)
    session.toggle_customer("c1")
    gateway = BlockingGateway()
    pending = asyncio.ensure_future(session.send(gateway))
    await gateway.started.wait()

    session.close()

    with pytest.raises(DispatchCancelledError):
        await pending
    assert session.status is ComposeStatus.IDLE
    assert session.summary is None
    assert session.draft.title == ""
    assert session.selector.selection == frozenset()
    assert session.selector.customers == []


@pytest.mark.asyncio
async def test_acknowledge_starts_a_fresh_draft(session, customers) -> None:
    session.set_filters(CustomerFilters(country="uae"))
    await session.send(RecordingGateway())

    session.acknowledge()

    assert session.status is ComposeStatus.COMPOSING
    assert session.draft.title == ""
    assert session.summary is None
    assert session.selector.filters.is_empty()
    assert len(session.selector.customers) == len(customers)


def test_acknowledge_requires_a_finished_dispatch(session) -> None:
    with pytest.raises(InvalidComposeStateError):
        session.acknowledge()


def test_editing_requires_an_open_session(customers) -> None:
    session = ComposeSession()

    with pytest.raises(InvalidComposeStateError):
        session.toggle_customer("c1")

    session.open(customers)
    session.toggle_customer("c1")
    session.close()

    with pytest.raises(InvalidComposeStateError):
        session.set_mode(BroadcastMode.SELECTED)


def test_reopening_clears_previous_state(customers) -> None:
    session = ComposeSession()
    session.open(customers)
    session.set_mode(BroadcastMode.SELECTED)
    session.toggle_customer("c2")
    session.update_draft(title="Draft", body="Body")

    session.open(customers[:2])

    assert session.selector.mode is BroadcastMode.ALL
    assert session.selector.selection == frozenset()
    assert session.draft.title == ""
    assert len(session.selector.customers) == 2
