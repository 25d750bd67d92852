"""Routes driving the compose-and-send push notification flow."""

import logging

from fastapi import APIRouter, Depends, Response, status

from loyalty_console.application.use_cases.notifications import ComposeSession
from loyalty_console.config import Settings
from loyalty_console.domain.entities import CustomerFilters
from loyalty_console.domain.errors import ComposeError
from loyalty_console.infrastructure.compose_sessions import ComposeSessionRegistry
from loyalty_console.infrastructure.platform_client import (
    CustomerSource,
    NotificationGateway,
    PlatformTransportError,
)
from loyalty_console.interfaces.api.dependencies import (
    get_app_settings,
    get_compose_registry,
    get_compose_session,
    get_platform_client,
)
from loyalty_console.interfaces.api.routes_helpers import (
    compose_error_to_http,
    transport_error_to_http,
)
from loyalty_console.interfaces.api.schemas import (
    ComposeFilters,
    ComposeMessageUpdate,
    ComposeModeUpdate,
    ComposeSessionRead,
    CustomerRowRead,
    DispatchSummaryRead,
)

router = APIRouter(prefix="/compose", tags=["compose"])
logger = logging.getLogger(__name__)


def _to_read_model(session: ComposeSession) -> ComposeSessionRead:
    selector = session.selector
    filters = selector.filters
    summary = None
    if session.summary is not None:
        summary = DispatchSummaryRead(
            outcome=session.summary.outcome.value,
            success_count=session.summary.success_count,
            failure_count=session.summary.failure_count,
            fatal_error=session.summary.fatal_error,
        )
    return ComposeSessionRead(
        id=session.id,
        status=session.status.value,
        mode=selector.mode,
        filters=ComposeFilters(
            name=filters.name,
            email=filters.email,
            phone_number=filters.phone_number,
            country=filters.country,
        ),
        customers=[
            CustomerRowRead(
                id=customer.id,
                username=customer.username,
                email=customer.email,
                phone_number=customer.phone_number,
                country=customer.country,
                can_receive_push=customer.can_receive_push(),
                selected=selector.is_selected(customer.id),
            )
            for customer in selector.filtered_view()
        ],
        total_customers=len(selector.customers),
        selected_count=len(selector.selection),
        all_filtered_selected=selector.all_filtered_selected(),
        title=session.draft.title,
        body=session.draft.body,
        image_url=session.draft.image_url,
        click_action=session.draft.click_action,
        summary=summary,
        message=session.message,
    )


@router.post("", response_model=ComposeSessionRead, status_code=status.HTTP_201_CREATED)
async def open_compose_session(
    customer_source: CustomerSource = Depends(get_platform_client),
    registry: ComposeSessionRegistry = Depends(get_compose_registry),
    settings: Settings = Depends(get_app_settings),
):
    """Open a compose session over the current customer population."""

    try:
        customers = await customer_source.fetch_customers()
    except PlatformTransportError as exc:
        raise transport_error_to_http(exc) from exc

    session = registry.create(max_batch_size=settings.max_dispatch_batch_size)
    session.open(customers)
    logger.info("Opened compose session %s over %d customers", session.id, len(customers))
    return _to_read_model(session)


@router.get("/{session_id}", response_model=ComposeSessionRead)
async def read_compose_session(session: ComposeSession = Depends(get_compose_session)):
    """Return the current state of the compose session."""

    return _to_read_model(session)


@router.put("/{session_id}/filters", response_model=ComposeSessionRead)
async def update_filters(
    payload: ComposeFilters,
    session: ComposeSession = Depends(get_compose_session),
):
    """Replace the filters applied to the customer list."""

    try:
        session.set_filters(CustomerFilters(**payload.model_dump()))
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.put("/{session_id}/mode", response_model=ComposeSessionRead)
async def update_mode(
    payload: ComposeModeUpdate,
    session: ComposeSession = Depends(get_compose_session),
):
    """Switch between notifying everyone and notifying the selection."""

    try:
        session.set_mode(payload.mode)
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.post("/{session_id}/selection/bulk", response_model=ComposeSessionRead)
async def toggle_filtered_selection(session: ComposeSession = Depends(get_compose_session)):
    """Select every visible customer, or deselect them when all are selected."""

    try:
        session.toggle_all_filtered()
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.post("/{session_id}/selection/{customer_id}", response_model=ComposeSessionRead)
async def toggle_customer_selection(
    customer_id: str,
    session: ComposeSession = Depends(get_compose_session),
):
    """Flip the selection of a single customer."""

    try:
        session.toggle_customer(customer_id)
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.put("/{session_id}/message", response_model=ComposeSessionRead)
async def update_message(
    payload: ComposeMessageUpdate,
    session: ComposeSession = Depends(get_compose_session),
):
    """Store the title and body of the notification being written."""

    try:
        session.update_draft(
            title=payload.title,
            body=payload.body,
            image_url=payload.image_url,
            click_action=payload.click_action,
        )
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.post("/{session_id}/send", response_model=ComposeSessionRead)
async def send_notification(
    session: ComposeSession = Depends(get_compose_session),
    gateway: NotificationGateway = Depends(get_platform_client),
):
    """Dispatch the notification and report the aggregate outcome.

    Platform failures end the flow as ``failed``; only local validation and
    flow conflicts answer with an error status.
    """

    try:
        await session.send(gateway)
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.post("/{session_id}/cancel", response_model=ComposeSessionRead)
async def cancel_dispatch(session: ComposeSession = Depends(get_compose_session)):
    """Abandon an outstanding dispatch and keep composing."""

    try:
        session.cancel()
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.post("/{session_id}/reset", response_model=ComposeSessionRead)
async def reset_after_dispatch(session: ComposeSession = Depends(get_compose_session)):
    """Acknowledge the last outcome and start a new draft."""

    try:
        session.acknowledge()
    except ComposeError as exc:
        raise compose_error_to_http(exc) from exc
    return _to_read_model(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_compose_session(
    session: ComposeSession = Depends(get_compose_session),
    registry: ComposeSessionRegistry = Depends(get_compose_registry),
) -> Response:
    """Close the compose session and discard its draft and selection."""

    registry.close(session.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
