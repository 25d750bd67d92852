"""Endpoints for the history of sent notifications."""

from fastapi import APIRouter, Depends, Response, status

from loyalty_console.infrastructure.platform_client import (
    PlatformClient,
    PlatformTransportError,
)
from loyalty_console.interfaces.api.dependencies import get_platform_client
from loyalty_console.interfaces.api.routes_helpers import transport_error_to_http
from loyalty_console.interfaces.api.schemas import SentNotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[SentNotificationRead])
async def list_notifications(client: PlatformClient = Depends(get_platform_client)):
    """Return the notifications previously sent through the platform."""

    try:
        notifications = await client.list_notifications()
    except PlatformTransportError as exc:
        raise transport_error_to_http(exc) from exc
    return [
        SentNotificationRead(
            id=notification.id,
            title=notification.title,
            message=notification.message,
            target=notification.target,
            created_at=notification.created_at,
        )
        for notification in notifications
    ]


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: str,
    client: PlatformClient = Depends(get_platform_client),
) -> Response:
    """Remove a notification from the platform history."""

    try:
        await client.delete_notification(notification_id)
    except PlatformTransportError as exc:
        raise transport_error_to_http(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
