"""HTTP client for the remote loyalty platform superadmin API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from loyalty_console.config import Settings
from loyalty_console.domain.entities import (
    Customer,
    DispatchResponse,
    NotificationRequest,
    Principal,
    PrincipalKind,
    SentNotification,
)

from .mappers import (
    customer_from_payload,
    describe_error,
    dispatch_response_from_payload,
    principal_from_payload,
    sent_notification_from_payload,
)

logger = logging.getLogger(__name__)

_PRINCIPAL_PATHS: dict[PrincipalKind, str] = {
    PrincipalKind.ADMIN: "/admins",
    PrincipalKind.EMPLOYEE: "/employees",
}


class PlatformTransportError(RuntimeError):
    """The platform could not be reached or answered with an HTTP error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotificationGateway(Protocol):
    """Collaborator able to submit a batched push request."""

    async def submit_notification(self, request: NotificationRequest) -> DispatchResponse:
        ...


class CustomerSource(Protocol):
    """Collaborator able to load the customer population."""

    async def fetch_customers(self) -> list[Customer]:
        ...


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Return the shared HTTP client used to reach the platform."""

    return httpx.AsyncClient(
        base_url=settings.platform_api_base_url,
        timeout=settings.platform_request_timeout_seconds,
        headers={"Content-Type": "application/json"},
    )


def _as_list(data: Any) -> list[Any]:
    return data if isinstance(data, list) else []


class PlatformClient:
    """Issue requests to the platform on behalf of the authenticated operator."""

    def __init__(self, http_client: httpx.AsyncClient, *, token: str | None = None) -> None:
        self._http = http_client
        self._token = token

    def _headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        try:
            response = await self._http.request(
                method, path, json=json, headers=self._headers()
            )
        except httpx.HTTPError as exc:
            logger.error("Platform request %s %s failed: %s", method, path, exc)
            raise PlatformTransportError(f"Could not reach the platform: {exc}") from exc

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None
            if response.is_success:
                logger.error(
                    "Platform request %s %s returned a non-JSON body", method, path
                )
                raise PlatformTransportError(
                    "The platform returned an invalid response",
                    status_code=response.status_code,
                ) from None

        if not response.is_success:
            details = describe_error(body.get("message")) if isinstance(body, Mapping) else None
            if details is None and isinstance(body, Mapping):
                details = describe_error(body.get("error"))
            logger.error(
                "Platform request %s %s responded with status %s: %s",
                method,
                path,
                response.status_code,
                details or "no details",
            )
            raise PlatformTransportError(
                details or f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        return body

    async def _request_data(self, method: str, path: str, *, json: Any = None) -> Any:
        """Issue a request and unwrap the ``{success, data, message}`` envelope."""

        body = await self._request(method, path, json=json)
        if body is None:
            return None
        if not isinstance(body, Mapping):
            raise PlatformTransportError("The platform returned an invalid response")
        if body.get("success") is False:
            raise PlatformTransportError(
                describe_error(body.get("message")) or "The platform rejected the request"
            )
        return body.get("data")

    async def fetch_customers(self) -> list[Customer]:
        data = await self._request_data("GET", "/customers")
        customers = [
            customer_from_payload(item) for item in _as_list(data) if isinstance(item, Mapping)
        ]
        return [customer for customer in customers if customer is not None]

    async def submit_notification(self, request: NotificationRequest) -> DispatchResponse:
        body = await self._request("POST", "/notifications", json=request.to_payload())
        return dispatch_response_from_payload(body)

    async def list_notifications(self) -> list[SentNotification]:
        data = await self._request_data("GET", "/notifications")
        notifications = [
            sent_notification_from_payload(item)
            for item in _as_list(data)
            if isinstance(item, Mapping)
        ]
        return [notification for notification in notifications if notification is not None]

    async def delete_notification(self, notification_id: str) -> None:
        await self._request_data("DELETE", f"/notifications/{notification_id}")

    async def list_principals(self, kind: PrincipalKind) -> list[Principal]:
        data = await self._request_data("GET", _PRINCIPAL_PATHS[kind])
        principals = [
            principal_from_payload(kind, item)
            for item in _as_list(data)
            if isinstance(item, Mapping)
        ]
        return [principal for principal in principals if principal is not None]

    async def update_principal_permissions(
        self, kind: PrincipalKind, principal_id: str, permissions: Mapping[str, bool]
    ) -> Principal | None:
        """Store ``permissions`` on the principal and return the updated record."""

        data = await self._request_data(
            "PUT",
            f"{_PRINCIPAL_PATHS[kind]}/{principal_id}",
            json={"permissions": dict(permissions)},
        )
        if isinstance(data, Mapping):
            return principal_from_payload(kind, data)
        return None


__all__ = [
    "CustomerSource",
    "NotificationGateway",
    "PlatformClient",
    "PlatformTransportError",
    "create_http_client",
]
