"""FastAPI dependency utilities."""

import httpx
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from loyalty_console.application.use_cases.notifications import ComposeSession
from loyalty_console.config import Settings, get_settings
from loyalty_console.domain.entities import PrincipalKind
from loyalty_console.infrastructure.compose_sessions import ComposeSessionRegistry
from loyalty_console.infrastructure.platform_client import PlatformClient

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings() -> Settings:
    """Return the application settings."""

    return get_settings()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the HTTP client opened by the application lifespan."""

    return request.app.state.http_client


def get_platform_client(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> PlatformClient:
    """Return a platform client acting with the caller's bearer token.

    The configured service token is used when the caller forwards none.
    """

    token = credentials.credentials if credentials else settings.platform_api_token
    return PlatformClient(http_client, token=token)


def get_compose_registry(request: Request) -> ComposeSessionRegistry:
    return request.app.state.compose_sessions


def get_compose_session(
    session_id: str,
    registry: ComposeSessionRegistry = Depends(get_compose_registry),
) -> ComposeSession:
    """Return the open compose session identified by ``session_id``."""

    session = registry.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Compose session not found",
        )
    return session


def get_principal_kind(principal: str) -> PrincipalKind:
    """Resolve the ``principal`` path segment into a :class:`PrincipalKind`."""

    try:
        return PrincipalKind(principal.lower())
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Unknown principal kind",
        ) from exc
