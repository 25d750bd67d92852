"""Routes for listing principals and editing their capabilities."""

import logging

from fastapi import APIRouter, Depends

from loyalty_console.application.use_cases.principals import (
    list_principals as list_principals_uc,
    update_principal_permissions as update_principal_permissions_uc,
)
from loyalty_console.domain.entities import Principal, PrincipalKind
from loyalty_console.infrastructure.platform_client import (
    PlatformClient,
    PlatformTransportError,
)
from loyalty_console.interfaces.api.dependencies import get_platform_client
from loyalty_console.interfaces.api.routes_helpers import transport_error_to_http
from loyalty_console.interfaces.api.schemas import (
    CapabilityKeysRequest,
    CapabilityRead,
    PrincipalPermissionsRead,
    PrincipalRead,
)

router = APIRouter(prefix="/principals", tags=["principals"])
logger = logging.getLogger(__name__)


def _to_read_model(principal: Principal) -> PrincipalRead:
    return PrincipalRead(
        id=principal.id,
        kind=principal.kind.value,
        username=principal.username,
        email=principal.email,
        is_active=principal.is_active,
        created_at=principal.created_at,
        company_name=principal.company_name,
        permissions=[CapabilityRead.from_descriptor(d) for d in principal.capabilities],
    )


async def _list(client: PlatformClient, kind: PrincipalKind) -> list[PrincipalRead]:
    try:
        principals = await list_principals_uc(client, kind)
    except PlatformTransportError as exc:
        raise transport_error_to_http(exc) from exc
    return [_to_read_model(principal) for principal in principals]


async def _update(
    client: PlatformClient, kind: PrincipalKind, principal_id: str, keys: list[str]
) -> PrincipalPermissionsRead:
    try:
        granted = await update_principal_permissions_uc(client, kind, principal_id, keys)
    except PlatformTransportError as exc:
        logger.warning("Could not update permissions of %s %s", kind.value, principal_id)
        raise transport_error_to_http(exc) from exc
    return PrincipalPermissionsRead(
        id=principal_id,
        kind=kind.value,
        permissions=[CapabilityRead.from_descriptor(d) for d in granted],
    )


@router.get("/admins", response_model=list[PrincipalRead])
async def list_admins(client: PlatformClient = Depends(get_platform_client)):
    """Return the admins with their granted capabilities."""

    return await _list(client, PrincipalKind.ADMIN)


@router.get("/employees", response_model=list[PrincipalRead])
async def list_employees(client: PlatformClient = Depends(get_platform_client)):
    """Return the employees with their granted capabilities."""

    return await _list(client, PrincipalKind.EMPLOYEE)


@router.put("/admins/{principal_id}/permissions", response_model=PrincipalPermissionsRead)
async def update_admin_permissions(
    principal_id: str,
    payload: CapabilityKeysRequest,
    client: PlatformClient = Depends(get_platform_client),
):
    """Replace the capabilities granted to an admin."""

    return await _update(client, PrincipalKind.ADMIN, principal_id, payload.keys)


@router.put("/employees/{principal_id}/permissions", response_model=PrincipalPermissionsRead)
async def update_employee_permissions(
    principal_id: str,
    payload: CapabilityKeysRequest,
    client: PlatformClient = Depends(get_platform_client),
):
    """Replace the capabilities granted to an employee."""

    return await _update(client, PrincipalKind.EMPLOYEE, principal_id, payload.keys)
