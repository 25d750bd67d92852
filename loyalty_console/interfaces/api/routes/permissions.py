"""Endpoints exposing the capability catalogs and the permission codec."""

from fastapi import APIRouter, Depends

from loyalty_console.application.use_cases.permissions import (
    decode_capabilities,
    encode_capabilities,
)
from loyalty_console.domain.entities import PrincipalKind, catalog_for
from loyalty_console.interfaces.api.dependencies import get_principal_kind
from loyalty_console.interfaces.api.schemas import (
    CapabilityKeysRequest,
    CapabilityMapRead,
    CapabilityMapRequest,
    CapabilityRead,
)

router = APIRouter(prefix="/permissions", tags=["permissions"])


@router.get("/catalogs/{principal}", response_model=list[CapabilityRead])
def read_catalog(kind: PrincipalKind = Depends(get_principal_kind)) -> list[CapabilityRead]:
    """Return the capabilities assignable to the principal kind, in display order."""

    return [CapabilityRead.from_descriptor(descriptor) for descriptor in catalog_for(kind)]


@router.post("/{principal}/encode", response_model=CapabilityMapRead)
def encode_permissions(
    payload: CapabilityKeysRequest,
    kind: PrincipalKind = Depends(get_principal_kind),
) -> CapabilityMapRead:
    """Convert the selected capability keys into the persisted map."""

    return CapabilityMapRead(permissions=encode_capabilities(payload.keys, catalog_for(kind)))


@router.post("/{principal}/decode", response_model=list[CapabilityRead])
def decode_permissions(
    payload: CapabilityMapRequest,
    kind: PrincipalKind = Depends(get_principal_kind),
) -> list[CapabilityRead]:
    """Convert a persisted map into the granted capabilities."""

    return [
        CapabilityRead.from_descriptor(descriptor)
        for descriptor in decode_capabilities(payload.permissions, catalog_for(kind))
    ]
