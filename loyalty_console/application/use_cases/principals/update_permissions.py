"""Use case for replacing the capabilities granted to a principal."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from loyalty_console.application.use_cases.permissions import (
    decode_capabilities,
    encode_capabilities,
    known_keys,
)
from loyalty_console.domain.entities import CapabilityDescriptor, PrincipalKind, catalog_for
from loyalty_console.infrastructure.platform_client import PlatformClient

logger = logging.getLogger(__name__)


async def update_principal_permissions(
    client: PlatformClient,
    kind: PrincipalKind,
    principal_id: str,
    keys: Iterable[str],
) -> list[CapabilityDescriptor]:
    """Persist the capabilities named by ``keys`` and return the granted list.

    Every catalog key is sent so capabilities missing from ``keys`` are
    explicitly revoked. Keys unknown to the catalog are ignored.
    """

    requested = list(keys)
    catalog = catalog_for(kind)
    accepted = {key.value for key in known_keys(requested, catalog)}
    ignored = sorted({str(key) for key in requested} - accepted)
    if ignored:
        logger.warning(
            "Ignoring capabilities not assignable to %s principals: %s",
            kind.value,
            ", ".join(ignored),
        )

    permissions = encode_capabilities(requested, catalog)
    updated = await client.update_principal_permissions(kind, principal_id, permissions)
    logger.info(
        "Updated %s %s with %d granted capabilities",
        kind.value,
        principal_id,
        sum(permissions.values()),
    )
    if updated is not None:
        return updated.capabilities
    return decode_capabilities(permissions, catalog)
