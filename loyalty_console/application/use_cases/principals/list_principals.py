"""Use case for listing console principals."""

from loyalty_console.domain.entities import Principal, PrincipalKind
from loyalty_console.infrastructure.platform_client import PlatformClient


async def list_principals(client: PlatformClient, kind: PrincipalKind) -> list[Principal]:
    """Return the principals of ``kind`` with their capabilities decoded."""

    return await client.list_principals(kind)
