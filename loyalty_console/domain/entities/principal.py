"""Domain entity representing a console principal."""

from dataclasses import dataclass
from datetime import datetime

from .capability import CapabilityDescriptor, PrincipalKind


@dataclass
class Principal:
    """Admin or employee account together with its granted capabilities."""

    id: str
    kind: PrincipalKind
    username: str
    email: str
    is_active: bool
    capabilities: list[CapabilityDescriptor]
    created_at: datetime | None = None
    company_name: str | None = None


__all__ = ["Principal"]
