"""Principal schemas."""

from datetime import datetime

from pydantic import BaseModel

from .permission import CapabilityRead


class PrincipalRead(BaseModel):
    id: str
    kind: str
    username: str
    email: str
    is_active: bool
    created_at: datetime | None
    company_name: str | None = None
    permissions: list[CapabilityRead]


class PrincipalPermissionsRead(BaseModel):
    id: str
    kind: str
    permissions: list[CapabilityRead]
