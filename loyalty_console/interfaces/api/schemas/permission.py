"""Pydantic models describing capability payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from loyalty_console.domain.entities import CapabilityDescriptor


class CapabilityRead(BaseModel):
    """Capability descriptor as shown in the console."""

    key: str
    name: str
    description: str

    @classmethod
    def from_descriptor(cls, descriptor: CapabilityDescriptor) -> "CapabilityRead":
        return cls(
            key=descriptor.key.value,
            name=descriptor.name,
            description=descriptor.description,
        )


class CapabilityKeysRequest(BaseModel):
    """Capability keys selected in the console form."""

    keys: list[str] = Field(default_factory=list, description="Granted capability keys")


class CapabilityMapRequest(BaseModel):
    """Capability map as persisted on a principal; any value shape is accepted."""

    permissions: dict[str, Any] | None = None


class CapabilityMapRead(BaseModel):
    """Capability map holding every catalog key."""

    permissions: dict[str, bool]


__all__ = [
    "CapabilityKeysRequest",
    "CapabilityMapRead",
    "CapabilityMapRequest",
    "CapabilityRead",
]
