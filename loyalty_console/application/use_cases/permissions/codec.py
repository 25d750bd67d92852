"""Conversion between persisted capability maps and descriptor lists.

Both directions are total: malformed input never raises because the result
drives form rendering for principal editing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from loyalty_console.domain.entities import CapabilityDescriptor, CapabilityKey


def _key_value(key: Any) -> str | None:
    if isinstance(key, CapabilityKey):
        return key.value
    if isinstance(key, str):
        return key
    return None


def encode_capabilities(
    selected_keys: Iterable[str | CapabilityKey] | None,
    catalog: Iterable[CapabilityDescriptor | None],
) -> dict[str, bool]:
    """Return a map holding every catalog key, ``True`` only for selected ones."""

    selected = {_key_value(key) for key in (selected_keys or ())}
    selected.discard(None)
    return {
        descriptor.key.value: descriptor.key.value in selected
        for descriptor in catalog or ()
        if descriptor is not None
    }


def decode_capabilities(
    capability_map: Mapping[str, Any] | None,
    catalog: Iterable[CapabilityDescriptor | None],
) -> list[CapabilityDescriptor]:
    """Return the catalog descriptors granted by ``capability_map`` in catalog order.

    Keys unknown to the catalog are ignored and only a literal ``True`` grants
    a capability.
    """

    if not isinstance(capability_map, Mapping):
        return []
    return [
        descriptor
        for descriptor in catalog or ()
        if descriptor is not None and capability_map.get(descriptor.key.value) is True
    ]


def known_keys(
    keys: Iterable[Any] | None, catalog: Iterable[CapabilityDescriptor | None]
) -> list[CapabilityKey]:
    """Return the members of ``keys`` that belong to ``catalog``, in catalog order."""

    requested = {_key_value(key) for key in (keys or ())}
    return [
        descriptor.key
        for descriptor in catalog or ()
        if descriptor is not None and descriptor.key.value in requested
    ]


__all__ = ["decode_capabilities", "encode_capabilities", "known_keys"]
