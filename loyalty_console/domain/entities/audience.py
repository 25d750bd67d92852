"""Value objects describing how an audience is picked."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class BroadcastMode(str, Enum):
    """Whether a notification targets every customer or an explicit selection."""

    ALL = "all"
    SELECTED = "selected"


@dataclass(frozen=True)
class CustomerFilters:
    """Case-insensitive substring predicates, one per filterable field.

    A blank predicate places no constraint on its field.
    """

    name: str = ""
    email: str = ""
    phone_number: str = ""
    country: str = ""

    def active(self) -> dict[str, str]:
        """Return the non-blank predicates keyed by field, lowercased."""

        predicates: dict[str, str] = {}
        for item in fields(self):
            value = (getattr(self, item.name) or "").strip()
            if value:
                predicates[item.name] = value.casefold()
        return predicates

    def is_empty(self) -> bool:
        return not self.active()


__all__ = ["BroadcastMode", "CustomerFilters"]
