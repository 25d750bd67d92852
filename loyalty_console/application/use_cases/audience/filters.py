"""Filtering of the customer population."""

from __future__ import annotations

from collections.abc import Iterable

from loyalty_console.domain.entities import Customer, CustomerFilters

# Filter field -> customer attribute it is matched against.
_FILTER_FIELDS: dict[str, str] = {
    "name": "username",
    "email": "email",
    "phone_number": "phone_number",
    "country": "country",
}


def _matches(customer: Customer, predicates: dict[str, str]) -> bool:
    for field_name, needle in predicates.items():
        value = getattr(customer, _FILTER_FIELDS[field_name], "") or ""
        if needle not in value.casefold():
            return False
    return True


def filter_customers(
    customers: Iterable[Customer], filters: CustomerFilters | None
) -> list[Customer]:
    """Return the customers matching every non-blank predicate of ``filters``."""

    predicates = filters.active() if filters is not None else {}
    if not predicates:
        return list(customers)
    return [customer for customer in customers if _matches(customer, predicates)]


__all__ = ["filter_customers"]
