"""Extraction of device tokens from a resolved audience."""

from __future__ import annotations

from collections.abc import Iterable

from loyalty_console.domain.entities import Customer
from loyalty_console.domain.errors import NoRecipientsError


def collect_device_tokens(audience: Iterable[Customer]) -> list[str]:
    """Return the usable device tokens of ``audience``.

    Order and duplicates are preserved; missing and blank tokens are dropped.
    """

    tokens = [
        customer.device_token
        for customer in audience
        if customer.device_token and customer.device_token.strip()
    ]
    if not tokens:
        raise NoRecipientsError(
            "None of the selected customers can receive push notifications"
        )
    return tokens


__all__ = ["collect_device_tokens"]
