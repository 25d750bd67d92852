"""Helpers for working with timestamps received from the platform."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def parse_iso_datetime(value: Any) -> datetime | None:
    """Return a timezone-aware ``datetime`` parsed from an ISO 8601 string.

    Naive values are assumed to be UTC. Anything that cannot be parsed yields
    ``None``.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ["parse_iso_datetime"]
