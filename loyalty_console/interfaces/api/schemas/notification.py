"""Pydantic models describing sent notifications."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SentNotificationRead(BaseModel):
    """Notification stored in the platform history."""

    id: str
    title: str
    message: str
    target: str
    created_at: datetime | None = None


__all__ = ["SentNotificationRead"]
