"""Domain entity representing a loyalty platform customer."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Customer:
    """Customer record as loaded from the platform.

    ``device_token`` is ``None`` or blank when the customer cannot receive
    push notifications.
    """

    id: str
    username: str
    email: str
    phone_number: str = ""
    country: str = ""
    device_token: str | None = None
    address: str = ""
    google_sign_up: bool = False
    created_at: datetime | None = None

    def can_receive_push(self) -> bool:
        """Return ``True`` when the customer holds a usable device token."""

        return bool(self.device_token and self.device_token.strip())


__all__ = ["Customer"]
