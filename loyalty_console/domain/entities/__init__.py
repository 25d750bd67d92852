"""Domain entities exposed by the application."""

from .audience import BroadcastMode, CustomerFilters
from .capability import (
    ADMIN_CATALOG,
    EMPLOYEE_CATALOG,
    CapabilityDescriptor,
    CapabilityKey,
    PrincipalKind,
    catalog_for,
)
from .customer import Customer
from .notification import (
    UNEXPECTED_RESPONSE_SHAPE,
    DeliveryResult,
    DispatchOutcome,
    DispatchResponse,
    DispatchSummary,
    ErrorResponse,
    MalformedResponse,
    NotificationRequest,
    ResultsResponse,
    SentNotification,
)
from .principal import Principal

__all__ = [
    "ADMIN_CATALOG",
    "EMPLOYEE_CATALOG",
    "UNEXPECTED_RESPONSE_SHAPE",
    "BroadcastMode",
    "CapabilityDescriptor",
    "CapabilityKey",
    "Customer",
    "CustomerFilters",
    "DeliveryResult",
    "DispatchOutcome",
    "DispatchResponse",
    "DispatchSummary",
    "ErrorResponse",
    "MalformedResponse",
    "NotificationRequest",
    "Principal",
    "PrincipalKind",
    "ResultsResponse",
    "SentNotification",
    "catalog_for",
]
