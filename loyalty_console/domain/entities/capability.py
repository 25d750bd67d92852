"""Capability catalogs assignable to console principals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CapabilityKey(str, Enum):
    """Stable identifiers of the capabilities persisted on a principal."""

    MANAGE_EMPLOYEES = "manageEmployees"
    MANAGE_COMPANIES = "manageCompanies"
    MANAGE_CUSTOMERS = "manageCustomers"
    MANAGE_TRANSACTIONS = "manageTransactions"
    MANAGE_QUERIES = "manageQueries"
    MANAGE_BANNERS = "manageBanners"
    MANAGE_NOTIFICATIONS = "manageNotifications"
    MANAGE_FAQS = "manageFaqs"
    MANAGE_NEWSLETTER = "manageNewsletter"
    MANAGE_CONTACT_US = "manageContactUs"


class PrincipalKind(str, Enum):
    """Kinds of principals that carry a capability map."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


@dataclass(frozen=True)
class CapabilityDescriptor:
    """Human readable description of a single capability."""

    key: CapabilityKey
    name: str
    description: str


_DESCRIPTORS: dict[CapabilityKey, CapabilityDescriptor] = {
    descriptor.key: descriptor
    for descriptor in (
        CapabilityDescriptor(
            CapabilityKey.MANAGE_EMPLOYEES,
            "Manage Employees",
            "Can activate/deactivate employees",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_COMPANIES,
            "Manage Companies",
            "Can create and edit companies",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_CUSTOMERS,
            "Manage Customers",
            "Can create and edit customers",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_TRANSACTIONS,
            "Manage Transactions",
            "Can view all transactions",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_QUERIES,
            "Manage Queries",
            "Can manage customer queries",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_BANNERS,
            "Manage Banners",
            "Can upload/edit/delete banners",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_NOTIFICATIONS,
            "Manage Notifications",
            "Can send notifications",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_FAQS,
            "Manage FAQs",
            "Can create, edit, and delete frequently asked questions",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_NEWSLETTER,
            "Manage Newsletter",
            "Can manage newsletter subscriptions and send newsletters",
        ),
        CapabilityDescriptor(
            CapabilityKey.MANAGE_CONTACT_US,
            "Manage Contact Us",
            "Can view and manage contact us submissions",
        ),
    )
}

ADMIN_CATALOG: tuple[CapabilityDescriptor, ...] = tuple(
    _DESCRIPTORS[key]
    for key in (
        CapabilityKey.MANAGE_EMPLOYEES,
        CapabilityKey.MANAGE_COMPANIES,
        CapabilityKey.MANAGE_CUSTOMERS,
        CapabilityKey.MANAGE_TRANSACTIONS,
        CapabilityKey.MANAGE_QUERIES,
        CapabilityKey.MANAGE_BANNERS,
        CapabilityKey.MANAGE_NOTIFICATIONS,
        CapabilityKey.MANAGE_FAQS,
        CapabilityKey.MANAGE_NEWSLETTER,
        CapabilityKey.MANAGE_CONTACT_US,
    )
)

EMPLOYEE_CATALOG: tuple[CapabilityDescriptor, ...] = tuple(
    _DESCRIPTORS[key]
    for key in (
        CapabilityKey.MANAGE_CUSTOMERS,
        CapabilityKey.MANAGE_TRANSACTIONS,
        CapabilityKey.MANAGE_QUERIES,
        CapabilityKey.MANAGE_BANNERS,
        CapabilityKey.MANAGE_NOTIFICATIONS,
    )
)


def catalog_for(kind: PrincipalKind) -> tuple[CapabilityDescriptor, ...]:
    """Return the catalog that applies to principals of ``kind``."""

    if kind is PrincipalKind.ADMIN:
        return ADMIN_CATALOG
    return EMPLOYEE_CATALOG


__all__ = [
    "ADMIN_CATALOG",
    "EMPLOYEE_CATALOG",
    "CapabilityDescriptor",
    "CapabilityKey",
    "PrincipalKind",
    "catalog_for",
]
