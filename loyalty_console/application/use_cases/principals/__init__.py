"""Use cases for managing console principals."""

from .list_principals import list_principals
from .update_permissions import update_principal_permissions

__all__ = ["list_principals", "update_principal_permissions"]
