"""Use cases for resolving the audience of a notification."""

from .filters import filter_customers
from .selector import AudienceSelector

__all__ = ["AudienceSelector", "filter_customers"]
