"""Selection of the customers targeted by a notification."""

from __future__ import annotations

from collections.abc import Sequence

from loyalty_console.domain.entities import BroadcastMode, Customer, CustomerFilters
from loyalty_console.domain.errors import EmptyAudienceError

from .filters import filter_customers


class AudienceSelector:
    """Hold the customer population, the active filters and the selection.

    Bulk operations only touch the customers visible under the current
    filters, so ids selected under earlier filters survive filter changes.
    """

    def __init__(
        self,
        customers: Sequence[Customer] = (),
        *,
        mode: BroadcastMode = BroadcastMode.ALL,
    ) -> None:
        self._customers: list[Customer] = list(customers)
        self._filters = CustomerFilters()
        self._selection: set[str] = set()
        self._mode = mode
        self._view: list[Customer] | None = None

    @property
    def customers(self) -> list[Customer]:
        return list(self._customers)

    @property
    def filters(self) -> CustomerFilters:
        return self._filters

    @property
    def selection(self) -> frozenset[str]:
        return frozenset(self._selection)

    @property
    def mode(self) -> BroadcastMode:
        return self._mode

    def load(self, customers: Sequence[Customer]) -> None:
        """Replace the customer population."""

        self._customers = list(customers)
        self._view = None

    def set_filters(self, filters: CustomerFilters) -> None:
        if filters != self._filters:
            self._filters = filters
            self._view = None

    def filtered_view(self) -> list[Customer]:
        """Return the customers visible under the current filters."""

        if self._view is None:
            self._view = filter_customers(self._customers, self._filters)
        return list(self._view)

    def set_mode(self, mode: BroadcastMode) -> None:
        """Switch the broadcast mode; switching discards the selection."""

        if mode is not self._mode:
            self._mode = mode
            self._selection.clear()

    def is_selected(self, customer_id: str) -> bool:
        return customer_id in self._selection

    def toggle(self, customer_id: str) -> bool:
        """Flip the membership of ``customer_id`` and return the new membership."""

        if customer_id in self._selection:
            self._selection.discard(customer_id)
            return False
        self._selection.add(customer_id)
        return True

    def all_filtered_selected(self) -> bool:
        view = self.filtered_view()
        return bool(view) and all(customer.id in self._selection for customer in view)

    def select_all_filtered(self) -> None:
        self._selection.update(customer.id for customer in self.filtered_view())

    def deselect_all_filtered(self) -> None:
        self._selection.difference_update(customer.id for customer in self.filtered_view())

    def toggle_all_filtered(self) -> bool:
        """Deselect the visible customers when all are selected, else select them.

        Returns ``True`` when the visible customers end up selected.
        """

        if self.all_filtered_selected():
            self.deselect_all_filtered()
            return False
        self.select_all_filtered()
        return bool(self._view)

    def resolve_audience(self) -> list[Customer]:
        """Return the customers the notification should target."""

        if self._mode is BroadcastMode.ALL:
            return list(self._customers)
        if not self._selection:
            raise EmptyAudienceError("Select at least one customer to notify")
        return [customer for customer in self._customers if customer.id in self._selection]

    def reset(self) -> None:
        """Discard filters and selection and restore the default mode."""

        self._filters = CustomerFilters()
        self._selection.clear()
        self._mode = BroadcastMode.ALL
        self._view = None


__all__ = ["AudienceSelector"]
