"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockguard.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order with its items and assign ``order.id``."""

    @abstractmethod
    def get(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def update_status(self, order: Order, expected: OrderStatus) -> bool:
        """Persist ``order.status`` if the stored status is still ``expected``.

        Returns False, writing nothing, when another writer changed the
        status first.  Items are never rewritten.
        """

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Remove an order together with all of its items."""
