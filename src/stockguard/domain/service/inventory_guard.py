"""Domain service: Inventory Consistency Guard.

Keeps variant stock consistent with the order lines that consume it:

- ``reserve_stock`` checks that a variant can supply a quantity before
  an order line is written;
- ``decrement_stock`` takes the units out of stock once the line exists;
- ``restore_stock`` puts back every line of an order when it is cancelled.

The guard never opens or commits a transaction itself.  It works on the
repositories of the unit of work its caller opened, so the decrement rolls
back with the order insert and the restoration commits with the status
change.  ``decrement_stock`` does not trust the earlier check: the
repository performs a conditional update, which closes the window between
check and write when two orders race for the same variant.
"""

from __future__ import annotations

import logging

from stockguard.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStock,
    ValidationError,
)
from stockguard.domain.repository.inventory_repository import InventoryRepository
from stockguard.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class InventoryGuard:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._order_repo = order_repo

    def reserve_stock(self, variant_id: int, quantity: int) -> None:
        """Fail with InsufficientStock unless ``quantity`` units are in stock.

        Pure check, nothing is written.
        """
        _require_positive(quantity)
        record = self._inventory_repo.get(variant_id)
        if record is None:
            raise EntityNotFoundError(f"No inventory record for variant #{variant_id}")
        if record.stock < quantity:
            logger.warning(
                "Reservation rejected for variant #%s: need %s, have %s",
                variant_id, quantity, record.stock,
            )
            raise InsufficientStock(variant_id, quantity, record.stock)
        logger.debug("Reserved %s of variant #%s (stock %s)", quantity, variant_id, record.stock)

    def decrement_stock(self, variant_id: int, quantity: int) -> None:
        """Subtract ``quantity`` from stock as one check-and-write step."""
        _require_positive(quantity)
        if not self._inventory_repo.decrement_if_available(variant_id, quantity):
            # Another order took the units after our reservation check.
            record = self._inventory_repo.get(variant_id)
            available = record.stock if record is not None else None
            logger.warning(
                "Decrement lost race for variant #%s: need %s, have %s",
                variant_id, quantity, available,
            )
            raise InsufficientStock(variant_id, quantity, available)
        logger.debug("Decremented variant #%s by %s", variant_id, quantity)

    def restore_stock(self, order_id: int) -> None:
        """Return the quantity of every line of the order to stock.

        Must only be called for the transition into ``cancelled``; the order
        state machine reports that transition exactly once per order.
        """
        order = self._order_repo.get(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        for item in order.items:
            self._inventory_repo.increment(item.variant_id, item.quantity.value)
        logger.info(
            "Restored stock for order #%s: %s",
            order_id, order.quantities_by_variant(),
        )


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise ValidationError("Requested quantity must be positive")
