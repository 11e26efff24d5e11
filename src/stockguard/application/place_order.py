"""Application service: Place Order use case.

Everything happens in one unit of work:

1. Resolve each SKU to a Variant and snapshot its current price.
2. Reserve stock for every line (pure check, fails fast).
3. Insert the order with its items.
4. Decrement stock for every line.
5. Commit.

A failure at any step rolls back the insert and every decrement already
made, so a rejected order leaves no trace.
"""

from __future__ import annotations

import logging

from stockguard.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.model.order import Order, OrderItem
from stockguard.domain.model.value_objects import Quantity
from stockguard.domain.repository.unit_of_work import UnitOfWork
from stockguard.domain.service.inventory_guard import InventoryGuard

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        requested = _merge_specs(item_specs)

        with self._uow as uow:
            guard = InventoryGuard(uow.inventory, uow.orders)

            items: list[OrderItem] = []
            skus: dict[int, str] = {}
            for sku, quantity in requested.items():
                variant = uow.variants.get_by_sku(sku)
                if variant is None:
                    raise EntityNotFoundError(f"Variant not found: '{sku}'")
                skus[variant.id] = variant.sku  # type: ignore[index]
                items.append(
                    OrderItem(
                        variant_id=variant.id,  # type: ignore[arg-type]
                        quantity=quantity,
                        unit_price=variant.price,  # <-- price snapshot
                    )
                )

            order = Order.place(user_id=user_id, items=items)

            for item in order.items:
                guard.reserve_stock(item.variant_id, item.quantity.value)

            uow.orders.add(order)

            for item in order.items:
                guard.decrement_stock(item.variant_id, item.quantity.value)

            uow.commit()

        logger.info("Placed order #%s for user %s (%s)", order.id, order.user_id, order.total)
        return order_to_dto(order, skus)


def _merge_specs(item_specs: list[OrderItemSpec]) -> dict[str, Quantity]:
    """Validate quantities and fold repeated SKUs into a single line."""
    merged: dict[str, int] = {}
    for spec in item_specs:
        qty = Quantity(spec.quantity)
        sku = spec.sku.strip()
        merged[sku] = merged.get(sku, 0) + qty.value
    return {sku: Quantity(total) for sku, total in merged.items()}
