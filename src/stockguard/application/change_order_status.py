"""Application service: Change Order Status use case.

Validates the move against the order state machine and dispatches its side
effects inside the same unit of work as the status update.  The only move
with a side effect is the one into ``cancelled``, which restores the stock
of every order line; a repeated cancellation changes nothing.
"""

from __future__ import annotations

import logging

from stockguard.domain.exceptions import (
    EntityNotFoundError,
    TransactionFailure,
    ValidationError,
)
from stockguard.domain.model.order import OrderStatus
from stockguard.domain.repository.unit_of_work import UnitOfWork
from stockguard.domain.service.inventory_guard import InventoryGuard

logger = logging.getLogger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, target: OrderStatus | str) -> bool:
        """Move an order to ``target``.

        Returns True when the status changed, False for a repeated
        cancellation.  Raises InvalidStatusTransition for moves the state
        machine does not allow.
        """
        target = parse_status(target)

        with self._uow as uow:
            order = uow.orders.get(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            previous = order.status
            if not order.transition_to(target):
                logger.info("Order #%s is already %s", order_id, target.value)
                return False

            if not uow.orders.update_status(order, expected=previous):
                if target is OrderStatus.CANCELLED:
                    current = uow.orders.get(order_id)
                    if current is not None and current.status is OrderStatus.CANCELLED:
                        logger.info("Order #%s was cancelled concurrently", order_id)
                        return False
                raise TransactionFailure(
                    f"Order #{order_id} was changed concurrently, retry the request"
                )

            if target == OrderStatus.CANCELLED:
                InventoryGuard(uow.inventory, uow.orders).restore_stock(order_id)

            uow.commit()

        logger.info("Order #%s: %s -> %s", order_id, previous.value, target.value)
        return True


def parse_status(value: OrderStatus | str) -> OrderStatus:
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value.strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status '{value}' (expected one of: {allowed})")
