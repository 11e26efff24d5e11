"""Application service: Cancel Order use case.

Cancelling is allowed from pending, paid and shipped orders and returns
every line quantity to stock.  Cancelling an already-cancelled order is a
no-op; completed orders cannot be cancelled.
"""

from __future__ import annotations

from stockguard.application.change_order_status import ChangeOrderStatusHandler
from stockguard.domain.model.order import OrderStatus
from stockguard.domain.repository.unit_of_work import UnitOfWork


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._status_handler = ChangeOrderStatusHandler(uow)

    def handle(self, order_id: int) -> bool:
        return self._status_handler.handle(order_id, OrderStatus.CANCELLED)
