"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.orm import Session

from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.model.order import Order, OrderItem, OrderStatus
from stockguard.domain.model.value_objects import Money, Quantity
from stockguard.domain.repository.order_repository import OrderRepository
from stockguard.infrastructure.persistence.orm import OrderItemRow, OrderRow


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        row = OrderRow(
            user_id=order.user_id,
            total=order.total.amount,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemRow(
                    variant_id=item.variant_id,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                    currency=item.unit_price.currency,
                )
                for item in order.items
            ],
        )
        self._session.add(row)
        self._session.flush()
        order.id = row.id

    def get(self, order_id: int) -> Order | None:
        row = self._session.get(OrderRow, order_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def update_status(self, order: Order, expected: OrderStatus) -> bool:
        result = self._session.execute(
            update(OrderRow)
            .where(OrderRow.id == order.id, OrderRow.status == expected)
            .values(status=order.status, updated_at=order.updated_at)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def delete(self, order_id: int) -> None:
        row = self._session.get(OrderRow, order_id)
        if row is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        self._session.delete(row)
        self._session.flush()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        items = [
            OrderItem(
                variant_id=i.variant_id,
                quantity=Quantity(i.quantity),
                unit_price=Money(i.unit_price, i.currency),
            )
            for i in row.items
        ]
        return Order(
            id=row.id,
            user_id=row.user_id,
            items=items,
            status=row.status,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
