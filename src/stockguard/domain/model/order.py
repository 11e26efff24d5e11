"""Order aggregate and its status state machine.

The Order owns its items.  Items are written once, when the order is
placed, and never change afterwards.  Status changes go through
``Order.transition_to`` which validates the move against ``TRANSITIONS``;
side effects of a move (stock restoration on cancel) are dispatched by the
application layer based on its return value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from stockguard.domain.exceptions import InvalidStatusTransition, ValidationError
from stockguard.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.COMPLETED: frozenset(),
}

MAX_LINE_ITEMS = 50


@dataclass(frozen=True)
class OrderItem:
    """One order line with the variant price captured at purchase time."""

    variant_id: int
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.place()`` for new orders.  The plain constructor is what
    repositories use to rebuild persisted orders without re-validating.
    """

    id: int | None
    user_id: str
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(user_id: str, items: list[OrderItem]) -> Order:
        if not user_id or not user_id.strip():
            raise ValidationError("User id is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")
        variant_ids = [item.variant_id for item in items]
        if len(set(variant_ids)) != len(variant_ids):
            raise ValidationError("Each variant may appear only once per order")
        return Order(id=None, user_id=user_id.strip(), items=list(items))

    # --- State machine --------------------------------------------------------

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in TRANSITIONS[self.status]

    def transition_to(self, target: OrderStatus) -> bool:
        """Move the order to ``target``.

        Returns True when the status changed.  Cancelling an order that is
        already cancelled is accepted and returns False, so callers never
        repeat the cancellation side effects.
        """
        if target == OrderStatus.CANCELLED and self.status == OrderStatus.CANCELLED:
            return False
        if not self.can_transition_to(target):
            raise InvalidStatusTransition(self.status.value, target.value)
        self.status = target
        self.updated_at = datetime.now(timezone.utc)
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    def quantities_by_variant(self) -> dict[int, int]:
        return {item.variant_id: item.quantity.value for item in self.items}
