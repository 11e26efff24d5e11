"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockguard.domain.model.order import Order

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (SKU + quantity)."""

    sku: str
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    sku: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderLineDTO]
    total: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class VariantDTO:
    id: int
    product_id: int
    sku: str
    color: str
    size: str
    price: str


@dataclass(frozen=True)
class InventoryLineDTO:
    """One row of the stock report: variant metadata joined with stock."""

    variant_id: int
    sku: str
    color: str
    size: str
    price: str
    stock: int
    reorder_point: int
    needs_reorder: bool


def order_to_dto(order: Order, skus: dict[int, str]) -> OrderDTO:
    """Map an Order to its DTO; ``skus`` maps variant ids to SKU codes."""
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineDTO(
                sku=skus.get(item.variant_id, f"#{item.variant_id}"),
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime(_TIMESTAMP_FORMAT),
        updated_at=order.updated_at.strftime(_TIMESTAMP_FORMAT),
    )
