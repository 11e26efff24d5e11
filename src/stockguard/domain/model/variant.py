"""Variant entity: one purchasable SKU of a product (size + color).

Variants belong to the catalog, which is owned elsewhere.  Only the fields
needed to price an order line and to label stock reports are kept here.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockguard.domain.exceptions import ValidationError
from stockguard.domain.model.value_objects import Money


@dataclass
class Variant:
    """A purchasable SKU: one size and color of a product, with its current price."""

    id: int | None
    product_id: int
    sku: str
    color: str
    size: str
    price: Money

    @staticmethod
    def create(product_id: int, sku: str, color: str, size: str, price: Money) -> Variant:
        sku = (sku or "").strip()
        if not sku:
            raise ValidationError("SKU is required")
        if price.amount <= 0:
            raise ValidationError("Variant price must be greater than zero")
        return Variant(
            id=None,
            product_id=product_id,
            sku=sku,
            color=color.strip(),
            size=size.strip(),
            price=price,
        )

    def update_price(self, new_price: Money) -> None:
        """Change the price; order lines already placed keep their snapshot."""
        if new_price.amount <= 0:
            raise ValidationError("Variant price must be greater than zero")
        self.price = new_price
