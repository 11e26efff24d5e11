"""Application service: Add Variant use case.

A variant and its inventory record are created together, so every SKU
the guard can be asked about has a stock counter.
"""

from __future__ import annotations

from stockguard.application.dto import VariantDTO
from stockguard.domain.exceptions import ValidationError
from stockguard.domain.model.inventory import InventoryRecord
from stockguard.domain.model.value_objects import Money
from stockguard.domain.model.variant import Variant
from stockguard.domain.repository.unit_of_work import UnitOfWork


class AddVariantHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: int,
        sku: str,
        color: str,
        size: str,
        price: str,
        initial_stock: int = 0,
        reorder_point: int = 0,
    ) -> VariantDTO:
        variant = Variant.create(
            product_id=product_id, sku=sku, color=color, size=size, price=Money.of(price)
        )

        with self._uow as uow:
            if uow.variants.get_by_sku(variant.sku) is not None:
                raise ValidationError(f"Variant '{variant.sku}' already exists")

            uow.variants.add(variant)
            uow.inventory.add(
                InventoryRecord(
                    variant_id=variant.id,  # type: ignore[arg-type]
                    stock=initial_stock,
                    reorder_point=reorder_point,
                )
            )
            uow.commit()

        return variant_to_dto(variant)


def variant_to_dto(variant: Variant) -> VariantDTO:
    return VariantDTO(
        id=variant.id,  # type: ignore[arg-type]
        product_id=variant.product_id,
        sku=variant.sku,
        color=variant.color,
        size=variant.size,
        price=str(variant.price),
    )
