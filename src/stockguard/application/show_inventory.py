"""Application service: Show Inventory use case (query).

Joins each variant with its stock counter; optionally only the variants
at or below their reorder point.
"""

from __future__ import annotations

from stockguard.application.dto import InventoryLineDTO
from stockguard.domain.repository.unit_of_work import UnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, low_stock_only: bool = False) -> list[InventoryLineDTO]:
        lines: list[InventoryLineDTO] = []
        with self._uow as uow:
            for record in uow.inventory.list_all():
                if low_stock_only and not record.needs_reorder:
                    continue
                variant = uow.variants.get(record.variant_id)
                if variant is None:
                    continue
                lines.append(
                    InventoryLineDTO(
                        variant_id=record.variant_id,
                        sku=variant.sku,
                        color=variant.color,
                        size=variant.size,
                        price=str(variant.price),
                        stock=record.stock,
                        reorder_point=record.reorder_point,
                        needs_reorder=record.needs_reorder,
                    )
                )
        return lines
