"""Application service: Set Stock use case (restock / stock-take)."""

from __future__ import annotations

import logging

from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, sku: str, stock: int, reorder_point: int | None = None) -> None:
        """Overwrite the stock level (and optionally the reorder point) of a SKU."""
        with self._uow as uow:
            variant = uow.variants.get_by_sku(sku)
            if variant is None:
                raise EntityNotFoundError(f"Variant not found: '{sku}'")
            record = uow.inventory.get(variant.id)  # type: ignore[arg-type]
            if record is None:
                raise EntityNotFoundError(f"No inventory record for variant '{sku}'")
            record.set_levels(stock, reorder_point)
            uow.inventory.save(record)
            uow.commit()

        logger.info("Stock for %s set to %s", sku, stock)
