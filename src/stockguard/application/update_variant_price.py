"""Application service: Update Variant Price use case."""

from __future__ import annotations

from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.model.value_objects import Money
from stockguard.domain.repository.unit_of_work import UnitOfWork


class UpdateVariantPriceHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, sku: str, new_price: str) -> None:
        """Change a variant's price.

        Orders already placed keep the unit price captured on their lines.
        """
        price = Money.of(new_price)
        with self._uow as uow:
            variant = uow.variants.get_by_sku(sku)
            if variant is None:
                raise EntityNotFoundError(f"Variant not found: '{sku}'")
            variant.update_price(price)
            uow.variants.save(variant)
            uow.commit()
