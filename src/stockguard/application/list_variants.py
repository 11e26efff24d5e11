"""Application service: List Variants use case (query)."""

from __future__ import annotations

from stockguard.application.add_variant import variant_to_dto
from stockguard.application.dto import VariantDTO
from stockguard.domain.repository.unit_of_work import UnitOfWork


class ListVariantsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[VariantDTO]:
        with self._uow as uow:
            return [variant_to_dto(v) for v in uow.variants.list_all()]
