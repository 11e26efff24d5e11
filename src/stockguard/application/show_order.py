"""Application service: Show Order use case (query)."""

from __future__ import annotations

from stockguard.application.dto import OrderDTO, order_to_dto
from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow as uow:
            order = uow.orders.get(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            skus = {}
            for item in order.items:
                variant = uow.variants.get(item.variant_id)
                if variant is not None:
                    skus[item.variant_id] = variant.sku
        return order_to_dto(order, skus)
