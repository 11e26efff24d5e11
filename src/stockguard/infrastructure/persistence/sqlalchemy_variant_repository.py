"""SQLAlchemy implementation of VariantRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.model.value_objects import Money
from stockguard.domain.model.variant import Variant
from stockguard.domain.repository.variant_repository import VariantRepository
from stockguard.infrastructure.persistence.orm import VariantRow


class SqlAlchemyVariantRepository(VariantRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, variant_id: int) -> Variant | None:
        row = self._session.get(VariantRow, variant_id)
        return self._to_domain(row) if row is not None else None

    def get_by_sku(self, sku: str) -> Variant | None:
        row = self._session.scalars(select(VariantRow).where(VariantRow.sku == sku)).first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Variant]:
        rows = self._session.scalars(select(VariantRow).order_by(VariantRow.id))
        return [self._to_domain(row) for row in rows]

    def add(self, variant: Variant) -> None:
        row = VariantRow(
            product_id=variant.product_id,
            sku=variant.sku,
            color=variant.color,
            size=variant.size,
            price=variant.price.amount,
            currency=variant.price.currency,
        )
        self._session.add(row)
        self._session.flush()
        variant.id = row.id

    def save(self, variant: Variant) -> None:
        row = self._session.get(VariantRow, variant.id)
        if row is None:
            raise EntityNotFoundError(f"Variant #{variant.id} not found")
        row.color = variant.color
        row.size = variant.size
        row.price = variant.price.amount
        row.currency = variant.price.currency
        self._session.flush()

    @staticmethod
    def _to_domain(row: VariantRow) -> Variant:
        return Variant(
            id=row.id,
            product_id=row.product_id,
            sku=row.sku,
            color=row.color,
            size=row.size,
            price=Money(row.price, row.currency),
        )
