"""SQLAlchemy implementation of InventoryRepository.

Stock changes are issued as single UPDATE statements evaluated by the
database (``stock = stock - :q WHERE stock >= :q``) rather than as
read-modify-write on loaded rows.  The row lock taken by the UPDATE is what
serialises concurrent orders for the same variant.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from stockguard.domain.exceptions import EntityNotFoundError
from stockguard.domain.model.inventory import InventoryRecord
from stockguard.domain.repository.inventory_repository import InventoryRepository
from stockguard.infrastructure.persistence.orm import InventoryRow


class SqlAlchemyInventoryRepository(InventoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- InventoryRepository interface ----------------------------------------

    def get(self, variant_id: int) -> InventoryRecord | None:
        row = self._session.get(InventoryRow, variant_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[InventoryRecord]:
        rows = self._session.scalars(
            select(InventoryRow)
            .order_by(InventoryRow.variant_id)
            .execution_options(populate_existing=True)
        )
        return [self._to_domain(row) for row in rows]

    def add(self, record: InventoryRecord) -> None:
        self._session.add(
            InventoryRow(
                variant_id=record.variant_id,
                stock=record.stock,
                reorder_point=record.reorder_point,
                last_stock_update=record.last_stock_update,
            )
        )
        self._session.flush()

    def save(self, record: InventoryRecord) -> None:
        row = self._session.get(InventoryRow, record.variant_id, populate_existing=True)
        if row is None:
            raise EntityNotFoundError(f"No inventory record for variant #{record.variant_id}")
        row.stock = record.stock
        row.reorder_point = record.reorder_point
        row.last_stock_update = record.last_stock_update
        self._session.flush()

    def decrement_if_available(self, variant_id: int, quantity: int) -> bool:
        result = self._session.execute(
            update(InventoryRow)
            .where(InventoryRow.variant_id == variant_id, InventoryRow.stock >= quantity)
            .values(stock=InventoryRow.stock - quantity, last_stock_update=_utcnow())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def increment(self, variant_id: int, quantity: int) -> None:
        result = self._session.execute(
            update(InventoryRow)
            .where(InventoryRow.variant_id == variant_id)
            .values(stock=InventoryRow.stock + quantity, last_stock_update=_utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise EntityNotFoundError(f"No inventory record for variant #{variant_id}")

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: InventoryRow) -> InventoryRecord:
        return InventoryRecord(
            variant_id=row.variant_id,
            stock=row.stock,
            reorder_point=row.reorder_point,
            last_stock_update=row.last_stock_update,
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
