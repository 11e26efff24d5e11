"""SQLAlchemy-backed unit of work: one Session, one transaction."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from stockguard.domain.exceptions import TransactionFailure
from stockguard.domain.repository.unit_of_work import UnitOfWork
from stockguard.infrastructure.persistence.sqlalchemy_inventory_repository import (
    SqlAlchemyInventoryRepository,
)
from stockguard.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from stockguard.infrastructure.persistence.sqlalchemy_variant_repository import (
    SqlAlchemyVariantRepository,
)

# sqlite3 raises a bare OverflowError for integers outside the 64-bit range.
_DATABASE_ERRORS = (SQLAlchemyError, OverflowError)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.variants = SqlAlchemyVariantRepository(self._session)
        self.inventory = SqlAlchemyInventoryRepository(self._session)
        self.orders = SqlAlchemyOrderRepository(self._session)
        super().__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._session.close()
        if isinstance(exc, _DATABASE_ERRORS):
            raise TransactionFailure(f"Database error, changes rolled back: {exc}") from exc

    def _commit(self) -> None:
        try:
            self._session.commit()
        except _DATABASE_ERRORS as exc:
            self._session.rollback()
            raise TransactionFailure(f"Commit failed, changes rolled back: {exc}") from exc

    def rollback(self) -> None:
        self._session.rollback()
