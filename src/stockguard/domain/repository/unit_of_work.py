"""Abstract unit of work: the transaction boundary of one use case.

Handlers open a unit of work with ``with uow:``, work through the
repositories it exposes and call ``commit()``.  Leaving the block without
committing, or because of an exception, rolls back every write made
inside it, so a use case is either applied completely or not at all.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from stockguard.domain.repository.inventory_repository import InventoryRepository
from stockguard.domain.repository.order_repository import OrderRepository
from stockguard.domain.repository.variant_repository import VariantRepository

logger = logging.getLogger(__name__)


class UnitOfWork(ABC):

    variants: VariantRepository
    inventory: InventoryRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._committed:
            if exc_type is not None:
                logger.warning("Rolling back unit of work after %s", exc_type.__name__)
            self.rollback()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def _commit(self) -> None:
        """Make every write of this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every write of this unit of work."""
