"""Abstract repository for InventoryRecord."""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockguard.domain.model.inventory import InventoryRecord


class InventoryRepository(ABC):

    @abstractmethod
    def get(self, variant_id: int) -> InventoryRecord | None:
        """Return the inventory record for a variant, or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryRecord]:
        """Return every inventory record, ordered by variant id."""

    @abstractmethod
    def add(self, record: InventoryRecord) -> None:
        """Persist a new inventory record."""

    @abstractmethod
    def save(self, record: InventoryRecord) -> None:
        """Persist the levels of an existing inventory record."""

    @abstractmethod
    def decrement_if_available(self, variant_id: int, quantity: int) -> bool:
        """Atomically subtract ``quantity`` when at least that much is in stock.

        Must behave as a single conditional update: two concurrent callers
        can never both succeed against stock that only covers one of them.
        Returns False (and changes nothing) when stock is insufficient.
        """

    @abstractmethod
    def increment(self, variant_id: int, quantity: int) -> None:
        """Atomically add ``quantity`` to the stock of a variant.

        Raises EntityNotFoundError when the variant has no record.
        """
