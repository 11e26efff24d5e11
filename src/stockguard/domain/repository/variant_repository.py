"""Abstract repository for catalog variants.

Defined in the domain layer so the domain never depends on
infrastructure.  The SQLAlchemy implementation lives in the
infrastructure layer; tests use in-memory fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockguard.domain.model.variant import Variant


class VariantRepository(ABC):

    @abstractmethod
    def get(self, variant_id: int) -> Variant | None:
        """Return a variant by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Variant | None:
        """Return a variant by its SKU code, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Variant]:
        """Return every variant, ordered by id."""

    @abstractmethod
    def add(self, variant: Variant) -> None:
        """Persist a new variant and assign ``variant.id``."""

    @abstractmethod
    def save(self, variant: Variant) -> None:
        """Persist changes to an existing variant."""
