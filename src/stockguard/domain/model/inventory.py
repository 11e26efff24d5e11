"""InventoryRecord: the stock counter of a single variant.

There is exactly one record per variant.  Order placement and cancellation
change ``stock`` only through the InventoryGuard domain service; the
repository performs the actual decrement as one atomic conditional update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from stockguard.domain.exceptions import ValidationError
from stockguard.domain.model.value_objects import MAX_UNITS


@dataclass
class InventoryRecord:
    """Stock level for one variant.

    Invariants:
    - ``stock`` is never negative
    - ``reorder_point`` is never negative
    """

    variant_id: int
    stock: int = 0
    reorder_point: int = 0
    last_stock_update: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        _require_non_negative("Stock", self.stock)
        _require_non_negative("Reorder point", self.reorder_point)

    @property
    def needs_reorder(self) -> bool:
        return self.stock <= self.reorder_point

    def set_levels(self, stock: int, reorder_point: int | None = None) -> None:
        """Administrative restock / stock-take correction."""
        _require_non_negative("Stock", stock)
        if reorder_point is not None:
            _require_non_negative("Reorder point", reorder_point)
            self.reorder_point = reorder_point
        self.stock = stock
        self._touch()

    def _touch(self) -> None:
        self.last_stock_update = datetime.now(timezone.utc)


def _require_non_negative(what: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{what} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{what} cannot be negative, got {value}")
    if value > MAX_UNITS:
        raise ValidationError(f"{what} cannot exceed {MAX_UNITS}, got {value}")
