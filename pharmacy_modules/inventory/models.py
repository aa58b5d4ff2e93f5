"""
Inventory Domain Models (``pharmacy_modules.inventory.models``).

Responsibility
--------------
The stock ledger entry: the mutable quantity-tracking record for one
inventory item, plus the derived stock status used for reorder decisions.

Invariants
----------
- ``current_quantity >= 0`` at all times.  A removal larger than the
  quantity on hand is rejected, never clamped.
- ``reorder_level >= 0`` and ``reorder_quantity > 0``.
- Every mutation stamps ``updated_at`` from the injected clock; adding stock
  also stamps ``last_restock_at``, which starts at the creation time.

Derived states
--------------
``classify_stock`` maps (quantity, reorder_level) to exactly one
``StockStatus``, checked most severe first:

    OUT_OF_STOCK   quantity == 0
    NEEDS_REORDER  quantity <  reorder_level
    LOW_STOCK      quantity == reorder_level
    ADEQUATE       otherwise

``needs_reorder`` (quantity < level) implies ``is_low_stock``
(quantity <= level).

Failure Modes
-------------
- ``InvalidQuantityError`` for negative quantities or non-positive deltas.
- ``InvalidThresholdError`` for bad reorder settings.
- ``InsufficientStockError`` for over-removal (state unchanged).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Hashable

from pharmacy_kernel.domain.clock import Clock, SystemClock
from pharmacy_kernel.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    InvalidThresholdError,
)
from pharmacy_kernel.logging_config import get_logger

logger = get_logger("modules.inventory.models")

DEFAULT_REORDER_LEVEL = 50
DEFAULT_REORDER_QUANTITY = 100


class StockStatus(Enum):
    """Derived stock state, declared from most to least adequate."""
    ADEQUATE = "adequate"
    LOW_STOCK = "low_stock"
    NEEDS_REORDER = "needs_reorder"
    OUT_OF_STOCK = "out_of_stock"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").upper()


def classify_stock(quantity: int, reorder_level: int) -> StockStatus:
    """Pure classification of a quantity against its reorder level."""
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity < reorder_level:
        return StockStatus.NEEDS_REORDER
    if quantity <= reorder_level:
        return StockStatus.LOW_STOCK
    return StockStatus.ADEQUATE


def _require_quantity(value: Any, *, allow_zero: bool) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError(value, "Quantity must be an integer")
    if value < 0:
        raise InvalidQuantityError(value, "Quantity cannot be negative")
    if value == 0 and not allow_zero:
        raise InvalidQuantityError(value)
    return value


def _require_thresholds(reorder_level: Any, reorder_quantity: Any) -> None:
    if isinstance(reorder_level, bool) or not isinstance(reorder_level, int) or reorder_level < 0:
        raise InvalidThresholdError("reorder_level", reorder_level)
    if (
        isinstance(reorder_quantity, bool)
        or not isinstance(reorder_quantity, int)
        or reorder_quantity <= 0
    ):
        raise InvalidThresholdError("reorder_quantity", reorder_quantity)


@dataclass(eq=False)
class StockLedgerEntry:
    """
    Quantity tracking for one inventory item.

    Contract: created with an initial quantity and optional reorder
    settings; mutated only through the methods below, each of which validates
    fully before changing anything.  Identity equality: two entries are the
    same only if they are the same object.
    """
    item_id: Hashable
    current_quantity: int
    reorder_level: int = DEFAULT_REORDER_LEVEL
    reorder_quantity: int = DEFAULT_REORDER_QUANTITY
    location: str | None = None
    supplier_id: int | None = None
    notes: str | None = None
    clock: Clock = field(default_factory=SystemClock, repr=False)
    last_restock_at: datetime = field(init=False)
    created_at: datetime = field(init=False)
    updated_at: datetime = field(init=False)

    def __post_init__(self) -> None:
        _require_quantity(self.current_quantity, allow_zero=True)
        _require_thresholds(self.reorder_level, self.reorder_quantity)
        if self.supplier_id is not None:
            _require_supplier(self.supplier_id)

        now = self.clock.now()
        self.created_at = now
        self.updated_at = now
        self.last_restock_at = now

        logger.debug(
            "stock_entry_created",
            extra={
                "item_id": str(self.item_id),
                "quantity": self.current_quantity,
                "reorder_level": self.reorder_level,
                "reorder_quantity": self.reorder_quantity,
            },
        )

    # -- stock movements -----------------------------------------------------

    def add_stock(self, quantity: int) -> int:
        """Receive ``quantity`` units. Returns the new quantity on hand."""
        _require_quantity(quantity, allow_zero=False)
        previous = self.current_quantity
        self.current_quantity += quantity
        self.last_restock_at = self._touch()
        logger.info(
            "stock_added",
            extra={
                "item_id": str(self.item_id),
                "quantity": quantity,
                "previous_quantity": previous,
                "new_quantity": self.current_quantity,
            },
        )
        return self.current_quantity

    def remove_stock(self, quantity: int) -> int:
        """
        Remove ``quantity`` units. Returns the new quantity on hand.

        Raises:
            InvalidQuantityError: if ``quantity`` is not positive.
            InsufficientStockError: if ``quantity`` exceeds the quantity on
                hand.  The entry is left unchanged.
        """
        _require_quantity(quantity, allow_zero=False)
        if quantity > self.current_quantity:
            logger.warning(
                "stock_removal_rejected",
                extra={
                    "item_id": str(self.item_id),
                    "requested": quantity,
                    "available": self.current_quantity,
                },
            )
            raise InsufficientStockError(self.item_id, quantity, self.current_quantity)

        previous = self.current_quantity
        self.current_quantity -= quantity
        self._touch()
        logger.info(
            "stock_removed",
            extra={
                "item_id": str(self.item_id),
                "quantity": quantity,
                "previous_quantity": previous,
                "new_quantity": self.current_quantity,
            },
        )
        return self.current_quantity

    def set_quantity(self, new_quantity: int) -> None:
        """Override the quantity on hand (e.g. after a physical count)."""
        _require_quantity(new_quantity, allow_zero=True)
        previous = self.current_quantity
        self.current_quantity = new_quantity
        self._touch()
        logger.info(
            "stock_quantity_set",
            extra={
                "item_id": str(self.item_id),
                "previous_quantity": previous,
                "new_quantity": new_quantity,
            },
        )

    # -- settings --------------------------------------------------------------

    def update_reorder_settings(self, reorder_level: int, reorder_quantity: int) -> None:
        _require_thresholds(reorder_level, reorder_quantity)
        self.reorder_level = reorder_level
        self.reorder_quantity = reorder_quantity
        self._touch()
        logger.info(
            "stock_reorder_settings_updated",
            extra={
                "item_id": str(self.item_id),
                "reorder_level": reorder_level,
                "reorder_quantity": reorder_quantity,
            },
        )

    def update_location(self, location: str | None) -> None:
        self.location = location
        self._touch()

    def update_supplier(self, supplier_id: int) -> None:
        _require_supplier(supplier_id)
        self.supplier_id = supplier_id
        self._touch()

    def add_notes(self, notes: str) -> None:
        self.notes = notes
        self._touch()

    # -- derived state ---------------------------------------------------------

    def classify(self) -> StockStatus:
        return classify_stock(self.current_quantity, self.reorder_level)

    @property
    def is_out_of_stock(self) -> bool:
        return self.current_quantity == 0

    @property
    def is_low_stock(self) -> bool:
        return self.current_quantity <= self.reorder_level

    @property
    def needs_reorder(self) -> bool:
        return self.current_quantity < self.reorder_level

    def status_report(self) -> str:
        """Multi-line, human-readable stock summary."""
        return (
            f"Item ID: {self.item_id}\n"
            f"Current Quantity: {self.current_quantity}\n"
            f"Reorder Level: {self.reorder_level}\n"
            f"Reorder Quantity: {self.reorder_quantity}\n"
            f"Location: {self.location or 'Not specified'}\n"
            f"Last Restock: {self.last_restock_at:%Y-%m-%d}\n"
            f"Status: {self.classify().label}"
        )

    def _touch(self) -> datetime:
        self.updated_at = self.clock.now()
        return self.updated_at


def _require_supplier(supplier_id: Any) -> None:
    if isinstance(supplier_id, bool) or not isinstance(supplier_id, int) or supplier_id <= 0:
        raise ValueError(f"supplier_id must be a positive integer (got {supplier_id!r})")


@dataclass(frozen=True)
class ReorderSuggestion:
    """A restocking recommendation for one entry that needs reordering."""
    item_id: Hashable
    current_quantity: int
    reorder_level: int
    suggested_quantity: int
    supplier_id: int | None = None
