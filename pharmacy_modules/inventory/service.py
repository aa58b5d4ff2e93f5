"""
Inventory Module Service (``pharmacy_modules.inventory.service``).

Responsibility
--------------
``StockLedger`` is the in-memory lookup table of stock ledger entries keyed
by item id.  It opens entries with the configured reorder defaults, routes
receipts and issues to the right entry, and reports what needs restocking.

Architecture
------------
Layer: **Modules** -- thin glue over ``StockLedgerEntry``.  All quantity
rules live on the entry; the ledger adds lookup, defaults and reporting.
Durable storage belongs to an outer persistence layer.

Failure Modes
-------------
- ``DuplicateStockEntryError`` when opening an entry for a tracked item.
- ``StockEntryNotFoundError`` when an item is not tracked.
- Entry-level errors (``InvalidQuantityError``, ``InsufficientStockError``,
  ``InvalidThresholdError``) propagate unchanged.

Usage::

    ledger = StockLedger(InventoryConfig.with_defaults(), clock)
    ledger.open_entry(item_id=7, quantity=30)
    ledger.issue(7, 5)
    for suggestion in ledger.reorder_suggestions():
        ...
"""

from __future__ import annotations

from typing import Hashable, Iterator, Mapping

from pharmacy_kernel.domain.clock import Clock, SystemClock
from pharmacy_kernel.exceptions import (
    DuplicateStockEntryError,
    StockEntryNotFoundError,
)
from pharmacy_kernel.logging_config import LogContext, get_logger
from pharmacy_modules.inventory.config import InventoryConfig
from pharmacy_modules.inventory.helpers import (
    is_below_low_stock_threshold,
    suggested_reorder_quantity,
)
from pharmacy_modules.inventory.models import (
    ReorderSuggestion,
    StockLedgerEntry,
    StockStatus,
)

logger = get_logger("modules.inventory.service")


class StockLedger:
    """
    Lookup table of stock ledger entries.

    Contract
    --------
    One entry per item id.  Entries are never deleted here.

    Non-goals
    ---------
    - Does NOT decrement stock when a sale completes; callers issue stock
      explicitly.
    - Does NOT persist anything.
    """

    def __init__(
        self,
        config: InventoryConfig | None = None,
        clock: Clock | None = None,
    ):
        self._config = config or InventoryConfig.with_defaults()
        self._clock = clock or SystemClock()
        self._entries: dict[Hashable, StockLedgerEntry] = {}

    @property
    def config(self) -> InventoryConfig:
        return self._config

    def open_entry(
        self,
        item_id: Hashable,
        quantity: int,
        *,
        reorder_level: int | None = None,
        reorder_quantity: int | None = None,
        location: str | None = None,
        supplier_id: int | None = None,
        notes: str | None = None,
    ) -> StockLedgerEntry:
        """Start tracking ``item_id`` with an initial quantity."""
        if item_id in self._entries:
            raise DuplicateStockEntryError(item_id)

        entry = StockLedgerEntry(
            item_id=item_id,
            current_quantity=quantity,
            reorder_level=(
                self._config.default_reorder_level if reorder_level is None else reorder_level
            ),
            reorder_quantity=(
                self._config.default_reorder_quantity
                if reorder_quantity is None
                else reorder_quantity
            ),
            location=location,
            supplier_id=supplier_id,
            notes=notes,
            clock=self._clock,
        )
        self._entries[item_id] = entry
        logger.info(
            "stock_entry_opened",
            extra={
                "item_id": str(item_id),
                "quantity": quantity,
                "status": entry.classify().value,
            },
        )
        return entry

    def get(self, item_id: Hashable) -> StockLedgerEntry:
        try:
            return self._entries[item_id]
        except KeyError:
            raise StockEntryNotFoundError(item_id) from None

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StockLedgerEntry]:
        return iter(self._entries.values())

    def receive(self, item_id: Hashable, quantity: int) -> StockLedgerEntry:
        """Add stock to a tracked item."""
        entry = self.get(item_id)
        with LogContext.bind(item_id=str(item_id)):
            entry.add_stock(quantity)
        return entry

    def issue(self, item_id: Hashable, quantity: int) -> StockLedgerEntry:
        """Remove stock from a tracked item; rejects over-issue."""
        entry = self.get(item_id)
        with LogContext.bind(item_id=str(item_id)):
            entry.remove_stock(quantity)
            if entry.needs_reorder:
                logger.warning(
                    "stock_below_reorder_level",
                    extra={
                        "quantity": entry.current_quantity,
                        "reorder_level": entry.reorder_level,
                    },
                )
        return entry

    def entries_with_status(self, status: StockStatus) -> list[StockLedgerEntry]:
        return [e for e in self._entries.values() if e.classify() is status]

    def low_stock_entries(self) -> list[StockLedgerEntry]:
        """Entries at or below their own reorder level."""
        return [e for e in self._entries.values() if e.is_low_stock]

    def entries_below_store_threshold(self) -> list[StockLedgerEntry]:
        """Entries at or below the store-wide low-stock threshold."""
        threshold = self._config.low_stock_threshold
        return [
            e
            for e in self._entries.values()
            if is_below_low_stock_threshold(e.current_quantity, threshold)
        ]

    def reorder_suggestions(
        self,
        average_monthly_consumption: Mapping[Hashable, int] | None = None,
    ) -> list[ReorderSuggestion]:
        """
        Restocking recommendations for every entry that needs reordering.

        Without consumption history an entry's own ``reorder_quantity`` is
        suggested; with it, the lead-time formula is applied with
        ``reorder_quantity`` as the floor.
        """
        consumption = average_monthly_consumption or {}
        suggestions = []
        for entry in self._entries.values():
            if not entry.needs_reorder:
                continue
            suggestions.append(
                ReorderSuggestion(
                    item_id=entry.item_id,
                    current_quantity=entry.current_quantity,
                    reorder_level=entry.reorder_level,
                    suggested_quantity=suggested_reorder_quantity(
                        current_stock=entry.current_quantity,
                        average_monthly_consumption=consumption.get(entry.item_id, 0),
                        lead_time_days=self._config.default_lead_time_days,
                        minimum=entry.reorder_quantity,
                    ),
                    supplier_id=entry.supplier_id,
                )
            )
        logger.info(
            "reorder_suggestions_computed",
            extra={"entry_count": len(self._entries), "suggestion_count": len(suggestions)},
        )
        return suggestions
