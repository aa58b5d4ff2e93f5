"""
Inventory Module.

Per-item stock tracking with reorder thresholds:
- StockLedgerEntry: quantity on hand, reorder settings, derived status
- StockLedger: lookup table of entries with restocking reports
- Helpers: store-wide low-stock check, suggested reorder quantity
"""

from pharmacy_modules.inventory.config import InventoryConfig
from pharmacy_modules.inventory.helpers import (
    is_below_low_stock_threshold,
    suggested_reorder_quantity,
)
from pharmacy_modules.inventory.models import (
    DEFAULT_REORDER_LEVEL,
    DEFAULT_REORDER_QUANTITY,
    ReorderSuggestion,
    StockLedgerEntry,
    StockStatus,
    classify_stock,
)
from pharmacy_modules.inventory.service import StockLedger

__all__ = [
    "DEFAULT_REORDER_LEVEL",
    "DEFAULT_REORDER_QUANTITY",
    "InventoryConfig",
    "ReorderSuggestion",
    "StockLedger",
    "StockLedgerEntry",
    "StockStatus",
    "classify_stock",
    "is_below_low_stock_threshold",
    "suggested_reorder_quantity",
]
