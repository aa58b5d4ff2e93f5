"""
Inventory Configuration Schema.

Defines the defaults applied when an item first enters the stock ledger.
Actual values come from the active pharmacy configuration at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from pharmacy_config.schema import PharmacyConfig
from pharmacy_kernel.logging_config import get_logger
from pharmacy_modules.inventory.models import (
    DEFAULT_REORDER_LEVEL,
    DEFAULT_REORDER_QUANTITY,
)

logger = get_logger("modules.inventory.config")


@dataclass
class InventoryConfig:
    """
    Configuration schema for the inventory module.

    Override at instantiation with store-specific values:

        config = InventoryConfig(default_reorder_level=25, low_stock_threshold=10)
    """

    default_reorder_level: int = DEFAULT_REORDER_LEVEL
    default_reorder_quantity: int = DEFAULT_REORDER_QUANTITY
    low_stock_threshold: int = 20
    default_lead_time_days: int = 30

    def __post_init__(self):
        if self.default_reorder_level < 0:
            raise ValueError("default_reorder_level cannot be negative")
        if self.default_reorder_quantity <= 0:
            raise ValueError("default_reorder_quantity must be positive")
        if self.low_stock_threshold < 0:
            raise ValueError("low_stock_threshold cannot be negative")
        if self.default_lead_time_days <= 0:
            raise ValueError("default_lead_time_days must be positive")

        logger.info(
            "inventory_config_initialized",
            extra={
                "default_reorder_level": self.default_reorder_level,
                "default_reorder_quantity": self.default_reorder_quantity,
                "low_stock_threshold": self.low_stock_threshold,
                "default_lead_time_days": self.default_lead_time_days,
            },
        )

    @classmethod
    def with_defaults(cls) -> Self:
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from dictionary (e.g., loaded from a file)."""
        logger.info(
            "inventory_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)

    @classmethod
    def from_pharmacy_config(cls, config: PharmacyConfig) -> Self:
        return cls(
            default_reorder_level=config.default_reorder_level,
            default_reorder_quantity=config.default_reorder_quantity,
            low_stock_threshold=config.low_stock_threshold,
        )
