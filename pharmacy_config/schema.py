"""
PharmacyConfig schema.

The runtime configuration artifact: a frozen, validated snapshot of the
settings the pricing and stock core reads from outside (tax rate, currency,
reorder defaults, bulk-discount policy, reference prefixes).  YAML files are
parsed into this type by the loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PharmacyConfig:
    """Validated pharmacy configuration."""

    config_id: str
    version: int
    currency: str
    tax_rate: Decimal
    default_reorder_level: int
    default_reorder_quantity: int
    low_stock_threshold: int
    bulk_discount_threshold: Decimal
    bulk_discount_rate: Decimal
    transaction_prefix: str
    prescription_prefix: str
    checksum: str = ""

    def __post_init__(self) -> None:
        if not self.config_id or not self.config_id.strip():
            raise ValueError("config_id cannot be blank")
        if self.version < 1:
            raise ValueError(f"version must be >= 1, got {self.version}")
        if not self.currency or not self.currency.strip():
            raise ValueError("currency cannot be blank")
        if not Decimal("0") <= self.tax_rate <= Decimal("1"):
            raise ValueError(f"tax_rate must be between 0 and 1, got {self.tax_rate}")
        if self.default_reorder_level < 0:
            raise ValueError(
                f"default_reorder_level cannot be negative, got {self.default_reorder_level}"
            )
        if self.default_reorder_quantity <= 0:
            raise ValueError(
                f"default_reorder_quantity must be positive, got {self.default_reorder_quantity}"
            )
        if self.low_stock_threshold < 0:
            raise ValueError(
                f"low_stock_threshold cannot be negative, got {self.low_stock_threshold}"
            )
        if self.bulk_discount_threshold < 0:
            raise ValueError(
                f"bulk_discount_threshold cannot be negative, got {self.bulk_discount_threshold}"
            )
        if not Decimal("0") <= self.bulk_discount_rate <= Decimal("1"):
            raise ValueError(
                f"bulk_discount_rate must be between 0 and 1, got {self.bulk_discount_rate}"
            )
        for name in ("transaction_prefix", "prescription_prefix"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be blank")
