"""
Sales Configuration Schema.

Defines the pricing settings a sale reads from outside: tax rate, currency,
bulk-discount policy and the reference-number prefix.  Actual values come
from the active pharmacy configuration at runtime; nothing in the pipeline
hardcodes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from pharmacy_config.loader import parse_decimal
from pharmacy_config.schema import PharmacyConfig
from pharmacy_kernel.domain.values import DEFAULT_CURRENCY
from pharmacy_kernel.logging_config import get_logger
from pharmacy_kernel.utils.reference import TRANSACTION_PREFIX

logger = get_logger("modules.sales.config")

_ZERO = Decimal("0")
_ONE = Decimal("1")


@dataclass
class SalesConfig:
    """
    Configuration schema for the sales module.

    Override at instantiation with store-specific values:

        config = SalesConfig(tax_rate=Decimal("0.075"), currency="EUR")
    """

    tax_rate: Decimal = Decimal("0.15")
    currency: str = DEFAULT_CURRENCY
    bulk_discount_threshold: Decimal = Decimal("1000")
    bulk_discount_rate: Decimal = Decimal("0.10")
    transaction_prefix: str = TRANSACTION_PREFIX

    def __post_init__(self):
        self.tax_rate = parse_decimal(self.tax_rate, "tax_rate")
        self.bulk_discount_threshold = parse_decimal(
            self.bulk_discount_threshold, "bulk_discount_threshold"
        )
        self.bulk_discount_rate = parse_decimal(self.bulk_discount_rate, "bulk_discount_rate")

        if not _ZERO <= self.tax_rate <= _ONE:
            raise ValueError("tax_rate must be between 0 and 1")
        if self.bulk_discount_threshold < _ZERO:
            raise ValueError("bulk_discount_threshold cannot be negative")
        if not _ZERO <= self.bulk_discount_rate <= _ONE:
            raise ValueError("bulk_discount_rate must be between 0 and 1")
        if not self.currency or not self.currency.strip():
            raise ValueError("currency cannot be blank")
        if not self.transaction_prefix or not self.transaction_prefix.strip():
            raise ValueError("transaction_prefix cannot be blank")
        self.currency = self.currency.strip().upper()

        logger.info(
            "sales_config_initialized",
            extra={
                "tax_rate": str(self.tax_rate),
                "currency": self.currency,
                "bulk_discount_threshold": str(self.bulk_discount_threshold),
                "bulk_discount_rate": str(self.bulk_discount_rate),
            },
        )

    @classmethod
    def with_defaults(cls) -> Self:
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from dictionary (e.g., loaded from a file)."""
        logger.info(
            "sales_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)

    @classmethod
    def from_pharmacy_config(cls, config: PharmacyConfig) -> Self:
        return cls(
            tax_rate=config.tax_rate,
            currency=config.currency,
            bulk_discount_threshold=config.bulk_discount_threshold,
            bulk_discount_rate=config.bulk_discount_rate,
            transaction_prefix=config.transaction_prefix,
        )
