"""
Sales Domain Models (``pharmacy_modules.sales.models``).

Responsibility
--------------
Value objects and enumerations for the sale pricing pipeline: sale status,
payment method, and the frozen line item.

Invariants
----------
- ``LineItem.quantity > 0``.
- ``LineItem.line_total == unit_price * quantity`` and both share a currency.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable

from pharmacy_kernel.domain.values import Money
from pharmacy_kernel.exceptions import InvalidQuantityError
from pharmacy_kernel.logging_config import get_logger

logger = get_logger("modules.sales.models")


class SaleStatus(Enum):
    """Lifecycle status of a sale."""
    PENDING = "pending"
    COMPLETED = "completed"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class PaymentMethod(Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    INSURANCE = "insurance"
    MOBILE_PAYMENT = "mobile_payment"
    BANK_TRANSFER = "bank_transfer"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class LineItem:
    """One (item, quantity, unit price) tuple within a sale."""
    item_id: Hashable
    quantity: int
    unit_price: Money
    line_total: Money

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidQuantityError(self.quantity, "Quantity must be an integer")
        if self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)
        if self.line_total != self.unit_price * self.quantity:
            raise ValueError(
                f"line_total {self.line_total} does not equal "
                f"{self.unit_price} x {self.quantity}"
            )

    @classmethod
    def create(cls, item_id: Hashable, quantity: int, unit_price: Money) -> LineItem:
        """Build a line item, deriving ``line_total`` from price and quantity."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityError(quantity, "Quantity must be an integer")
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        return cls(
            item_id=item_id,
            quantity=quantity,
            unit_price=unit_price,
            line_total=unit_price * quantity,
        )

    def with_quantity(self, quantity: int) -> LineItem:
        return LineItem.create(self.item_id, quantity, self.unit_price)
