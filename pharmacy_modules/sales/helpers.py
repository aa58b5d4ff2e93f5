"""
Sales Pure Functions (``pharmacy_modules.sales.helpers``).

Responsibility
--------------
Stateless pricing arithmetic for the sale pipeline: deriving subtotal, tax
and total from line items, converting a percentage discount to an amount,
and the bulk-discount eligibility check.

Invariants
----------
- Tax is charged on ``subtotal - discount``; never on the pre-discount amount.
- Every intermediate result is a ``Money`` and therefore rounded to cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from pharmacy_kernel.domain.values import Money, to_decimal
from pharmacy_kernel.exceptions import InvalidDiscountError
from pharmacy_modules.sales.models import LineItem

_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class SaleTotals:
    """Derived totals for one sale."""
    subtotal: Money
    discount: Money
    tax_amount: Money
    total: Money


def compute_totals(
    line_items: Iterable[LineItem],
    discount: Money,
    tax_rate: Decimal,
    currency: str,
) -> SaleTotals:
    """
    Derive subtotal, tax and total.

    With no line items every figure, including the discount, is zero.

    Raises:
        InvalidDiscountError: if ``discount`` exceeds the subtotal.
    """
    items = list(line_items)
    if not items:
        zero = Money.zero(currency)
        return SaleTotals(subtotal=zero, discount=zero, tax_amount=zero, total=zero)

    subtotal = Money.total((item.line_total for item in items), currency)
    if discount > subtotal:
        raise InvalidDiscountError(
            str(discount), str(subtotal), "Discount cannot exceed subtotal"
        )
    taxable = subtotal - discount
    tax_amount = taxable * tax_rate
    return SaleTotals(
        subtotal=subtotal,
        discount=discount,
        tax_amount=tax_amount,
        total=taxable + tax_amount,
    )


def percentage_to_amount(subtotal: Money, percentage: Decimal | int | float | str) -> Money:
    """
    Convert a percentage (0-100) of ``subtotal`` to a fixed discount amount.

    Raises:
        InvalidDiscountError: if ``percentage`` is not a number in [0, 100].
    """
    try:
        pct = to_decimal(percentage)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidDiscountError(
            f"{percentage}%", str(subtotal), "Percentage must be a number"
        ) from None
    if not pct.is_finite() or pct < 0 or pct > _HUNDRED:
        raise InvalidDiscountError(
            f"{percentage}%", str(subtotal), "Percentage must be between 0 and 100"
        )
    return subtotal * (pct / _HUNDRED)


def qualifies_for_bulk_discount(subtotal: Money, threshold: Decimal) -> bool:
    """True when the subtotal has reached the bulk-discount threshold."""
    return subtotal.amount >= threshold
