"""
Inventory Pure Functions (``pharmacy_modules.inventory.helpers``).

Responsibility
--------------
Stateless restocking calculations: the store-wide low-stock threshold check
and the consumption-based suggested reorder quantity.  No clock, no I/O.

Invariants
----------
- Each function validates its own preconditions and raises ``ValueError``
  on violation.
- Fractional daily demand is rounded UP to whole units.
"""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal

DAYS_PER_MONTH = 30


def is_below_low_stock_threshold(quantity: int, threshold: int) -> bool:
    """True when ``quantity`` is at or under the store-wide low-stock threshold."""
    if threshold < 0:
        raise ValueError(f"threshold cannot be negative (got {threshold})")
    return quantity <= threshold


def suggested_reorder_quantity(
    current_stock: int,
    average_monthly_consumption: int,
    lead_time_days: int = 30,
    minimum: int = 100,
) -> int:
    """
    Units to order so stock covers the supplier lead time plus one month of
    safety stock.

    Formula::

        lead_time_qty = ceil(monthly / 30 * lead_time_days)
        suggested     = max(lead_time_qty + monthly - current_stock, minimum)

    Preconditions:
        - ``current_stock >= 0``, ``lead_time_days > 0``, ``minimum > 0``.

    Postconditions:
        - Returns ``minimum`` when no consumption history exists
          (``average_monthly_consumption <= 0``).
        - Result is never below ``minimum``.
    """
    if current_stock < 0:
        raise ValueError(f"current_stock cannot be negative (got {current_stock})")
    if lead_time_days <= 0:
        raise ValueError(f"lead_time_days must be positive (got {lead_time_days})")
    if minimum <= 0:
        raise ValueError(f"minimum must be positive (got {minimum})")

    if average_monthly_consumption <= 0:
        return minimum

    daily = Decimal(average_monthly_consumption) / DAYS_PER_MONTH
    lead_time_qty = int((daily * lead_time_days).to_integral_value(rounding=ROUND_CEILING))
    safety_stock = average_monthly_consumption
    return max(lead_time_qty + safety_stock - current_stock, minimum)
