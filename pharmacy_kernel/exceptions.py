"""
Typed Exception Hierarchy for the Pharmacy Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers of the pricing and stock core must react to failures precisely: a
cashier prompt for "not enough stock" differs from one for "discount too
large". Matching on message text is fragile, so:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (the offending values)

Example:
    try:
        entry.remove_stock(40)
    except InsufficientStockError as e:
        prompt(f"Only {e.available} left, {e.requested} requested")

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from PharmacyKernelError:

    PharmacyKernelError (base)
    |
    +-- MoneyError
    |   +-- InvalidAmountError
    |   +-- NegativeResultError
    |   +-- InvalidScalarError
    |   +-- DivisionByZeroError
    |
    +-- CurrencyError
    |   +-- InvalidCurrencyError
    |   +-- CurrencyMismatchError
    |
    +-- StockError
    |   +-- InvalidQuantityError
    |   +-- InvalidThresholdError
    |   +-- InsufficientStockError
    |   +-- StockEntryNotFoundError
    |   +-- DuplicateStockEntryError
    |
    +-- SaleError
        +-- NotModifiableError
        +-- InvalidDiscountError
        +-- EmptySaleError
        +-- InvalidStateTransitionError
        +-- InvalidRefundError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                      | When Raised
-----------|---------------------------|------------------------------------------
Money      | INVALID_AMOUNT            | Negative or non-numeric amount
           | NEGATIVE_RESULT           | Subtraction would go below zero
           | INVALID_SCALAR            | Negative or non-numeric multiplier/divisor
           | DIVISION_BY_ZERO          | Divisor is zero
-----------|---------------------------|------------------------------------------
Currency   | INVALID_CURRENCY          | Blank currency code
           | CURRENCY_MISMATCH         | Arithmetic/comparison across currencies
-----------|---------------------------|------------------------------------------
Stock      | INVALID_QUANTITY          | Negative quantity, or non-positive delta
           | INVALID_THRESHOLD         | Negative reorder level, reorder qty <= 0
           | INSUFFICIENT_STOCK        | Removal larger than quantity on hand
           | STOCK_ENTRY_NOT_FOUND     | No ledger entry for the item
           | DUPLICATE_STOCK_ENTRY     | Item already tracked by the ledger
-----------|---------------------------|------------------------------------------
Sale       | SALE_NOT_MODIFIABLE       | Line items changed outside Pending
           | INVALID_DISCOUNT          | Discount above subtotal / bad percentage
           | EMPTY_SALE                | Completing a sale with no line items
           | INVALID_STATE_TRANSITION  | Lifecycle move the workflow forbids
           | INVALID_REFUND            | Refund zero or above refundable amount
"""

from __future__ import annotations

from typing import Any


class PharmacyKernelError(Exception):
    """
    Base exception for all pharmacy kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "PHARMACY_KERNEL_ERROR"


# Money exceptions


class MoneyError(PharmacyKernelError):
    """Base exception for monetary arithmetic errors."""

    code: str = "MONEY_ERROR"


class InvalidAmountError(MoneyError):
    """Amount is negative or cannot be read as a number."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, amount: Any, reason: str = "Amount cannot be negative"):
        self.amount = str(amount)
        super().__init__(f"{reason}: {amount}")


class NegativeResultError(MoneyError):
    """Subtraction would produce a negative amount."""

    code: str = "NEGATIVE_RESULT"

    def __init__(self, minuend: str, subtrahend: str):
        self.minuend = minuend
        self.subtrahend = subtrahend
        super().__init__(
            f"Cannot subtract {subtrahend} from {minuend}: result would be negative"
        )


class InvalidScalarError(MoneyError):
    """Multiplier or divisor is negative or not a number."""

    code: str = "INVALID_SCALAR"

    def __init__(self, scalar: Any, operation: str):
        self.scalar = str(scalar)
        self.operation = operation
        super().__init__(f"Invalid {operation} scalar: {scalar}")


class DivisionByZeroError(MoneyError):
    """Division of an amount by zero."""

    code: str = "DIVISION_BY_ZERO"

    def __init__(self, amount: str):
        self.amount = amount
        super().__init__(f"Cannot divide {amount} by zero")


# Currency exceptions


class CurrencyError(PharmacyKernelError):
    """Base exception for currency-related errors."""

    code: str = "CURRENCY_ERROR"


class InvalidCurrencyError(CurrencyError):
    """Currency code is missing or blank."""

    code: str = "INVALID_CURRENCY"

    def __init__(self, currency: Any):
        self.currency = currency
        super().__init__(f"Invalid currency code: {currency!r}")


class CurrencyMismatchError(CurrencyError):
    """Attempted operation on mismatched currencies."""

    code: str = "CURRENCY_MISMATCH"

    def __init__(self, currency1: str, currency2: str):
        self.currency1 = currency1
        self.currency2 = currency2
        super().__init__(f"Currency mismatch: {currency1} vs {currency2}")


# Stock exceptions


class StockError(PharmacyKernelError):
    """Base exception for stock ledger errors."""

    code: str = "STOCK_ERROR"


class InvalidQuantityError(StockError):
    """Quantity is negative, or a stock/line delta is not positive."""

    code: str = "INVALID_QUANTITY"

    def __init__(self, quantity: Any, reason: str = "Quantity must be positive"):
        self.quantity = quantity
        super().__init__(f"{reason}: {quantity}")


class InvalidThresholdError(StockError):
    """Reorder level is negative or reorder quantity is not positive."""

    code: str = "INVALID_THRESHOLD"

    def __init__(self, field_name: str, value: int):
        self.field_name = field_name
        self.value = value
        qualifier = "cannot be negative" if field_name == "reorder_level" else "must be positive"
        super().__init__(f"{field_name} {qualifier}: {value}")


class InsufficientStockError(StockError):
    """Removal requested more units than are on hand."""

    code: str = "INSUFFICIENT_STOCK"

    def __init__(self, item_id: Any, requested: int, available: int):
        self.item_id = item_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for item {item_id}. "
            f"Available: {available}, Requested: {requested}"
        )


class StockEntryNotFoundError(StockError):
    """No ledger entry exists for the item."""

    code: str = "STOCK_ENTRY_NOT_FOUND"

    def __init__(self, item_id: Any):
        self.item_id = item_id
        super().__init__(f"No stock entry for item: {item_id}")


class DuplicateStockEntryError(StockError):
    """The item is already tracked by the ledger."""

    code: str = "DUPLICATE_STOCK_ENTRY"

    def __init__(self, item_id: Any):
        self.item_id = item_id
        super().__init__(f"Stock entry already exists for item: {item_id}")


# Sale exceptions


class SaleError(PharmacyKernelError):
    """Base exception for sale pricing and lifecycle errors."""

    code: str = "SALE_ERROR"


class NotModifiableError(SaleError):
    """Line items or discounts changed on a sale that is no longer pending."""

    code: str = "SALE_NOT_MODIFIABLE"

    def __init__(self, reference: str, status: str):
        self.reference = reference
        self.status = status
        super().__init__(f"Cannot modify sale {reference} in status {status}")


class InvalidDiscountError(SaleError):
    """Discount exceeds the subtotal or the percentage is out of range."""

    code: str = "INVALID_DISCOUNT"

    def __init__(self, discount: str, subtotal: str, reason: str):
        self.discount = discount
        self.subtotal = subtotal
        super().__init__(f"{reason} (discount={discount}, subtotal={subtotal})")


class EmptySaleError(SaleError):
    """Completing a sale that has no line items."""

    code: str = "EMPTY_SALE"

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Cannot complete sale {reference} with no line items")


class InvalidStateTransitionError(SaleError):
    """The sale workflow does not allow this action from the current status."""

    code: str = "INVALID_STATE_TRANSITION"

    def __init__(self, reference: str, from_status: str, action: str, hint: str = ""):
        self.reference = reference
        self.from_status = from_status
        self.action = action
        message = f"Cannot {action} sale {reference} in status {from_status}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class InvalidRefundError(SaleError):
    """Refund amount is zero or larger than what remains refundable."""

    code: str = "INVALID_REFUND"

    def __init__(self, amount: str, refundable: str):
        self.amount = amount
        self.refundable = refundable
        super().__init__(
            f"Refund amount {amount} is invalid; refundable amount is {refundable}"
        )
