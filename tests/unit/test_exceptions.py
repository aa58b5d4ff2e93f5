"""Tests for the typed exception hierarchy."""

import pytest

from pharmacy_kernel.exceptions import (
    CurrencyError,
    CurrencyMismatchError,
    DivisionByZeroError,
    DuplicateStockEntryError,
    EmptySaleError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidDiscountError,
    InvalidQuantityError,
    InvalidRefundError,
    InvalidScalarError,
    InvalidStateTransitionError,
    InvalidThresholdError,
    MoneyError,
    NegativeResultError,
    NotModifiableError,
    PharmacyKernelError,
    SaleError,
    StockEntryNotFoundError,
    StockError,
)


@pytest.mark.parametrize(
    "error, base, code",
    [
        (InvalidAmountError("-1"), MoneyError, "INVALID_AMOUNT"),
        (NegativeResultError("USD 1.00", "USD 2.00"), MoneyError, "NEGATIVE_RESULT"),
        (InvalidScalarError("-1", "multiply"), MoneyError, "INVALID_SCALAR"),
        (DivisionByZeroError("USD 1.00"), MoneyError, "DIVISION_BY_ZERO"),
        (InvalidCurrencyError(""), CurrencyError, "INVALID_CURRENCY"),
        (CurrencyMismatchError("USD", "EUR"), CurrencyError, "CURRENCY_MISMATCH"),
        (InvalidQuantityError(0), StockError, "INVALID_QUANTITY"),
        (InvalidThresholdError("reorder_level", -1), StockError, "INVALID_THRESHOLD"),
        (InsufficientStockError(1, 5, 2), StockError, "INSUFFICIENT_STOCK"),
        (StockEntryNotFoundError(1), StockError, "STOCK_ENTRY_NOT_FOUND"),
        (DuplicateStockEntryError(1), StockError, "DUPLICATE_STOCK_ENTRY"),
        (NotModifiableError("TXN-1", "completed"), SaleError, "SALE_NOT_MODIFIABLE"),
        (InvalidDiscountError("USD 5.00", "USD 1.00", "too big"), SaleError, "INVALID_DISCOUNT"),
        (EmptySaleError("TXN-1"), SaleError, "EMPTY_SALE"),
        (
            InvalidStateTransitionError("TXN-1", "completed", "cancel"),
            SaleError,
            "INVALID_STATE_TRANSITION",
        ),
        (InvalidRefundError("USD 5.00", "USD 1.00"), SaleError, "INVALID_REFUND"),
    ],
)
def test_error_category_and_code(error, base, code):
    assert isinstance(error, base)
    assert isinstance(error, PharmacyKernelError)
    assert error.code == code


def test_insufficient_stock_message_names_both_quantities():
    error = InsufficientStockError(9, requested=40, available=30)
    assert "Available: 30" in str(error)
    assert "Requested: 40" in str(error)


def test_state_transition_hint_in_message():
    error = InvalidStateTransitionError("TXN-1", "completed", "cancel", "Use refund instead")
    assert str(error) == "Cannot cancel sale TXN-1 in status completed. Use refund instead"
