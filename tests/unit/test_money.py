"""
Unit tests for the Money value object.

Verifies:
- Construction validation and rounding to cents
- Currency-checked arithmetic and ordering
- Scalar multiply/divide rules
- Display formatting
"""

from decimal import Decimal

import pytest

from pharmacy_kernel.domain.values import DEFAULT_CURRENCY, Money, to_decimal
from pharmacy_kernel.exceptions import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidScalarError,
    NegativeResultError,
)


class TestMoneyCreation:
    """Construction and validation."""

    def test_default_currency(self):
        assert Money.of("10").currency == DEFAULT_CURRENCY == "USD"

    def test_rounds_to_two_places(self):
        assert Money.of("10.126").amount == Decimal("10.13")

    def test_midpoint_rounds_to_even(self):
        assert Money.of("2.345").amount == Decimal("2.34")
        assert Money.of("2.355").amount == Decimal("2.36")

    def test_float_goes_through_str(self):
        assert Money.of(0.1).amount == Decimal("0.10")

    def test_int_amount(self):
        assert Money.of(5).amount == Decimal("5.00")

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            Money.of("-0.01")
        assert exc_info.value.code == "INVALID_AMOUNT"
        assert exc_info.value.amount == "-0.01"

    def test_tiny_negative_rejected_before_rounding(self):
        with pytest.raises(InvalidAmountError):
            Money.of("-0.001")

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money.of("ten dollars")

    def test_bool_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money.of(True)

    def test_infinity_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money.of("Infinity")

    def test_blank_currency_rejected(self):
        with pytest.raises(InvalidCurrencyError):
            Money.of("1", "  ")

    def test_currency_normalized_to_upper(self):
        assert Money.of("1", "eur").currency == "EUR"

    def test_zero(self):
        zero = Money.zero("GBP")
        assert zero.is_zero
        assert not zero.is_positive
        assert zero.currency == "GBP"

    def test_is_immutable(self):
        money = Money.of("1")
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")


class TestMoneyEquality:

    def test_equal_after_rounding(self):
        assert Money.of("10.004") == Money.of("10.00")

    def test_different_currency_not_equal(self):
        assert Money.of("10", "USD") != Money.of("10", "EUR")

    def test_hashable(self):
        assert len({Money.of("1.00"), Money.of("1")}) == 1


class TestMoneyArithmetic:
    """Currency-checked arithmetic."""

    def test_add(self):
        assert Money.of("10.50") + Money.of("0.75") == Money.of("11.25")

    def test_add_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            Money.of("1", "USD") + Money.of("1", "EUR")
        assert exc_info.value.currency1 == "USD"
        assert exc_info.value.currency2 == "EUR"

    def test_subtract(self):
        assert Money.of("10") - Money.of("2.50") == Money.of("7.50")

    def test_subtract_to_zero(self):
        assert (Money.of("3") - Money.of("3")).is_zero

    def test_subtract_negative_result(self):
        with pytest.raises(NegativeResultError):
            Money.of("1") - Money.of("1.01")

    def test_subtract_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            Money.of("5", "USD") - Money.of("1", "GBP")

    def test_multiply_rounds(self):
        assert Money.of("27.00") * Decimal("0.15") == Money.of("4.05")
        assert Money.of("10.00") * 3 == Money.of("30.00")

    def test_reverse_multiply(self):
        assert 3 * Money.of("1.10") == Money.of("3.30")

    def test_multiply_by_zero(self):
        assert (Money.of("9.99") * 0).is_zero

    def test_multiply_negative_scalar(self):
        with pytest.raises(InvalidScalarError):
            Money.of("1") * -1

    def test_divide(self):
        assert Money.of("10.00") / 3 == Money.of("3.33")

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            Money.of("10") / 0

    def test_divide_negative_scalar(self):
        with pytest.raises(InvalidScalarError):
            Money.of("10") / Decimal("-2")

    def test_multiply_by_money_unsupported(self):
        with pytest.raises(TypeError):
            Money.of("1") * Money.of("2")

    def test_total(self):
        values = [Money.of("1.10"), Money.of("2.20"), Money.of("3.30")]
        assert Money.total(values) == Money.of("6.60")

    def test_total_of_nothing_is_zero(self):
        assert Money.total([], "EUR") == Money.zero("EUR")


class TestMoneyOrdering:

    def test_comparisons(self):
        small, large = Money.of("1"), Money.of("2")
        assert small < large
        assert small <= large
        assert large > small
        assert large >= small
        assert small <= Money.of("1.00")

    def test_comparison_currency_mismatch(self):
        with pytest.raises(CurrencyMismatchError):
            Money.of("1", "USD") < Money.of("2", "EUR")


class TestMoneyDisplay:

    def test_str_has_code_and_separators(self):
        assert str(Money.of("1234.5")) == "USD 1,234.50"

    @pytest.mark.parametrize(
        "currency, expected",
        [("USD", "$1,234.50"), ("EUR", "€1,234.50"), ("GBP", "£1,234.50")],
    )
    def test_display_with_symbol(self, currency, expected):
        assert Money.of("1234.5", currency).display() == expected

    def test_display_without_symbol(self):
        assert Money.of("12", "CHF").display() == "CHF 12.00"

    def test_repr(self):
        assert repr(Money.of("1")) == "Money(Decimal('1.00'), 'USD')"


class TestToDecimal:

    def test_decimal_passthrough(self):
        value = Decimal("1.234")
        assert to_decimal(value) is value

    def test_float_via_str(self):
        assert to_decimal(0.15) == Decimal("0.15")

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_decimal(False)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_decimal([1])


class TestLargeAmounts:
    """Amounts beyond the default 28-digit decimal context keep their cents."""

    def test_create_large_amount(self):
        assert Money.of(Decimal("1e27")).amount == Decimal("1000000000000000000000000000.00")

    def test_large_amount_rounds_half_even(self):
        money = Money.of("123456789012345678901234567890.125")
        assert money.amount == Decimal("123456789012345678901234567890.12")

    def test_add_carries_into_new_digit(self):
        total = Money.of("99999999999999999999999999999.99") + Money.of("0.01")
        assert total.amount == Decimal("100000000000000000000000000000.00")

    def test_subtract_keeps_cents(self):
        result = Money.of("100000000000000000000000000000.00") - Money.of("0.01")
        assert result.amount == Decimal("99999999999999999999999999999.99")

    def test_multiply_is_exact(self):
        product = Money.of("12345678901234567890123456789.01") * 3
        assert product.amount == Decimal("37037036703703703670370370367.03")

    def test_divide_keeps_cents(self):
        quotient = Money.of("10000000000000000000000000000.10") / 4
        assert quotient.amount == Decimal("2500000000000000000000000000.02")
