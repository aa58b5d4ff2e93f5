"""
Values -- Immutable, self-validating monetary value object.

Responsibility:
    Provides ``Money``, the only representation of an amount of money in the
    pricing and sales code. Every Money is non-negative, currency-tagged and
    rounded to two decimal places at construction, so every arithmetic result
    (which is itself a freshly constructed Money) is rounded too.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by the sales module and by configuration bridges.

Invariants enforced:
    - amount >= 0, always
    - amount is a Decimal quantized to 0.01 (ROUND_HALF_EVEN)
    - no upper bound: rounding and arithmetic widen the decimal precision
      as needed, so large amounts keep their cents
    - arithmetic and ordering only between equal currencies

Failure modes:
    - InvalidAmountError on negative or non-numeric amounts
    - InvalidCurrencyError on blank currency codes
    - CurrencyMismatchError when mixing currencies
    - NegativeResultError when subtraction would go below zero
    - InvalidScalarError / DivisionByZeroError for bad multipliers or divisors
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, getcontext, localcontext
from typing import Any, Iterable

from pharmacy_kernel.domain.currency import CurrencyRegistry
from pharmacy_kernel.exceptions import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidScalarError,
    NegativeResultError,
)

DEFAULT_CURRENCY = "USD"
MONEY_DECIMAL_PLACES = 2
MONEY_ROUNDING = ROUND_HALF_EVEN

_CENT = Decimal("0.01")
_ZERO = Decimal("0.00")

Scalar = Decimal | int | float | str


def to_decimal(value: Any) -> Decimal:
    """
    Convert a number-like value to Decimal without float arithmetic.

    Floats are converted through ``str()`` so ``0.15`` becomes
    ``Decimal("0.15")`` rather than its binary expansion.

    Raises:
        TypeError: for bools and non-numeric types.
        decimal.InvalidOperation: for unparsable strings.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a valid numeric value")
    if isinstance(value, (int, float, str)):
        return Decimal(str(value).strip() if isinstance(value, str) else str(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (Decimal, int, float, str)) and not isinstance(value, bool)


def _exact_to(digits: int):
    """Decimal context holding at least ``digits`` significant digits."""
    return localcontext(prec=max(getcontext().prec, digits))


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        Pairs a non-negative Decimal amount with an upper-case currency code.
        Operations never mutate; they return new Money values.

    Guarantees:
        - Immutable and hashable
        - ``amount`` has exactly two decimal places
        - equality is exact on (amount, currency) after rounding

    Non-goals:
        - Does NOT convert between currencies
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        try:
            amount = to_decimal(self.amount)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidAmountError(self.amount, "Invalid amount") from e
        if not amount.is_finite():
            raise InvalidAmountError(self.amount, "Amount must be finite")
        if amount < 0:
            raise InvalidAmountError(self.amount)

        if not isinstance(self.currency, str) or not self.currency.strip():
            raise InvalidCurrencyError(self.currency)

        with _exact_to(amount.adjusted() + MONEY_DECIMAL_PLACES + 2):
            rounded = amount.quantize(_CENT, rounding=MONEY_ROUNDING)
        # -0.00 and 0.00 must be the same value
        if rounded.is_zero():
            rounded = _ZERO

        object.__setattr__(self, "amount", rounded)
        object.__setattr__(self, "currency", CurrencyRegistry.normalize(self.currency))

    @classmethod
    def of(cls, amount: Scalar, currency: str = DEFAULT_CURRENCY) -> Money:
        """
        Factory method for creating Money.

        Raises:
            InvalidAmountError: If the amount is negative or not a number.
            InvalidCurrencyError: If the currency code is blank.
        """
        return cls(amount=amount, currency=currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        """Create a zero amount in the given currency."""
        return cls(amount=_ZERO, currency=currency)

    @classmethod
    def total(cls, values: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        """Sum Money values, starting from zero in ``currency``."""
        result = cls.zero(currency)
        for value in values:
            result = result + value
        return result

    @property
    def is_zero(self) -> bool:
        return self.amount == _ZERO

    @property
    def is_positive(self) -> bool:
        return self.amount > _ZERO

    def _sum_digits(self, other: Money) -> int:
        return max(self.amount.adjusted(), other.amount.adjusted()) + MONEY_DECIMAL_PLACES + 2

    def _require_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        with _exact_to(self._sum_digits(other)):
            amount = self.amount + other.amount
        return Money(amount=amount, currency=self.currency)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        if self.amount < other.amount:
            raise NegativeResultError(str(self), str(other))
        with _exact_to(self._sum_digits(other)):
            amount = self.amount - other.amount
        return Money(amount=amount, currency=self.currency)

    def __mul__(self, factor: Scalar) -> Money:
        if not _is_scalar(factor):
            return NotImplemented
        factor = _scalar(factor, "multiply")
        if factor < 0:
            raise InvalidScalarError(factor, "multiply")
        with _exact_to(len(self.amount.as_tuple().digits) + len(factor.as_tuple().digits)):
            amount = self.amount * factor
        return Money(amount=amount, currency=self.currency)

    def __rmul__(self, factor: Scalar) -> Money:
        return self.__mul__(factor)

    def __truediv__(self, divisor: Scalar) -> Money:
        if not _is_scalar(divisor):
            return NotImplemented
        divisor = _scalar(divisor, "divide")
        if divisor == 0:
            raise DivisionByZeroError(str(self))
        if divisor < 0:
            raise InvalidScalarError(divisor, "divide")
        with _exact_to(
            self.amount.adjusted() - divisor.adjusted() + MONEY_DECIMAL_PLACES + 4
        ):
            amount = self.amount / divisor
        return Money(amount=amount, currency=self.currency)

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._require_same_currency(other)
        return self.amount >= other.amount

    def display(self) -> str:
        """Symbol-prefixed form ("$1,234.50"), or ``str(self)`` when no symbol is known."""
        symbol = CurrencyRegistry.get_symbol(self.currency)
        if symbol is None:
            return str(self)
        return f"{symbol}{self.amount:,.2f}"

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"

    def __repr__(self) -> str:
        return f"Money({self.amount!r}, {self.currency!r})"


def _scalar(value: Scalar, operation: str) -> Decimal:
    try:
        result = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidScalarError(value, operation) from e
    if not result.is_finite():
        raise InvalidScalarError(value, operation)
    return result
