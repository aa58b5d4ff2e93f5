"""Currency -- registry of known currencies and their display symbols."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single known currency."""

    code: str
    name: str
    symbol: str | None = None


class CurrencyRegistry:
    """Registry of currencies the point of sale knows how to display."""

    # Only the symbolised currencies get a symbol-prefixed display form;
    # the others fall back to "<CODE> <amount>".
    _CURRENCIES: ClassVar[dict[str, CurrencyInfo]] = {
        "USD": CurrencyInfo("USD", "US Dollar", "$"),
        "EUR": CurrencyInfo("EUR", "Euro", "€"),
        "GBP": CurrencyInfo("GBP", "Pound Sterling", "£"),
        "CAD": CurrencyInfo("CAD", "Canadian Dollar"),
        "AUD": CurrencyInfo("AUD", "Australian Dollar"),
        "CHF": CurrencyInfo("CHF", "Swiss Franc"),
        "INR": CurrencyInfo("INR", "Indian Rupee"),
        "JPY": CurrencyInfo("JPY", "Japanese Yen"),
        "NGN": CurrencyInfo("NGN", "Nigerian Naira"),
        "ZAR": CurrencyInfo("ZAR", "South African Rand"),
    }

    @classmethod
    def normalize(cls, code: str) -> str:
        """Uppercase and strip a currency code."""
        return code.strip().upper()

    @classmethod
    def is_known(cls, code: str) -> bool:
        return cls.normalize(code) in cls._CURRENCIES

    @classmethod
    def get_info(cls, code: str) -> CurrencyInfo | None:
        return cls._CURRENCIES.get(cls.normalize(code))

    @classmethod
    def get_symbol(cls, code: str) -> str | None:
        """Display symbol for the currency, or None when it has none."""
        info = cls.get_info(code)
        return info.symbol if info else None

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        return frozenset(cls._CURRENCIES)
