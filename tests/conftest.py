"""
Pytest fixtures for the pharmacy core test suite.

Provides:
- A deterministic clock so timestamps and reference dates are reproducible
- Default inventory and sales configurations (tax rate 0.15, USD)
- Factories for stock ledgers and sales wired to the fixtures above
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from pharmacy_kernel.domain.clock import DeterministicClock
from pharmacy_kernel.domain.values import Money
from pharmacy_kernel.logging_config import LogContext, reset_logging
from pharmacy_modules.inventory.config import InventoryConfig
from pharmacy_modules.inventory.service import StockLedger
from pharmacy_modules.sales.config import SalesConfig
from pharmacy_modules.sales.sale import Sale


@pytest.fixture(autouse=True)
def _isolated_logging():
    """Leave no handlers or context behind between tests."""
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock(datetime(2024, 3, 15, 9, 30, tzinfo=UTC))


@pytest.fixture
def inventory_config() -> InventoryConfig:
    return InventoryConfig.with_defaults()


@pytest.fixture
def sales_config() -> SalesConfig:
    return SalesConfig(tax_rate=Decimal("0.15"), currency="USD")


@pytest.fixture
def ledger(inventory_config, clock) -> StockLedger:
    return StockLedger(inventory_config, clock)


@pytest.fixture
def make_sale(sales_config, clock):
    """Factory for pending sales sharing the test clock and config."""

    def _make(pharmacist_id: int = 1, **kwargs) -> Sale:
        kwargs.setdefault("config", sales_config)
        kwargs.setdefault("clock", clock)
        return Sale(pharmacist_id, **kwargs)

    return _make


@pytest.fixture
def usd():
    """Shorthand for USD amounts: usd("10.00")."""

    def _usd(amount) -> Money:
        return Money.of(amount, "USD")

    return _usd
