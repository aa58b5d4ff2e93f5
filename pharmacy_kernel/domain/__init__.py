"""
Pure domain layer.

Value objects and abstractions with NO dependencies on storage or I/O
(the clock is injected, never read directly).
"""

from pharmacy_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from pharmacy_kernel.domain.currency import CurrencyInfo, CurrencyRegistry
from pharmacy_kernel.domain.values import DEFAULT_CURRENCY, Money, to_decimal
from pharmacy_kernel.domain.workflow import Guard, Transition, Workflow

__all__ = [
    "Clock",
    "CurrencyInfo",
    "CurrencyRegistry",
    "DEFAULT_CURRENCY",
    "DeterministicClock",
    "Guard",
    "Money",
    "SystemClock",
    "Transition",
    "Workflow",
    "to_decimal",
]
