"""
Reference number generation utilities.

Sales and prescriptions carry a human-readable reference number of the form
``<PREFIX>-<YYYYMMDD>-<SUFFIX>`` where SUFFIX is eight upper-case hex digits.
Uniqueness is the persistence layer's concern; the random suffix only makes
collisions unlikely.
"""

import re
from uuid import uuid4

from pharmacy_kernel.domain.clock import Clock, SystemClock

TRANSACTION_PREFIX = "TXN"
PRESCRIPTION_PREFIX = "RX"

_REFERENCE_PATTERN = re.compile(r"^(?P<prefix>[A-Z0-9]+)-(?P<date>\d{8})-(?P<suffix>[0-9A-F]{8})$")


def generate_reference(prefix: str, clock: Clock | None = None) -> str:
    """
    Generate a reference number.

    Args:
        prefix: Document prefix, e.g. "TXN" or "RX".
        clock: Source of the embedded date. Defaults to the system clock.

    Returns:
        Reference string.

    Example:
        >>> generate_reference("TXN", clock)
        "TXN-20240101-3F2A9C1B"
    """
    if not prefix or not prefix.strip():
        raise ValueError("Reference prefix cannot be blank")
    clock = clock or SystemClock()
    suffix = uuid4().hex[:8].upper()
    return f"{prefix.strip().upper()}-{clock.now():%Y%m%d}-{suffix}"


def generate_transaction_number(
    clock: Clock | None = None, prefix: str = TRANSACTION_PREFIX
) -> str:
    return generate_reference(prefix, clock)


def generate_prescription_number(
    clock: Clock | None = None, prefix: str = PRESCRIPTION_PREFIX
) -> str:
    """Callers with a loaded config pass ``config.prescription_prefix``."""
    return generate_reference(prefix, clock)


def parse_reference(reference: str) -> tuple[str, str, str]:
    """
    Split a reference number into (prefix, date, suffix).

    Raises:
        ValueError: If the reference does not match the expected format.
    """
    match = _REFERENCE_PATTERN.match(reference)
    if match is None:
        raise ValueError(f"Invalid reference number format: {reference}")
    return match.group("prefix"), match.group("date"), match.group("suffix")
