"""Tests for reference-number generation."""

import re
from datetime import UTC, datetime

import pytest

from pharmacy_kernel.domain.clock import DeterministicClock
from pharmacy_kernel.utils.reference import (
    PRESCRIPTION_PREFIX,
    TRANSACTION_PREFIX,
    generate_prescription_number,
    generate_reference,
    generate_transaction_number,
    parse_reference,
)


@pytest.fixture
def fixed_clock():
    return DeterministicClock(datetime(2024, 7, 4, 15, 0, tzinfo=UTC))


class TestGenerateReference:

    def test_format(self, fixed_clock):
        reference = generate_reference("TXN", fixed_clock)
        assert re.fullmatch(r"TXN-20240704-[0-9A-F]{8}", reference)

    def test_prefix_normalized(self, fixed_clock):
        assert generate_reference(" rx ", fixed_clock).startswith("RX-20240704-")

    def test_blank_prefix_rejected(self, fixed_clock):
        with pytest.raises(ValueError):
            generate_reference("  ", fixed_clock)

    def test_suffixes_differ(self, fixed_clock):
        references = {generate_reference("TXN", fixed_clock) for _ in range(20)}
        assert len(references) == 20

    def test_default_clock_uses_today(self):
        prefix, date_part, _ = parse_reference(generate_reference("TXN"))
        assert prefix == "TXN"
        assert len(date_part) == 8

    def test_transaction_and_prescription_helpers(self, fixed_clock):
        assert generate_transaction_number(fixed_clock).startswith(f"{TRANSACTION_PREFIX}-")
        assert generate_prescription_number(fixed_clock).startswith(f"{PRESCRIPTION_PREFIX}-")

    def test_helpers_accept_prefix(self, fixed_clock):
        assert generate_prescription_number(fixed_clock, prefix="scr").startswith("SCR-20240704-")
        assert generate_transaction_number(fixed_clock, prefix="POS").startswith("POS-20240704-")


class TestParseReference:

    def test_round_trip_parts(self, fixed_clock):
        reference = generate_reference("RX", fixed_clock)
        prefix, date_part, suffix = parse_reference(reference)
        assert prefix == "RX"
        assert date_part == "20240704"
        assert reference.endswith(suffix)

    @pytest.mark.parametrize(
        "reference",
        ["", "TXN", "TXN-2024-ABCDEF12", "TXN-20240704-abcdef12", "txn-20240704-ABCDEF12"],
    )
    def test_malformed(self, reference):
        with pytest.raises(ValueError):
            parse_reference(reference)
