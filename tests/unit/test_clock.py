"""Tests for the injectable clocks."""

from datetime import UTC, datetime, timedelta

from pharmacy_kernel.domain.clock import DeterministicClock, SystemClock


class TestDeterministicClock:

    def test_default_time(self):
        assert DeterministicClock().now() == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def test_stable_until_advanced(self):
        clock = DeterministicClock()
        assert clock.now() == clock.now()

    def test_advance_and_tick(self):
        start = datetime(2024, 5, 1, tzinfo=UTC)
        clock = DeterministicClock(start)
        clock.advance(60)
        assert clock.now() == start + timedelta(seconds=60)
        assert clock.tick() == start + timedelta(seconds=61)

    def test_set_time_resets_advance(self):
        clock = DeterministicClock()
        clock.advance(10)
        target = datetime(2030, 1, 1, tzinfo=UTC)
        clock.set_time(target)
        assert clock.now() == target


class TestSystemClock:

    def test_timezone_aware(self):
        assert SystemClock().now().tzinfo is not None
