"""Tests for the pure inventory helpers."""

import pytest

from pharmacy_modules.inventory.helpers import (
    is_below_low_stock_threshold,
    suggested_reorder_quantity,
)


class TestLowStockThreshold:

    @pytest.mark.parametrize(
        "quantity, threshold, expected",
        [(0, 20, True), (20, 20, True), (21, 20, False), (0, 0, True)],
    )
    def test_threshold(self, quantity, threshold, expected):
        assert is_below_low_stock_threshold(quantity, threshold) is expected

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            is_below_low_stock_threshold(5, -1)


class TestSuggestedReorderQuantity:

    def test_no_consumption_history(self):
        assert suggested_reorder_quantity(10, 0) == 100
        assert suggested_reorder_quantity(10, 0, minimum=25) == 25

    def test_floor_applies(self):
        # 60/30*30 = 60 lead-time units + 60 safety - 30 on hand = 90 < 100
        assert suggested_reorder_quantity(30, 60) == 100

    def test_formula(self):
        # 120/30*30 = 120 lead-time units + 120 safety - 30 on hand
        assert suggested_reorder_quantity(30, 120) == 210

    def test_fractional_daily_demand_rounds_up(self):
        # 100/30*7 = 23.33 -> 24, + 100 safety - 0 on hand
        assert suggested_reorder_quantity(0, 100, lead_time_days=7, minimum=1) == 124

    def test_large_stock_returns_minimum(self):
        assert suggested_reorder_quantity(10_000, 60) == 100

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"current_stock": -1, "average_monthly_consumption": 10},
            {"current_stock": 1, "average_monthly_consumption": 10, "lead_time_days": 0},
            {"current_stock": 1, "average_monthly_consumption": 10, "minimum": 0},
        ],
    )
    def test_invalid_inputs(self, kwargs):
        with pytest.raises(ValueError):
            suggested_reorder_quantity(**kwargs)
