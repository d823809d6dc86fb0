"""Tests for the RSI indicator."""

import pytest

import stocktrend.technical_analysis as ta
from stocktrend.technical_analysis import INSUFFICIENT_DATA, InvalidParameterError


class TestRSI:

    @pytest.mark.parametrize("length", [0, 1, 10, 14])
    def test_returns_sentinel_when_not_more_prices_than_window(self, length):
        assert ta.rsi([100.0 + i for i in range(length)], 14) == INSUFFICIENT_DATA

    def test_first_computable_length(self):
        assert ta.rsi([100.0 + i for i in range(15)], 14) != INSUFFICIENT_DATA

    @pytest.mark.parametrize("length", [15, 16, 40, 200])
    def test_strictly_increasing_series_is_100(self, length):
        prices = [10.0 + 0.5 * i for i in range(length)]
        assert ta.rsi(prices, 14) == 100.0

    @pytest.mark.parametrize("length", [15, 16, 40, 200])
    def test_strictly_decreasing_series_is_0(self, length):
        prices = [500.0 - 1.5 * i for i in range(length)]
        assert ta.rsi(prices, 14) == 0.0

    def test_constant_series_is_100(self):
        # No losses at all: RS is infinite
        assert ta.rsi([50.0] * 60, 14) == 100.0

    def test_hand_computed_value(self):
        # changes +1, -1 seed gain=0.5 loss=0.5; then +2 with alpha=2/3:
        # gain = 2/3*2 + 1/3*0.5 = 1.5, loss = 1/3*0.5 = 1/6, RS = 9
        assert ta.rsi([1.0, 2.0, 1.0, 3.0], 2) == pytest.approx(90.0)

    def test_loss_side_decays_on_up_days(self):
        # seed: changes +1, -3 -> gain=0.5, loss=1.5; then +1 with alpha=2/3:
        # gain = 2/3 + 1/6 = 5/6, loss = 1/3*1.5 = 0.5, RS = 5/3
        expected = 100 - 100 / (1 + 5 / 3)
        assert ta.rsi([10.0, 11.0, 8.0, 9.0], 2) == pytest.approx(expected)

    def test_unchanged_close_counts_as_zero_loss(self):
        # seed: +1, +1 -> gain=1, loss=0; then 0 -> gain=1/3, loss stays 0
        assert ta.rsi([1.0, 2.0, 3.0, 3.0], 2) == 100.0

    def test_stays_within_bounds(self):
        prices = [100, 102, 101, 105, 103, 99, 98, 104, 107, 106, 108, 103, 101, 100,
                  102, 104, 103, 105, 110, 108]
        value = ta.rsi(prices, 14)
        assert 0.0 <= value <= 100.0

    @pytest.mark.parametrize("days", [0, -1, 14.0])
    def test_rejects_invalid_period(self, days):
        with pytest.raises(InvalidParameterError):
            ta.rsi([1.0] * 30, days)
