"""
Composite technical indicators.

This module implements indicators that are built from other indicators.
"""

import logging
from typing import List, NamedTuple, Sequence, Tuple

from ..base import mean, validate_period, validate_prices
from ..exceptions import InsufficientDataError, InvalidParameterError
from .smoothing import EmaSmoothing

logger = logging.getLogger(__name__)

SHORT_PERIOD = 12
LONG_PERIOD = 26
SIGNAL_PERIOD = 9


class MACDResult(NamedTuple):
    """
    The three MACD sequences.

    `signal_line` and `histogram` are index-aligned with each other and with
    the tail of `macd_line`; they start once `signal_period` MACD values exist.
    """
    macd_line: List[float]
    signal_line: List[float]
    histogram: List[float]

    def latest(self) -> Tuple[float, float, float]:
        """
        Get the most recent (macd, signal, histogram) values.

        Raises:
            InsufficientDataError: If no signal value has been produced yet.
        """
        if not self.signal_line:
            raise InsufficientDataError(
                len(self.macd_line), SIGNAL_PERIOD, "MACD"
            )
        return self.macd_line[-1], self.signal_line[-1], self.histogram[-1]


def macd(
    prices: Sequence[float],
    short_period: int = SHORT_PERIOD,
    long_period: int = LONG_PERIOD,
    signal_period: int = SIGNAL_PERIOD,
) -> MACDResult:
    """
    Moving Average Convergence Divergence (MACD).

    A trend-following momentum indicator that shows the relationship between
    two exponential moving averages (EMAs) of a security's price.

    Mathematical Formula:
        MACD Line = EMA(short_period) - EMA(long_period)
        Signal Line = EMA(MACD Line, signal_period)
        Histogram = MACD Line - Signal Line

    Seeding:
        - Both price EMAs start from the plain mean of the first `short_period`
          and `long_period` prices respectively.
        - Both are then advanced together, one price at a time, from index
          `long_period` onwards. Prices between the two seed windows are not
          folded into the short EMA.
        - The first signal value is the mean of the first `signal_period`
          MACD values; later values follow the EMA recurrence.

    Args:
        prices (Sequence[float]): Closing prices, oldest first.
        short_period (int): Period for the fast EMA.
        long_period (int): Period for the slow EMA.
        signal_period (int): Period for the signal line EMA.

    Returns:
        MACDResult: `len(macd_line) == max(0, len(prices) - long_period)` and
            `len(signal_line) == len(histogram) == max(0, len(macd_line) - signal_period + 1)`.

    Raises:
        InvalidParameterError: If a period is not a positive integer or
            short_period is not less than long_period.
        InvalidDataError: If a price is not a finite number.
    """
    validate_period(short_period, "short_period", "MACD")
    validate_period(long_period, "long_period", "MACD")
    validate_period(signal_period, "signal_period", "MACD")
    if short_period >= long_period:
        raise InvalidParameterError(
            "short_period", short_period, f"must be less than long_period ({long_period})", "MACD"
        )

    values = validate_prices(prices, "MACD")

    macd_line: List[float] = []
    signal_line: List[float] = []
    histogram: List[float] = []

    if len(values) <= long_period:
        logger.debug(f"MACD needs more than {long_period} prices, got {len(values)}")
        return MACDResult(macd_line, signal_line, histogram)

    short_ema = EmaSmoothing(short_period, seed=mean(values[:short_period]))
    long_ema = EmaSmoothing(long_period, seed=mean(values[:long_period]))
    signal_ema = None

    for price in values[long_period:]:
        macd_value = short_ema.update(price) - long_ema.update(price)
        macd_line.append(macd_value)

        if len(macd_line) < signal_period:
            continue

        if signal_ema is None:
            signal_ema = EmaSmoothing(signal_period, seed=mean(macd_line))
            signal_value = signal_ema.value
        else:
            signal_value = signal_ema.update(macd_value)

        signal_line.append(signal_value)
        histogram.append(macd_value - signal_value)

    return MACDResult(macd_line, signal_line, histogram)
