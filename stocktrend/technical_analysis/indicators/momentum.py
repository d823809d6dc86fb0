"""
Momentum technical indicators.

This module implements indicators that measure the speed and strength of price movements.

Functions:
    rsi: Relative Strength Index with EMA-smoothed gains and losses
"""

import math
import logging
from typing import Sequence

from ..base import INSUFFICIENT_DATA, validate_period, validate_prices
from .smoothing import EmaSmoothing

logger = logging.getLogger(__name__)


def rsi(prices: Sequence[float], days: int = 14) -> float:
    """
    Relative Strength Index (RSI) of a closing-price sequence.

    Measures the speed and change of price movements to identify
    overbought/oversold conditions.

    Mathematical Formula:
        RSI = 100 - (100 / (1 + RS))
        where RS = Average Gain / Average Loss

    Algorithm:
    1. Seed average gain and loss with the plain mean over the first `days`
       price changes. A change > 0 is a gain; anything else is a loss of
       abs(change).
    2. Fold every later change into both averages with EMA smoothing
       (α = 2/(days+1)). The side that did not move on that day is smoothed
       towards zero rather than left untouched.
    3. RS is infinite when the smoothed loss is exactly zero, giving RSI = 100.

    Args:
        prices (Sequence[float]): Closing prices, oldest first.
        days (int): Lookback window, typically 14.

    Returns:
        float: RSI after processing the whole sequence, between 0 and 100, or
            INSUFFICIENT_DATA (-1.0) when there are not more than `days` prices.

    Raises:
        InvalidParameterError: If days is not a positive integer.
        InvalidDataError: If a price is not a finite number.
    """
    validate_period(days, "days", "RSI")
    values = validate_prices(prices, "RSI")

    if len(values) <= days:
        return INSUFFICIENT_DATA

    total_gain = 0.0
    total_loss = 0.0
    for i in range(1, days + 1):
        change = values[i] - values[i - 1]
        if change > 0:
            total_gain += change
        else:
            total_loss += abs(change)

    gain_smoother = EmaSmoothing(days, seed=total_gain / days)
    loss_smoother = EmaSmoothing(days, seed=total_loss / days)

    for i in range(days + 1, len(values)):
        change = values[i] - values[i - 1]
        if change > 0:
            gain_smoother.update(change)
            loss_smoother.update(0.0)
        else:
            loss_smoother.update(abs(change))
            gain_smoother.update(0.0)

    avg_gain = gain_smoother.value
    avg_loss = loss_smoother.value

    rs = math.inf if avg_loss == 0 else avg_gain / avg_loss
    value = 100.0 - (100.0 / (1.0 + rs))

    logger.debug(f"RSI({days}) over {len(values)} prices: avg_gain={avg_gain:.6f}, "
                 f"avg_loss={avg_loss:.6f}, rsi={value:.4f}")
    return value
