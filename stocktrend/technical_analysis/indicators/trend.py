"""
Trend-following technical indicators.

Functions:
    sma: Simple Moving Average over the head of a price sequence
"""

from typing import Sequence

from ..base import INSUFFICIENT_DATA, mean, validate_period, validate_prices


def sma(prices: Sequence[float], days: int) -> float:
    """
    Simple Moving Average (SMA) of the first `days` prices.

    Mathematical Formula:
        SMA = (P1 + P2 + ... + Pn) / n

    The window is taken from the head of the sequence as passed in, so the
    caller slices out the prices it wants averaged. For a trailing N-day
    average pass ``prices[-N:]``.

    Args:
        prices (Sequence[float]): Closing prices, oldest first.
        days (int): Number of prices to average. Must be a positive integer.

    Returns:
        float: The average, or INSUFFICIENT_DATA (-1.0) when fewer than
            `days` prices are available.

    Raises:
        InvalidParameterError: If days is not a positive integer.
        InvalidDataError: If a price is not a finite number.

    Example:
        >>> sma([1.0, 2.0, 3.0, 4.0], 2)
        1.5
        >>> sma([1.0, 2.0], 5)
        -1.0
    """
    validate_period(days, "days", "SMA")
    values = validate_prices(prices, "SMA")

    if len(values) < days:
        return INSUFFICIENT_DATA

    return mean(values[:days])

