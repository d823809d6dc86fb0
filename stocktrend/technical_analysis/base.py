"""Shared helpers for the indicator functions."""

import math
import logging
from typing import List, Sequence

from .exceptions import InvalidParameterError, InvalidDataError

logger = logging.getLogger(__name__)

# Returned by SMA and RSI instead of raising when the window is too short.
INSUFFICIENT_DATA = -1.0


def is_insufficient(value: float) -> bool:
    """Return True if an indicator value is the insufficient-data sentinel."""
    return value == INSUFFICIENT_DATA


def validate_period(period: int, parameter_name: str = "period", indicator_name: str = None) -> None:
    """
    Validate that a period parameter is a positive integer.

    Args:
        period (int): Period value to validate.
        parameter_name (str): Name reported in the error message.
        indicator_name (str): Indicator reported in the error message.

    Raises:
        InvalidParameterError: If period is not a positive integer.
    """
    # bool is an int subclass but never a meaningful period
    if not isinstance(period, int) or isinstance(period, bool):
        raise InvalidParameterError(parameter_name, period, "positive integer", indicator_name)

    if period <= 0:
        raise InvalidParameterError(parameter_name, period, "positive integer (> 0)", indicator_name)


def validate_prices(prices: Sequence[float], indicator_name: str = None) -> List[float]:
    """
    Check that every price is a finite number and return them as a list of floats.

    Args:
        prices (Sequence[float]): Closing prices, oldest first.
        indicator_name (str): Indicator reported in the error message.

    Returns:
        List[float]: The prices converted to float.

    Raises:
        InvalidDataError: If a price is None, NaN, infinite or not numeric.
    """
    values = []
    for index, price in enumerate(prices):
        field_name = f"close[{index}]"
        if price is None:
            raise InvalidDataError(field_name, price, "value is None", indicator_name)
        try:
            value = float(price)
        except (TypeError, ValueError) as e:
            raise InvalidDataError(field_name, price, "value is not numeric", indicator_name) from e
        if math.isnan(value):
            raise InvalidDataError(field_name, price, "value is NaN", indicator_name)
        if math.isinf(value):
            raise InvalidDataError(field_name, price, "value is infinite", indicator_name)
        values.append(value)
    return values


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    return sum(values) / len(values)
