"""
Exponential smoothing used by the RSI and MACD calculations.

Classes:
    EmaSmoothing: Standard exponential moving average smoothing (α = 2/(N+1))
"""

from ..base import validate_period


class EmaSmoothing:
    """
    Standard Exponential Moving Average smoothing.

    Holds a single smoothed value and folds new observations into it one at a
    time, starting from a precomputed seed (an arithmetic mean, for example).

    Mathematical Formula:
        α = 2 / (period + 1)
        smoothed_value = α * new_value + (1-α) * previous_smoothed_value
    """

    def __init__(self, period: int, seed: float):
        """
        Initialize the smoother.

        Args:
            period (int): The smoothing period.
            seed (float): Starting value.
        """
        validate_period(period, indicator_name="EMA")
        self.period = period
        self._current_value = float(seed)

    @property
    def alpha(self) -> float:
        """Smoothing factor 2/(period+1)."""
        return 2.0 / (self.period + 1)

    def update(self, new_value: float) -> float:
        """
        Update the smoothed value with a new data point.

        Args:
            new_value (float): New value to incorporate into smoothed result.

        Returns:
            float: The updated smoothed value.
        """
        alpha = self.alpha
        self._current_value = alpha * new_value + (1 - alpha) * self._current_value
        return self._current_value

    @property
    def value(self) -> float:
        """Current smoothed value."""
        return self._current_value

    def __repr__(self) -> str:
        return f"EmaSmoothing(period={self.period}, value={self._current_value})"
