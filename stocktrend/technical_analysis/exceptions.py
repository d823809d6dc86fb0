"""Exception classes for the indicator library."""

from typing import Any, Optional


class IndicatorError(Exception):
    """Base exception for indicator errors."""

    def __init__(self, message: str, indicator_name: Optional[str] = None):
        self.indicator_name = indicator_name
        if indicator_name:
            message = f"[{indicator_name}] {message}"
        super().__init__(message)


class InvalidParameterError(IndicatorError):
    """Invalid indicator parameters."""

    def __init__(self, parameter_name: str, value: Any, expected: str, indicator_name: Optional[str] = None):
        message = f"Invalid parameter '{parameter_name}': got {value}, expected {expected}"
        super().__init__(message, indicator_name)
        self.parameter_name = parameter_name
        self.value = value
        self.expected = expected


class InsufficientDataError(IndicatorError):
    """Insufficient data for calculation."""

    def __init__(self, current_count: int, required_count: int, indicator_name: Optional[str] = None):
        message = f"Insufficient data for calculation: have {current_count} data points, need {required_count}"
        super().__init__(message, indicator_name)
        self.current_count = current_count
        self.required_count = required_count


class InvalidDataError(IndicatorError):
    """Malformed or invalid input data."""

    def __init__(self, field_name: str, value: Any, reason: str, indicator_name: Optional[str] = None):
        message = f"Invalid data in field '{field_name}': {value} ({reason})"
        super().__init__(message, indicator_name)
        self.field_name = field_name
        self.value = value
        self.reason = reason
