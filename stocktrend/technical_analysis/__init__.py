"""
stocktrend Technical Analysis Library

Pure indicator functions for daily closing-price sequences.

This library provides:
- SMA over the head of a price sequence (slice the window you want)
- RSI with EMA-smoothed average gain and loss
- MACD with mean-seeded price EMAs and a mean-seeded signal line
- An INSUFFICIENT_DATA sentinel for windows that are too short

Example Usage:
    import stocktrend.technical_analysis as ta

    closes = [...]  # oldest first
    short_trend = ta.sma(closes[-20:], 20)
    momentum = ta.rsi(closes, 14)
    result = ta.macd(closes)
    macd_value, signal, histogram = result.latest()
"""

from .base import INSUFFICIENT_DATA, is_insufficient, validate_period, validate_prices
from .exceptions import (
    IndicatorError,
    InvalidParameterError,
    InsufficientDataError,
    InvalidDataError,
)
from .indicators import sma, rsi, macd, MACDResult, EmaSmoothing

__all__ = [
    # Indicator functions
    "sma",
    "rsi",
    "macd",
    "MACDResult",
    "EmaSmoothing",

    # Sentinel and validation utilities
    "INSUFFICIENT_DATA",
    "is_insufficient",
    "validate_period",
    "validate_prices",

    # Exceptions
    "IndicatorError",
    "InvalidParameterError",
    "InsufficientDataError",
    "InvalidDataError",
]
