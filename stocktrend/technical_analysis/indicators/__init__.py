"""
Technical Analysis Indicators Module

Indicator functions over an ordered sequence of closing prices, oldest first.
"""

from .smoothing import EmaSmoothing
from .trend import sma
from .momentum import rsi
from .composite import macd, MACDResult

__all__ = [
    # Trend indicators
    "sma",

    # Momentum indicators
    "rsi",

    # Composite indicators
    "macd",
    "MACDResult",

    # Smoothing
    "EmaSmoothing",
]
