"""
stocktrend: trend and momentum verdicts for a stock's daily closes.

Fetches TIME_SERIES_DAILY from Alpha Vantage and classifies it with
SMA(20/50), RSI(14) and MACD(12, 26, 9).
"""

__version__ = "1.0.0"
