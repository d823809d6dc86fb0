# stocktrend/utils/alphavantage_exceptions.py

"""
Custom exceptions for the Alpha Vantage API client.
Separates transport failures from well-formed replies that carry no price data.
"""

from typing import Optional


class AlphaVantageAPIError(Exception):
    """
    Base exception for Alpha Vantage API errors.

    Attributes:
        status_code: HTTP status code, or None when no response was received
        message: Human-readable error description
        symbol: Ticker the request was made for

    Examples:
        >>> try:
        ...     client.fetch_daily_series('AAPL')
        ... except MissingTimeSeriesError as e:
        ...     print(f"No data: {e.message}")
        ... except DataFetchError as e:
        ...     print(f"Request failed: {e}")
    """

    def __init__(self, message: str, status_code: Optional[int] = None, symbol: Optional[str] = None):
        """
        Initialize Alpha Vantage API error.

        Args:
            message: Error description
            status_code: HTTP status code from the response, if any
            symbol: Ticker the request was made for
        """
        self.status_code = status_code
        self.message = message
        self.symbol = symbol
        prefix = f"[{status_code}] " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")


class DataFetchError(AlphaVantageAPIError):
    """Network/transport failure, HTTP error status, or an unparsable response body."""


class MissingTimeSeriesError(DataFetchError):
    """
    The response parsed but has no "Time Series (Daily)" mapping.

    Alpha Vantage answers invalid symbols and throttled requests with HTTP 200
    and an "Error Message", "Note" or "Information" body instead of data.
    """
