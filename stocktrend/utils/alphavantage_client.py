# stocktrend/utils/alphavantage_client.py

"""
Alpha Vantage market-data client.

Fetches the daily time series for one ticker per call. Every failure is
surfaced as a DataFetchError subclass so the caller can report it and move on:
- transport errors, timeouts, HTTP error statuses and non-JSON bodies
- well-formed replies without a "Time Series (Daily)" mapping (invalid
  symbol, throttling notes)

No retries are attempted.
"""

import logging
from typing import Any, Dict, Optional

import requests

from stocktrend.utils.alphavantage_exceptions import DataFetchError, MissingTimeSeriesError

logger = logging.getLogger(__name__)

TIME_SERIES_KEY = "Time Series (Daily)"

# Keys Alpha Vantage uses to explain an HTTP 200 reply that carries no data
API_MESSAGE_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageClient:
    """
    Wrapper for the Alpha Vantage query endpoint.

    Examples:
        >>> client = AlphaVantageClient({'api_key': 'your_key'})
        >>> data = client.fetch_daily_series('IBM')
        >>> data['Time Series (Daily)']['2024-03-01']['4. close']
        '185.0300'

        # As a context manager, closing the HTTP session on exit
        >>> with AlphaVantageClient({'api_key': 'your_key'}, {'timeout': 10}) as client:
        ...     data = client.fetch_daily_series('MSFT')
    """

    DEFAULT_SETTINGS = {
        'base_url': 'https://www.alphavantage.co/query',
        'function': 'TIME_SERIES_DAILY',
        'outputsize': 'compact',
        'timeout': 30,
    }

    def __init__(
        self,
        credentials: Dict[str, Any],
        settings: Optional[Dict[str, Any]] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            credentials: Dictionary with key 'api_key' (required)
            settings: Optional overrides for base_url, function, outputsize, timeout
            session: Optional requests.Session to reuse (a new one is created otherwise)

        Raises:
            ValueError: If no api_key is provided
        """
        self.api_key = (credentials or {}).get('api_key')
        if not self.api_key:
            raise ValueError(
                "An Alpha Vantage api_key is required. Set ALPHAVANTAGE_API_KEY or "
                "alphavantage_credentials.api_key in config.yml."
            )

        merged = dict(self.DEFAULT_SETTINGS)
        merged.update({k: v for k, v in (settings or {}).items() if v is not None})
        self.base_url = merged['base_url']
        self.function = merged['function']
        self.outputsize = merged['outputsize']
        self.timeout = merged['timeout']

        self.session = session if session is not None else requests.Session()
        logger.info(f"AlphaVantageClient initialized: {self.base_url} ({self.function}, {self.outputsize})")

    def fetch_daily_series(self, symbol: str) -> Dict[str, Any]:
        """
        Fetch the daily time series for a ticker.

        Args:
            symbol: Ticker symbol (e.g., 'IBM'); whitespace is stripped and it is upper-cased

        Returns:
            The parsed JSON response, guaranteed to contain a
            "Time Series (Daily)" mapping of ISO date -> quote fields.

        Raises:
            DataFetchError: Transport error, timeout, HTTP error status, or a body
                that is not a JSON object
            MissingTimeSeriesError: JSON object without the time-series mapping
        """
        symbol = symbol.strip().upper()
        params = {
            'function': self.function,
            'symbol': symbol,
            'outputsize': self.outputsize,
            'apikey': self.api_key,
        }

        logger.debug(f"Requesting {self.function} for {symbol}")
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request for {symbol} failed: {e}")
            raise DataFetchError(f"Request failed: {e}", symbol=symbol) from e

        if not response.ok:
            logger.warning(f"Alpha Vantage returned HTTP {response.status_code} for {symbol}")
            raise DataFetchError(
                f"HTTP error {response.reason or ''}".strip(),
                status_code=response.status_code,
                symbol=symbol
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Unparsable response body for {symbol}: {e}")
            raise DataFetchError(
                "Response body is not valid JSON", status_code=response.status_code, symbol=symbol
            ) from e

        if not isinstance(payload, dict):
            raise DataFetchError(
                f"Expected a JSON object, got {type(payload).__name__}",
                status_code=response.status_code,
                symbol=symbol
            )

        time_series = payload.get(TIME_SERIES_KEY)
        if not isinstance(time_series, dict):
            api_message = next((payload[k] for k in API_MESSAGE_KEYS if k in payload), None)
            if api_message:
                logger.warning(f"Alpha Vantage reply for {symbol}: {api_message}")
                message = str(api_message)
            else:
                message = f"Response has no '{TIME_SERIES_KEY}' data"
                logger.warning(f"{message} for {symbol}")
            raise MissingTimeSeriesError(message, status_code=response.status_code, symbol=symbol)

        logger.debug(f"Received {len(time_series)} daily quotes for {symbol}")
        return payload

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "AlphaVantageClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
