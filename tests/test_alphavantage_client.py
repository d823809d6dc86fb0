"""Tests for AlphaVantageClient using a mocked requests session."""

import re
from unittest.mock import Mock

import pytest
import requests

from stocktrend.utils.alphavantage_client import AlphaVantageClient, TIME_SERIES_KEY
from stocktrend.utils.alphavantage_exceptions import (
    AlphaVantageAPIError,
    DataFetchError,
    MissingTimeSeriesError,
)

from conftest import make_response


def mock_response(payload=None, status_code=200, json_error=None):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "OK" if status_code < 400 else "Server Error"
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    return AlphaVantageClient({'api_key': 'demo'}, {'timeout': 5}, session=session)


class TestClientSetup:

    @pytest.mark.parametrize("credentials", [{}, {'api_key': ''}, {'api_key': None}, None])
    def test_requires_api_key(self, credentials):
        with pytest.raises(ValueError):
            AlphaVantageClient(credentials, session=Mock())

    def test_defaults_and_overrides(self, session):
        client = AlphaVantageClient({'api_key': 'k'}, {'outputsize': 'full', 'timeout': None}, session=session)
        assert client.base_url == 'https://www.alphavantage.co/query'
        assert client.function == 'TIME_SERIES_DAILY'
        assert client.outputsize == 'full'
        assert client.timeout == 30

    def test_context_manager_closes_session(self, session):
        with AlphaVantageClient({'api_key': 'k'}, session=session):
            pass
        session.close.assert_called_once()


class TestFetchDailySeries:

    def test_returns_payload_and_sends_expected_params(self, client, session):
        payload = make_response([1.0, 2.0, 3.0])
        session.get.return_value = mock_response(payload)

        data = client.fetch_daily_series('  ibm ')

        assert data is payload
        session.get.assert_called_once_with(
            'https://www.alphavantage.co/query',
            params={
                'function': 'TIME_SERIES_DAILY',
                'symbol': 'IBM',
                'outputsize': 'compact',
                'apikey': 'demo',
            },
            timeout=5,
        )

    def test_transport_error(self, client, session):
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(DataFetchError) as exc_info:
            client.fetch_daily_series('IBM')

        assert exc_info.value.status_code is None
        assert exc_info.value.symbol == 'IBM'
        assert not isinstance(exc_info.value, MissingTimeSeriesError)

    def test_timeout(self, client, session):
        session.get.side_effect = requests.Timeout("read timed out")
        with pytest.raises(DataFetchError):
            client.fetch_daily_series('IBM')

    def test_http_error_status(self, client, session):
        session.get.return_value = mock_response(status_code=503)

        with pytest.raises(DataFetchError) as exc_info:
            client.fetch_daily_series('IBM')

        assert exc_info.value.status_code == 503
        assert str(exc_info.value).startswith("[503]")

    def test_body_is_not_json(self, client, session):
        session.get.return_value = mock_response(json_error=ValueError("Expecting value"))
        with pytest.raises(DataFetchError, match="not valid JSON"):
            client.fetch_daily_series('IBM')

    def test_body_is_not_an_object(self, client, session):
        session.get.return_value = mock_response(["not", "an", "object"])
        with pytest.raises(DataFetchError):
            client.fetch_daily_series('IBM')

    @pytest.mark.parametrize("key,text", [
        ("Error Message", "Invalid API call. Please retry or visit the documentation."),
        ("Note", "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."),
        ("Information", "The demo API key is for demo purposes only."),
    ])
    def test_api_message_without_series(self, client, session, key, text):
        session.get.return_value = mock_response({key: text})

        with pytest.raises(MissingTimeSeriesError) as exc_info:
            client.fetch_daily_series('NOPE')

        assert exc_info.value.message == text
        assert isinstance(exc_info.value, DataFetchError)
        assert isinstance(exc_info.value, AlphaVantageAPIError)

    def test_missing_series_without_message(self, client, session):
        session.get.return_value = mock_response({"Meta Data": {}})
        with pytest.raises(MissingTimeSeriesError, match=re.escape(TIME_SERIES_KEY)):
            client.fetch_daily_series('IBM')

    def test_series_not_a_mapping(self, client, session):
        session.get.return_value = mock_response({TIME_SERIES_KEY: []})
        with pytest.raises(MissingTimeSeriesError):
            client.fetch_daily_series('IBM')
