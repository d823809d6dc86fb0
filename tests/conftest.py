"""Shared fixtures for the stocktrend test suite."""

import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Sequence

import pytest

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))


def make_time_series(closes: Sequence[float], start: date = date(2024, 1, 1)) -> Dict[str, Dict[str, str]]:
    """Build an Alpha Vantage style {ISO date: quote} mapping, oldest close first."""
    series = {}
    for offset, close in enumerate(closes):
        day = (start + timedelta(days=offset)).isoformat()
        series[day] = {
            "1. open": f"{close:.4f}",
            "2. high": f"{close:.4f}",
            "3. low": f"{close:.4f}",
            "4. close": f"{close:.4f}",
            "5. volume": "1000",
        }
    return series


def make_response(closes: Sequence[float]) -> Dict[str, object]:
    """Wrap closes in a full TIME_SERIES_DAILY response body."""
    return {
        "Meta Data": {"1. Information": "Daily Prices", "2. Symbol": "TEST"},
        "Time Series (Daily)": make_time_series(closes),
    }


@pytest.fixture
def step_up_closes() -> List[float]:
    """Flat at 100 through the MACD seed windows, then a step up to 110."""
    return [100.0] * 12 + [100.0] * 14 + [110.0] * 30


@pytest.fixture
def recent_step_up_closes() -> List[float]:
    """Flat at 100 for 45 days, then five days at 110."""
    return [100.0] * 45 + [110.0] * 5


@pytest.fixture
def constant_closes() -> List[float]:
    return [50.0] * 60


@pytest.fixture
def falling_closes() -> List[float]:
    return [200.0 - i for i in range(60)]
