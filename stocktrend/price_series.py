"""Daily closing-price series built from an Alpha Vantage time-series mapping."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple

import pandas as pd

from stocktrend.technical_analysis.exceptions import InvalidDataError

logger = logging.getLogger(__name__)

CLOSE_FIELD = "4. close"


@dataclass(frozen=True)
class PriceSeries:
    """
    Ordered daily closing prices, oldest to newest.

    Attributes:
        dates: ISO date strings in ascending order
        closes: Closing price for each date
    """
    dates: Tuple[str, ...]
    closes: Tuple[float, ...]

    def __post_init__(self):
        if len(self.dates) != len(self.closes):
            raise ValueError(
                f"dates and closes differ in length: {len(self.dates)} != {len(self.closes)}"
            )

    @classmethod
    def from_time_series(cls, time_series: Mapping[str, Mapping[str, Any]]) -> "PriceSeries":
        """
        Build a series from a ``{date: {"4. close": "123.45", ...}}`` mapping.

        Date keys are sorted lexically, which is chronological for ISO dates.

        Raises:
            InvalidDataError: If a quote is missing its close field or the
                value cannot be parsed as a number.
        """
        dates = sorted(time_series.keys())
        closes = []
        for date in dates:
            quote = time_series[date]
            if not isinstance(quote, Mapping) or CLOSE_FIELD not in quote:
                raise InvalidDataError(CLOSE_FIELD, quote, f"missing close for {date}")
            raw_close = quote[CLOSE_FIELD]
            try:
                closes.append(float(raw_close))
            except (TypeError, ValueError) as e:
                raise InvalidDataError(CLOSE_FIELD, raw_close, f"unparsable close for {date}") from e

        logger.debug(f"Built price series with {len(closes)} closes"
                     + (f" from {dates[0]} to {dates[-1]}" if dates else ""))
        return cls(dates=tuple(dates), closes=tuple(closes))

    def __len__(self) -> int:
        return len(self.closes)

    def tail(self, n: int) -> List[float]:
        """The last `n` closes (all of them if the series is shorter)."""
        if n <= 0:
            return []
        return list(self.closes[-n:])

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with `date` (as given) and `close` columns."""
        data: Dict[str, Any] = {"date": list(self.dates), "close": list(self.closes)}
        return pd.DataFrame(data)
