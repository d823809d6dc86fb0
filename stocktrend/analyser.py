"""
Trend classification from SMA, RSI and MACD over a daily closing-price series.

Input:  raw Alpha Vantage response (or its "Time Series (Daily)" mapping)
Output: TrendReport dataclass, printed as four or five lines of text
"""

import sys
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, TextIO

import stocktrend.technical_analysis as ta
from stocktrend.price_series import PriceSeries
from stocktrend.utils.alphavantage_client import TIME_SERIES_KEY
from stocktrend.utils.data_validation import PriceSeriesValidator

logger = logging.getLogger(__name__)

INSUFFICIENT = "insufficient data"


@dataclass
class TrendReport:
    symbol: Optional[str]

    # Moving averages
    sma_short: Optional[float]   # None when the series is shorter than the window
    sma_long: Optional[float]
    sma_trend: str               # "upward" | "downward" | "converging" | "insufficient data"

    # RSI (14-period)
    rsi: float
    rsi_signal: str              # "overbought" | "oversold" | "neutral" | "insufficient data"

    # MACD (12, 26, 9), latest values
    macd: float
    macd_signal_value: float
    macd_histogram: float
    macd_signal: str             # "bullish" | "bearish"
    momentum: str                # "upward momentum" | "downward momentum"

    def lines(self) -> List[str]:
        """Human-readable verdict, one classification per line."""
        lines = []

        if self.sma_trend == "upward":
            lines.append("Short-term trend is upward compared to long-term.")
        elif self.sma_trend == "downward":
            lines.append("Short-term trend is downward compared to long-term.")
        elif self.sma_trend == "converging":
            lines.append("Trends are converging.")
        else:
            lines.append("Not enough data to compare short-term and long-term trends.")

        if self.rsi_signal == INSUFFICIENT:
            lines.append(f"RSI ({TrendAnalyser.RSI_PERIOD}-day): not enough data.")
        else:
            lines.append(f"RSI ({TrendAnalyser.RSI_PERIOD}-day): {self.rsi}")
            if self.rsi_signal == "overbought":
                lines.append("The stock is potentially overbought - the market might "
                             "correct (price might go down).")
            elif self.rsi_signal == "oversold":
                lines.append("The stock is potentially oversold - it might be a good buying "
                             "opportunity.")
            else:
                lines.append("The stock is neither overbought nor oversold.")

        if self.macd_signal == "bullish":
            lines.append("MACD is above the signal line - bullish signal.")
        else:
            lines.append("MACD is below the signal line - bearish signal.")

        if self.momentum == "upward momentum":
            lines.append("MACD histogram is positive, indicating upward momentum.")
        else:
            lines.append("MACD histogram is negative, indicating downward momentum.")

        return lines


# ── Classification helpers ───────────────────────────────────────────────────

def classify_sma(short: Optional[float], long: Optional[float]) -> str:
    if short is None or long is None:
        return INSUFFICIENT
    if short > long:
        return "upward"
    if short < long:
        return "downward"
    return "converging"


def classify_rsi(value: float) -> str:
    if ta.is_insufficient(value):
        return INSUFFICIENT
    if value > 70:
        return "overbought"
    if value < 30:
        return "oversold"
    return "neutral"


def classify_macd(macd_value: float, signal_value: float) -> str:
    return "bullish" if macd_value > signal_value else "bearish"


def classify_momentum(histogram: float) -> str:
    return "upward momentum" if histogram > 0 else "downward momentum"


class TrendAnalyser:
    """
    Runs SMA(20) vs SMA(50), RSI(14) and MACD(12, 26, 9) over one price series.

    The analyser holds no per-query state; one instance serves every query.

    Args:
        sma_window: 'trailing' averages the most recent 20 and 50 closes.
            'head' averages the oldest 20 and 50 closes of the whole series,
            matching the behaviour of earlier releases.
        validator: Optional PriceSeriesValidator run before the indicators.
    """

    SHORT_SMA_PERIOD = 20
    LONG_SMA_PERIOD = 50
    RSI_PERIOD = 14
    SMA_WINDOWS = ('trailing', 'head')

    def __init__(self, sma_window: str = 'trailing', validator: Optional[PriceSeriesValidator] = None):
        if sma_window not in self.SMA_WINDOWS:
            raise ValueError(f"sma_window must be one of {self.SMA_WINDOWS}, got '{sma_window}'")
        self.sma_window = sma_window
        self.validator = validator

    def _sma(self, series: PriceSeries, period: int) -> Optional[float]:
        """SMA over the configured window, or None if the series is too short."""
        # Decided on length: a genuine average can equal the -1.0 sentinel
        if len(series) < period:
            return None
        if self.sma_window == 'trailing':
            return ta.sma(series.tail(period), period)
        return ta.sma(list(series.closes), period)

    def analyse(self, time_series: Mapping[str, Mapping[str, Any]], symbol: Optional[str] = None) -> TrendReport:
        """
        Compute every indicator and classify it.

        Args:
            time_series: ``{ISO date: {"4. close": "<decimal>", ...}}``
            symbol: Ticker, carried into the report for display

        Raises:
            IndicatorError: Malformed closes, or too little data for MACD
            ValueError: Validation failures when the validator is strict
        """
        series = PriceSeries.from_time_series(time_series)
        if self.validator is not None:
            self.validator.validate(series)

        sma_short = self._sma(series, self.SHORT_SMA_PERIOD)
        sma_long = self._sma(series, self.LONG_SMA_PERIOD)

        rsi_value = ta.rsi(list(series.closes), self.RSI_PERIOD)

        macd_value, signal_value, histogram = ta.macd(list(series.closes)).latest()

        report = TrendReport(
            symbol=symbol,
            sma_short=sma_short,
            sma_long=sma_long,
            sma_trend=classify_sma(sma_short, sma_long),
            rsi=rsi_value,
            rsi_signal=classify_rsi(rsi_value),
            macd=macd_value,
            macd_signal_value=signal_value,
            macd_histogram=histogram,
            macd_signal=classify_macd(macd_value, signal_value),
            momentum=classify_momentum(histogram),
        )
        logger.info(f"Analysed {symbol or 'series'} over {len(series)} closes: "
                    f"{report.sma_trend}, {report.rsi_signal}, {report.macd_signal}, {report.momentum}")
        return report

    def analyse_trend(
        self,
        data: Mapping[str, Any],
        symbol: Optional[str] = None,
        out: Optional[TextIO] = None
    ) -> Optional[TrendReport]:
        """
        Analyse a raw API response and write the verdict lines to `out`.

        Never raises: any failure is logged and written as a single
        "Error analysing trend: ..." line.

        Returns:
            The TrendReport, or None if there was nothing to analyse or analysis failed.
        """
        out = out if out is not None else sys.stdout
        try:
            time_series = data.get(TIME_SERIES_KEY)
            if time_series is None:
                logger.warning(f"No '{TIME_SERIES_KEY}' data to analyse for {symbol or 'response'}")
                return None

            report = self.analyse(time_series, symbol)
        except Exception as e:
            logger.error(f"Trend analysis failed for {symbol or 'response'}: {e}")
            print(f"Error analysing trend: {e}", file=out)
            return None

        for line in report.lines():
            print(line, file=out)
        return report
