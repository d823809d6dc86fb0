# stocktrend/console.py
import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional, TextIO

from stocktrend.core import ConfigLoader, setup_logging, resolve_credentials
from stocktrend.analyser import TrendAnalyser
from stocktrend.utils.alphavantage_client import AlphaVantageClient
from stocktrend.utils.alphavantage_exceptions import DataFetchError
from stocktrend.utils.data_validation import PriceSeriesValidator

logger = logging.getLogger(__name__)

PROMPT = "Enter the stock symbol you wish to analyse (or type 'exit' to quit): "
FAREWELL = "Exiting program."
EXIT_COMMAND = "exit"


def run(
    analyser: TrendAnalyser,
    client: AlphaVantageClient,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    """
    Prompt for symbols until 'exit' or end of input, analysing each one.

    A failed fetch is reported for that symbol and the loop carries on; the
    analyser is only invoked with data that was fetched successfully.

    Returns:
        Process exit code (always 0).
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        print(PROMPT, file=stdout)
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            logger.info("Interrupted, leaving the prompt loop")
            break
        if not line:
            logger.info("End of input, leaving the prompt loop")
            break

        symbol = line.strip()
        if not symbol:
            continue
        if symbol.lower() == EXIT_COMMAND:
            break

        try:
            data = client.fetch_daily_series(symbol)
        except DataFetchError as e:
            logger.warning(f"Fetch failed for {symbol}: {e}")
            print(f"Failed to fetch stock data for symbol: {symbol}", file=stdout)
        else:
            analyser.analyse_trend(data, symbol=symbol, out=stdout)

        print(file=stdout)

    print(FAREWELL, file=stdout)
    return 0


def build_analyser(config: ConfigLoader) -> TrendAnalyser:
    """Create the TrendAnalyser described by the 'analysis' config section."""
    analysis = config.get('analysis') or {}
    strictness = analysis.get('validation_strictness')
    validator = PriceSeriesValidator(strictness=strictness) if strictness else None
    return TrendAnalyser(sma_window=analysis.get('sma_window', 'trailing'), validator=validator)


def default_config_path() -> Path:
    """config.yml in the current directory, else the one next to the package."""
    local = Path.cwd() / 'config.yml'
    if local.exists():
        return local
    return Path(__file__).resolve().parent.parent / 'config.yml'


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Classify a stock's trend from SMA, RSI and MACD over its daily closes."
    )
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to config.yml (default: ./config.yml)")
    args = parser.parse_args(argv)

    config_path = args.config or default_config_path()
    config_loader = ConfigLoader(config_path=str(config_path))

    log_config = config_loader.get('logging')
    if log_config:
        # File handlers need their directory to exist before dictConfig runs
        for handler in (log_config.get('handlers') or {}).values():
            filename = handler.get('filename') if isinstance(handler, dict) else None
            if filename:
                Path(filename).parent.mkdir(parents=True, exist_ok=True)
    setup_logging(log_config)

    credentials = resolve_credentials(config_loader.get_all())
    try:
        client = AlphaVantageClient(credentials, config_loader.get('data_source'))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    analyser = build_analyser(config_loader)
    with client:
        return run(analyser, client)


if __name__ == "__main__":
    sys.exit(main())
