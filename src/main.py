from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Sequence

from config import AppSettings, config
from domain.arbitrage import ArbitrageScanner, ScanResult
from domain.errors import ArbitrageError
from services.rate_sources import HttpRateSource, JsonFileRateSource, RateSource, StaticRateSource
from services.rates_client import RatesAPIError, RatesClient
from utils.formatting import render_scan_result

logger = logging.getLogger(__name__)

RUN_MODES = ("fetch", "demo", "file")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_rate_source(run_mode: str, settings: AppSettings, *, rates_file: Path | None = None) -> RateSource:
    if run_mode == "fetch":
        client = RatesClient(
            url=settings.rates_url,
            timeout=settings.request_timeout,
            retry_attempts=settings.retry_attempts,
            retry_backoff_seconds=settings.retry_backoff_seconds,
        )
        return HttpRateSource(client=client)
    if run_mode == "demo":
        return StaticRateSource()
    if run_mode == "file":
        if rates_file is None:
            msg = "--rates-file is required in file mode"
            raise ValueError(msg)
        return JsonFileRateSource(path=rates_file)
    msg = f"Unknown run mode: {run_mode}"
    raise ValueError(msg)


def run(
    source: RateSource,
    *,
    base_currency: str,
    investment: Decimal,
    precision: int,
    tolerance: Decimal,
) -> ScanResult:
    rates = source.fetch_rates()
    scanner = ArbitrageScanner(
        base_currency=base_currency,
        investment=investment,
        precision=precision,
        tolerance=tolerance,
    )
    return scanner.scan(rates)


def _decimal_arg(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"not a decimal number: {value!r}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    settings = config()
    parser = argparse.ArgumentParser(description="Find the most profitable currency arbitrage cycle.")
    parser.add_argument("-b", "--base-currency", default=settings.base_currency)
    parser.add_argument("-i", "--initial-investment", type=_decimal_arg, default=settings.initial_investment)
    parser.add_argument("-r", "--run-mode", choices=RUN_MODES, default="fetch")
    parser.add_argument("--rates-file", type=Path, default=None)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        source = build_rate_source(args.run_mode, settings, rates_file=args.rates_file)
        result = run(
            source,
            base_currency=args.base_currency,
            investment=args.initial_investment,
            precision=settings.decimal_precision,
            tolerance=settings.cycle_tolerance,
        )
    except (ArbitrageError, RatesAPIError, ValueError) as exc:
        logger.error("Run failed in %s mode: %s", args.run_mode, exc)
        return 1

    print(render_scan_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
