from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Protocol

from pydantic import ValidationError

from domain.rates import parse_rate_table

from .default_rates import DEFAULT_RATES
from .rates_client import RatesAPIError, RatesClient, RatesPayload

logger = logging.getLogger(__name__)


class RateSource(Protocol):
    def fetch_rates(self) -> dict[str, Decimal]: ...


class HttpRateSource(RateSource):
    def __init__(self, *, client: RatesClient | None = None) -> None:
        self.client = client or RatesClient()

    def fetch_rates(self) -> dict[str, Decimal]:
        payload = self.client.get_rates()
        rates = payload.to_rate_table()
        logger.info("Fetched %d rates from %s", len(rates), self.client.url)
        return rates


class StaticRateSource(RateSource):
    def __init__(self, rates: Mapping[str, Any] | None = None) -> None:
        self._raw_rates = dict(DEFAULT_RATES if rates is None else rates)

    def fetch_rates(self) -> dict[str, Decimal]:
        return parse_rate_table(self._raw_rates)


class JsonFileRateSource(RateSource):
    """Reads a saved snapshot with the same shape as the HTTP payload."""

    def __init__(self, *, path: Path) -> None:
        self.path = path

    def fetch_rates(self) -> dict[str, Decimal]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload_raw = json.load(handle)
        except (OSError, ValueError) as exc:
            raise RatesAPIError(f"Cannot read rates snapshot {self.path}") from exc

        try:
            payload = RatesPayload.model_validate(payload_raw)
        except ValidationError as exc:
            raise RatesAPIError(f"Rates snapshot {self.path} has unexpected shape", payload=payload_raw) from exc

        rates = payload.to_rate_table()
        logger.info("Loaded %d rates from %s", len(rates), self.path)
        return rates


__all__ = [
    "HttpRateSource",
    "JsonFileRateSource",
    "RateSource",
    "StaticRateSource",
]
