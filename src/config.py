from __future__ import annotations

from decimal import Decimal
from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RATES_URL = "https://api.swissborg.io/v1/challenge/rates"


class AppSettings(BaseSettings):
    base_currency: str = "EUR"
    initial_investment: Decimal = Decimal("100")

    rates_url: str = DEFAULT_RATES_URL
    request_timeout: float = 10.0
    retry_attempts: int = 5
    retry_backoff_seconds: float = 1

    decimal_precision: int = 50
    cycle_tolerance: Decimal = Decimal("1e-20")

    model_config = SettingsConfigDict(
        env_prefix="ARBISCAN_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@cache
def config() -> AppSettings:
    return AppSettings()
