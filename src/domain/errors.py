from __future__ import annotations

from typing import Any


class ArbitrageError(Exception):
    """Base class for errors that abort an arbitrage scan."""


class MalformedPairKey(ArbitrageError):
    def __init__(self, pair_key: str) -> None:
        self.pair_key = pair_key
        super().__init__(f"Malformed currency pair key: {pair_key!r}, expected FROM-TO")


class InvalidRate(ArbitrageError):
    def __init__(self, pair_key: str, rate: Any) -> None:
        self.pair_key = pair_key
        self.rate = rate
        super().__init__(f"Invalid rate for {pair_key}: {rate!r}, expected a positive decimal")


class RateNotFound(ArbitrageError):
    def __init__(self, pair_key: str) -> None:
        self.pair_key = pair_key
        super().__init__(f"Rate not found for key: {pair_key}")


class ArithmeticConversionError(ArbitrageError):
    def __init__(self, pair_key: str, rate: Any, *, precision: int) -> None:
        self.pair_key = pair_key
        self.rate = rate
        self.precision = precision
        super().__init__(f"Cannot take logarithm of rate {rate} for {pair_key} at precision {precision}")


class InvalidInvestment(ArbitrageError, ValueError):
    def __init__(self, investment: Any) -> None:
        self.investment = investment
        super().__init__(f"Initial investment must be a positive decimal, got {investment!r}")


__all__ = [
    "ArbitrageError",
    "ArithmeticConversionError",
    "InvalidInvestment",
    "InvalidRate",
    "MalformedPairKey",
    "RateNotFound",
]
