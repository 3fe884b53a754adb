from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from .errors import InvalidRate
from .types import parse_pair_key


def validate_rate(pair_key: str, rate: Decimal) -> Decimal:
    if not isinstance(rate, Decimal) or not rate.is_finite() or rate <= 0:
        raise InvalidRate(pair_key, rate)
    return rate


def parse_rate(pair_key: str, raw: Any) -> Decimal:
    """Convert a wire value (normally a decimal string) without passing through float."""
    if isinstance(raw, bool) or raw is None:
        raise InvalidRate(pair_key, raw)
    try:
        rate = raw if isinstance(raw, Decimal) else Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise InvalidRate(pair_key, raw) from exc
    return validate_rate(pair_key, rate)


def parse_rate_table(raw_rates: Mapping[str, Any]) -> dict[str, Decimal]:
    parsed: dict[str, Decimal] = {}
    for pair_key in sorted(raw_rates):
        parse_pair_key(pair_key)
        parsed[pair_key] = parse_rate(pair_key, raw_rates[pair_key])
    return parsed


__all__ = ["parse_rate", "parse_rate_table", "validate_rate"]
