from __future__ import annotations

from decimal import Decimal

from domain.rates import parse_rate_table

# Sample snapshot bundled for demo runs. EUR -> BORG -> DAI -> BTC -> EUR compounds to
# 100 * 5.0427577751 * 0.2053990550 * 0.0000429088 * 23258.8865583847 = 103.3717428183
DEFAULT_RATES: dict[str, str] = {
    "BTC-BTC": "1.0000000000",
    "BTC-BORG": "116352.2654440156",
    "BTC-DAI": "23524.1391553039",
    "BTC-EUR": "23258.8865583847",
    "BORG-BTC": "0.0000086866",
    "BORG-BORG": "1.0000000000",
    "BORG-DAI": "0.2053990550",
    "BORG-EUR": "0.2017539914",
    "DAI-BTC": "0.0000429088",
    "DAI-BORG": "4.9320433378",
    "DAI-DAI": "1.0000000000",
    "DAI-EUR": "0.9907652193",
    "EUR-BTC": "0.0000435564",
    "EUR-BORG": "5.0427577751",
    "EUR-DAI": "1.0211378960",
    "EUR-EUR": "1.0000000000",
}


def default_rate_table() -> dict[str, Decimal]:
    """Fresh copy of the sample snapshot; callers may mutate it freely."""
    return parse_rate_table(DEFAULT_RATES)


__all__ = ["DEFAULT_RATES", "default_rate_table"]
