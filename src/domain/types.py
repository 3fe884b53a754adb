from __future__ import annotations

from decimal import Decimal
from typing import Mapping, NewType

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import MalformedPairKey

CurrencyCode = NewType("CurrencyCode", str)
PairKey = NewType("PairKey", str)

PAIR_SEPARATOR = "-"

RateTable = Mapping[str, Decimal]
Graph = dict[CurrencyCode, dict[CurrencyCode, Decimal]]
Cycle = tuple[CurrencyCode, ...]


def parse_pair_key(pair_key: str) -> tuple[CurrencyCode, CurrencyCode]:
    """Split a ``FROM-TO`` key into its two currency codes."""
    parts = pair_key.split(PAIR_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise MalformedPairKey(pair_key)
    return CurrencyCode(parts[0]), CurrencyCode(parts[1])


def make_pair_key(source: str, target: str) -> PairKey:
    return PairKey(f"{source}{PAIR_SEPARATOR}{target}")


class PnLResult(BaseModel):
    """Value of an investment after replaying ``cycle`` hop by hop."""

    model_config = ConfigDict(frozen=True)

    cycle: Cycle
    value: Decimal

    @model_validator(mode="after")
    def _validate_cycle(self) -> PnLResult:
        if len(self.cycle) < 2:
            raise ValueError("PnLResult.cycle must contain at least one hop")
        return self


__all__ = [
    "PAIR_SEPARATOR",
    "CurrencyCode",
    "Cycle",
    "Graph",
    "PairKey",
    "PnLResult",
    "RateTable",
    "make_pair_key",
    "parse_pair_key",
]
