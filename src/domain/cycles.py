from __future__ import annotations

from typing import Sequence

from .types import CurrencyCode, Cycle, RateTable, make_pair_key


def normalize_cycle(cycle: Sequence[str], base_currency: str, rates: RateTable | None = None) -> Cycle:
    """Pin ``cycle`` to start and end at ``base_currency``.

    Adjacent repeats that do not change the amount held are collapsed afterwards,
    so normalizing twice is a no-op.
    """
    adjusted = [CurrencyCode(code) for code in cycle]
    if not adjusted or adjusted[0] != base_currency:
        adjusted.insert(0, CurrencyCode(base_currency))
    if adjusted[-1] != base_currency:
        adjusted.append(CurrencyCode(base_currency))
    return remove_consecutive_duplicates(adjusted, rates)


def remove_consecutive_duplicates(cycle: Sequence[CurrencyCode], rates: RateTable | None = None) -> Cycle:
    """Drop ``X -> X`` hops that are unquoted or quoted at exactly 1.

    Without ``rates`` every repeated hop counts as neutral.
    """
    collapsed: list[CurrencyCode] = []
    for code in cycle:
        if collapsed and collapsed[-1] == code and _is_neutral_hop(code, rates):
            continue
        collapsed.append(code)
    return tuple(collapsed)


def _is_neutral_hop(code: CurrencyCode, rates: RateTable | None) -> bool:
    if rates is None:
        return True
    rate = rates.get(make_pair_key(code, code))
    return rate is None or rate == 1


__all__ = ["normalize_cycle", "remove_consecutive_duplicates"]
