from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Iterable, Sequence

from .errors import InvalidInvestment, RateNotFound
from .graph import DEFAULT_PRECISION
from .types import PnLResult, RateTable, make_pair_key


def evaluate_cycle(
    investment: Decimal,
    cycle: Sequence[str],
    rates: RateTable,
    *,
    precision: int = DEFAULT_PRECISION,
) -> Decimal:
    """Compound ``investment`` through every hop of ``cycle`` using the raw rates."""
    if not isinstance(investment, Decimal) or not investment.is_finite() or investment <= 0:
        raise InvalidInvestment(investment)

    result = investment
    with localcontext() as ctx:
        ctx.prec = precision
        for source, target in zip(cycle, cycle[1:]):
            pair_key = make_pair_key(source, target)
            try:
                rate = rates[pair_key]
            except KeyError as exc:
                raise RateNotFound(pair_key) from exc
            result *= rate
    return result


def select_best(results: Iterable[PnLResult]) -> PnLResult | None:
    """Highest value wins; the earliest candidate is kept on ties."""
    best: PnLResult | None = None
    for result in results:
        if best is None or result.value > best.value:
            best = result
    return best


__all__ = ["evaluate_cycle", "select_best"]
