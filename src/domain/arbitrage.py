from __future__ import annotations

import logging
from decimal import Decimal

from pydantic import BaseModel

from .cycles import normalize_cycle
from .errors import InvalidInvestment
from .graph import DEFAULT_PRECISION, build_graph
from .negative_cycles import DEFAULT_TOLERANCE, find_negative_cycles
from .profit import evaluate_cycle, select_best
from .types import PnLResult, RateTable

logger = logging.getLogger(__name__)


class ScanResult(BaseModel):
    base_currency: str
    investment: Decimal
    candidates: list[PnLResult]
    best: PnLResult | None

    @property
    def found(self) -> bool:
        return self.best is not None


class ArbitrageScanner:
    """Find the most profitable conversion cycle through one base currency."""

    def __init__(
        self,
        *,
        base_currency: str,
        investment: Decimal,
        precision: int = DEFAULT_PRECISION,
        tolerance: Decimal = DEFAULT_TOLERANCE,
    ) -> None:
        if not base_currency:
            msg = "base_currency must be provided"
            raise ValueError(msg)
        if not isinstance(investment, Decimal) or not investment.is_finite() or investment <= 0:
            raise InvalidInvestment(investment)

        self.base_currency = base_currency
        self.investment = investment
        self.precision = precision
        self.tolerance = tolerance

    def scan(self, rates: RateTable) -> ScanResult:
        """Run the whole pipeline over one rate snapshot; the snapshot is not modified."""
        graph = build_graph(rates, precision=self.precision)
        cycles = find_negative_cycles(
            graph,
            self.base_currency,
            tolerance=self.tolerance,
            precision=self.precision,
        )
        if not cycles:
            logger.info("No arbitrage found from %s", self.base_currency)
            return ScanResult(base_currency=self.base_currency, investment=self.investment, candidates=[], best=None)

        logger.info("Possible arbitrages: %d", len(cycles))
        candidates: list[PnLResult] = []
        for position, raw_cycle in enumerate(cycles):
            cycle = normalize_cycle(raw_cycle, self.base_currency, rates)
            if len(cycle) < 2:
                logger.debug("Skipping candidate %d without any hop: %s", position, raw_cycle)
                continue
            value = evaluate_cycle(self.investment, cycle, rates, precision=self.precision)
            logger.info("%d, path: %s, result: %s", position, " -> ".join(cycle), value)
            candidates.append(PnLResult(cycle=cycle, value=value))

        return ScanResult(
            base_currency=self.base_currency,
            investment=self.investment,
            candidates=candidates,
            best=select_best(candidates),
        )


__all__ = ["ArbitrageScanner", "ScanResult"]
