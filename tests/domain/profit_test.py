from decimal import Decimal

import pytest

from domain.errors import InvalidInvestment, RateNotFound
from domain.profit import evaluate_cycle, select_best
from domain.types import PnLResult
from tests.constants import A, B, BORG, BTC, C, DAI, EUR


def test_evaluate_cycle_compounds_rates_in_order() -> None:
    rates = {"A-B": Decimal("2"), "B-C": Decimal("3"), "C-A": Decimal("0.25")}

    result = evaluate_cycle(Decimal("100"), (A, B, C, A), rates)

    assert result == Decimal("150")


def test_evaluate_cycle_matches_bundled_sample(default_rates: dict[str, Decimal]) -> None:
    result = evaluate_cycle(Decimal("100"), (EUR, BORG, DAI, BTC, EUR), default_rates)

    assert result.quantize(Decimal("0.01")) == Decimal("103.37")


@pytest.mark.parametrize("factor", [Decimal("2"), Decimal("0.5"), Decimal("10")])
def test_evaluate_cycle_is_linear_in_investment(factor: Decimal) -> None:
    rates = {"A-B": Decimal("1.25"), "B-C": Decimal("0.8"), "C-A": Decimal("1.1")}
    cycle = (A, B, C, A)
    investment = Decimal("40")

    assert evaluate_cycle(factor * investment, cycle, rates) == factor * evaluate_cycle(investment, cycle, rates)


def test_evaluate_cycle_reports_missing_hop() -> None:
    rates = {"A-B": Decimal("2"), "B-A": Decimal("0.6")}

    with pytest.raises(RateNotFound) as exc_info:
        evaluate_cycle(Decimal("100"), (A, B, C, A), rates)

    assert exc_info.value.pair_key == "B-C"


def test_evaluate_cycle_single_currency_returns_investment() -> None:
    assert evaluate_cycle(Decimal("100"), (EUR,), {}) == Decimal("100")


@pytest.mark.parametrize("investment", [Decimal("0"), Decimal("-5"), Decimal("NaN")])
def test_evaluate_cycle_rejects_invalid_investment(investment: Decimal) -> None:
    with pytest.raises(InvalidInvestment):
        evaluate_cycle(investment, (A, B, A), {"A-B": Decimal("2"), "B-A": Decimal("0.5")})


def test_select_best_picks_highest_value() -> None:
    low = PnLResult(cycle=(EUR, DAI, EUR), value=Decimal("101"))
    high = PnLResult(cycle=(EUR, BTC, EUR), value=Decimal("103"))
    mid = PnLResult(cycle=(EUR, BORG, EUR), value=Decimal("102"))

    assert select_best([low, high, mid]) is high


def test_select_best_keeps_first_on_ties() -> None:
    first = PnLResult(cycle=(EUR, DAI, EUR), value=Decimal("102.0"))
    second = PnLResult(cycle=(EUR, BTC, EUR), value=Decimal("102"))

    assert select_best([first, second]) is first


def test_select_best_empty() -> None:
    assert select_best([]) is None


def test_pnl_result_requires_a_hop() -> None:
    with pytest.raises(ValueError):
        PnLResult(cycle=(EUR,), value=Decimal("100"))
