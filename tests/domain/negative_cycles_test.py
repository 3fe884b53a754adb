from decimal import Decimal

from domain.graph import build_graph
from domain.negative_cycles import _walk_predecessors, find_negative_cycles
from tests.constants import A, B, BORG, BTC, C, DAI, EUR


def test_no_cycles_for_reciprocal_rates(balanced_rates: dict[str, Decimal]) -> None:
    graph = build_graph(balanced_rates)

    assert find_negative_cycles(graph, A) == []
    assert find_negative_cycles(graph, B) == []


def test_two_currency_arbitrage_is_reported() -> None:
    # 2 * 0.6 = 1.2 > 1
    graph = build_graph({"A-B": Decimal("2"), "B-A": Decimal("0.6")})

    cycles = find_negative_cycles(graph, A)

    assert cycles == [(A, B, A, B)]


def test_unknown_base_currency_yields_nothing() -> None:
    graph = build_graph({"A-B": Decimal("2"), "B-A": Decimal("0.6")})

    assert find_negative_cycles(graph, "XYZ") == []


def test_unreachable_cycle_is_ignored() -> None:
    graph = build_graph({"A-B": Decimal("2"), "B-A": Decimal("0.6"), "C-C": Decimal("1")})

    assert find_negative_cycles(graph, C) == []


def test_zero_tolerance_keeps_exact_comparison() -> None:
    graph = build_graph({"A-B": Decimal("2"), "B-A": Decimal("0.6")})

    assert find_negative_cycles(graph, A, tolerance=Decimal(0)) == [(A, B, A, B)]


def test_large_tolerance_suppresses_small_arbitrage() -> None:
    # ln(1.2) is about 0.18
    graph = build_graph({"A-B": Decimal("2"), "B-A": Decimal("0.6")})

    assert find_negative_cycles(graph, A, tolerance=Decimal("0.5")) == []


def test_default_rates_candidates(default_rates: dict[str, Decimal]) -> None:
    cycles = find_negative_cycles(build_graph(default_rates), EUR)

    assert len(cycles) == 8
    assert cycles[0] == (EUR, DAI, EUR, BORG, BTC)
    assert cycles[1] == (EUR, DAI, EUR, BORG, DAI)
    for cycle in cycles:
        assert set(cycle) <= {EUR, DAI, BTC, BORG}


def test_results_do_not_depend_on_rate_insertion_order(default_rates: dict[str, Decimal]) -> None:
    reversed_rates = dict(reversed(list(default_rates.items())))

    first = find_negative_cycles(build_graph(default_rates), EUR)
    second = find_negative_cycles(build_graph(reversed_rates), EUR)

    assert first == second


def test_predecessor_walk_stops_on_broken_chain() -> None:
    assert _walk_predecessors(0, 1, [None, 0]) is None


def test_predecessor_walk_closes_on_revisit() -> None:
    # 0 <- 2 <- 1 <- 0
    assert _walk_predecessors(0, 1, [2, 0, 1]) == [0, 1, 2, 0, 1]


def test_self_loop_with_open_predecessor_chain_is_reported() -> None:
    graph = build_graph({"DAI-DAI": Decimal("1.05"), "DAI-EUR": Decimal("1"), "EUR-DAI": Decimal("1")})

    assert find_negative_cycles(graph, EUR) == [(DAI, DAI)]


def test_base_self_loop_is_reported() -> None:
    graph = build_graph({"EUR-EUR": Decimal("1.01"), "DAI-EUR": Decimal("1"), "EUR-DAI": Decimal("1")})

    assert find_negative_cycles(graph, EUR) == [(EUR, EUR, DAI), (EUR, EUR, EUR)]
