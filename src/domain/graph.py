from __future__ import annotations

from decimal import Decimal, DecimalException, localcontext

from .errors import ArithmeticConversionError
from .rates import validate_rate
from .types import CurrencyCode, Graph, RateTable, parse_pair_key

DEFAULT_PRECISION = 50


def build_graph(rates: RateTable, *, precision: int = DEFAULT_PRECISION) -> Graph:
    """Turn a rate table into a log-weighted conversion graph.

    Each ``FROM-TO`` entry becomes the edge ``FROM -> TO`` with weight ``-ln(rate)``,
    so a cycle whose compounded rate exceeds 1 has a negative weight sum.
    Currencies that only appear as a conversion target are still vertices.
    Vertices and neighbours are ordered by currency code.
    """
    edges: dict[CurrencyCode, dict[CurrencyCode, Decimal]] = {}
    for pair_key in sorted(rates):
        source, target = parse_pair_key(pair_key)
        rate = validate_rate(pair_key, rates[pair_key])
        edges.setdefault(source, {})[target] = edge_weight(pair_key, rate, precision=precision)
        edges.setdefault(target, {})

    return {vertex: dict(sorted(neighbours.items())) for vertex, neighbours in sorted(edges.items())}


def edge_weight(pair_key: str, rate: Decimal, *, precision: int = DEFAULT_PRECISION) -> Decimal:
    # The rate must fit the working precision exactly, otherwise ln() would see a rounded input.
    if len(rate.as_tuple().digits) > precision:
        raise ArithmeticConversionError(pair_key, rate, precision=precision)
    try:
        with localcontext() as ctx:
            ctx.prec = precision
            return -rate.ln()
    except (DecimalException, ValueError) as exc:
        raise ArithmeticConversionError(pair_key, rate, precision=precision) from exc


__all__ = ["DEFAULT_PRECISION", "build_graph", "edge_weight"]
