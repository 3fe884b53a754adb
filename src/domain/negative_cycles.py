from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from .graph import DEFAULT_PRECISION
from .types import CurrencyCode, Cycle, Graph

logger = logging.getLogger(__name__)

# Rounding slack for correctly-rounded logarithms: ln(a) + ln(b) and ln(a * b)
# may differ in the last digit even when the rates multiply to exactly 1.
DEFAULT_TOLERANCE = Decimal("1e-20")

_INFINITY = Decimal("Infinity")

_Edge = tuple[int, int, Decimal]


def find_negative_cycles(
    graph: Graph,
    base_currency: str,
    *,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    precision: int = DEFAULT_PRECISION,
) -> list[Cycle]:
    """Bellman-Ford from ``base_currency``, returning one candidate cycle per edge that still relaxes.

    Candidates start at the vertex where the predecessor walk closed, not at the base
    currency, and may repeat each other when several edges sit on the same cycle.
    """
    vertices = sorted(set(graph) | {target for neighbours in graph.values() for target in neighbours})
    if base_currency not in vertices:
        logger.debug("Base currency %s is not part of the rate graph", base_currency)
        return []

    index = {vertex: position for position, vertex in enumerate(vertices)}
    edges: list[_Edge] = [
        (index[source], index[target], weight)
        for source in vertices
        for target, weight in sorted(graph.get(source, {}).items())
    ]

    distances = [_INFINITY] * len(vertices)
    predecessors: list[int | None] = [None] * len(vertices)
    distances[index[base_currency]] = Decimal(0)

    with localcontext() as ctx:
        ctx.prec = precision

        for _ in range(len(vertices) - 1):
            changed = False
            for source, target, weight in edges:
                if _relaxes(distances, source, target, weight, tolerance):
                    distances[target] = distances[source] + weight
                    predecessors[target] = source
                    changed = True
            if not changed:
                break

        cycles: list[Cycle] = []
        for source, target, weight in edges:
            if not _relaxes(distances, source, target, weight, tolerance):
                continue
            walk = _walk_predecessors(source, target, predecessors)
            if walk is None and source == target:
                # A relaxable self-loop is a cycle by itself even when its predecessor chain is open.
                walk = [source, target]
            if walk is None:
                logger.debug(
                    "Predecessor walk for edge %s-%s did not close, skipping",
                    vertices[source],
                    vertices[target],
                )
                continue
            cycles.append(tuple(CurrencyCode(vertices[position]) for position in walk))

    logger.debug("Found %d negative cycle candidates from %s", len(cycles), base_currency)
    return cycles


def _relaxes(distances: list[Decimal], source: int, target: int, weight: Decimal, tolerance: Decimal) -> bool:
    if distances[source].is_infinite():
        return False
    return distances[source] + weight < distances[target] - tolerance


def _walk_predecessors(source: int, target: int, predecessors: list[int | None]) -> list[int] | None:
    """Follow predecessor links from ``source`` until a vertex repeats.

    Returns the walk reversed (closing vertex first, ``target`` last), or ``None`` when
    the chain breaks or fails to repeat within ``len(predecessors)`` steps.
    """
    walk = [target]
    visited = [False] * len(predecessors)
    current = source
    for _ in range(len(predecessors) + 1):
        if visited[current]:
            walk.append(current)
            walk.reverse()
            return walk
        visited[current] = True
        walk.append(current)
        parent = predecessors[current]
        if parent is None:
            return None
        current = parent
    return None


__all__ = ["DEFAULT_TOLERANCE", "find_negative_cycles"]
