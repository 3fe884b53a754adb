"""Arbitrage detection core.

Rates are turned into a ``-ln(rate)`` weighted graph, negative cycles are found
with Bellman-Ford from one base currency, and each candidate is replayed against
the raw rates with ``Decimal`` arithmetic. Nothing here performs I/O.
"""

__all__ = [
    "arbitrage",
    "cycles",
    "errors",
    "graph",
    "negative_cycles",
    "profit",
    "rates",
    "types",
]
