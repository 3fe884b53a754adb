from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from domain.arbitrage import ScanResult


def format_decimal(value: Decimal) -> str:
    quantized = value.normalize()
    # Avoid scientific notation for integers.
    if quantized == quantized.to_integral():
        return f"{quantized:.0f}"
    return format(quantized, "f")


def format_cycle(cycle: Sequence[str]) -> str:
    return " -> ".join(cycle)


def render_scan_result(result: ScanResult) -> str:
    if result.best is None:
        return "No arbitrage found"
    return (
        f"Initial investment: {format_decimal(result.investment)} {result.base_currency}, "
        f"Arbitrage: {format_cycle(result.best.cycle)}, "
        f"PnL: {format_decimal(result.best.value)}"
    )


__all__ = ["format_cycle", "format_decimal", "render_scan_result"]
