from decimal import Decimal
from typing import Generator

import pytest

from config import config
from domain.arbitrage import ArbitrageScanner
from services.default_rates import default_rate_table
from tests.constants import EUR


@pytest.fixture(autouse=True)
def _reset_config_cache() -> Generator[None, None, None]:
    config.cache_clear()
    yield
    config.cache_clear()


@pytest.fixture(scope="function")
def default_rates() -> dict[str, Decimal]:
    return default_rate_table()


@pytest.fixture(scope="function")
def balanced_rates() -> dict[str, Decimal]:
    """Every rate is the exact reciprocal of its reverse pair."""
    return {
        "A-A": Decimal("1"),
        "A-B": Decimal("2"),
        "A-C": Decimal("8"),
        "B-A": Decimal("0.5"),
        "B-B": Decimal("1"),
        "B-C": Decimal("4"),
        "C-A": Decimal("0.125"),
        "C-B": Decimal("0.25"),
        "C-C": Decimal("1"),
    }


@pytest.fixture(scope="function")
def scanner() -> ArbitrageScanner:
    return ArbitrageScanner(base_currency=EUR, investment=Decimal("100"))
