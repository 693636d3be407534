from __future__ import annotations

import pytest

from points_engine.config import DEFAULT_RATES, Settings
from points_engine.conversion import RateTable, RateTableEntry
from points_engine.core.entities import Currency
from points_engine.simulation import MarketModel, SimulationRunner


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def rate_table() -> RateTable:
    return RateTable(DEFAULT_RATES)


@pytest.fixture()
def fiat_entry(rate_table: RateTable) -> RateTableEntry:
    return rate_table.lookup(Currency.FIAT)


@pytest.fixture()
def runner(rate_table: RateTable) -> SimulationRunner:
    return SimulationRunner(rate_table, market=MarketModel(seed=7))
