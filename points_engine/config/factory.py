"""
Engine Component Factory

Builds the engine's components from Settings so callers never wire rate
tables, market models and runners by hand.
"""

from ..conversion.rates import RateTable
from ..conversion.service import ConversionService
from ..core.logging import get_logger
from ..simulation.driver import SimulationDriver
from ..simulation.market import MarketModel
from ..simulation.runner import SimulationRunner
from .settings import Settings, get_settings


logger = get_logger(__name__)


def build_rate_table(settings: Settings = None) -> RateTable:
    """Build the rate table; raises RateTableConfigError on bad configuration."""
    settings = settings or get_settings()
    table = RateTable(settings.rates)
    logger.debug("Loaded rate table with %d entries", len(table))
    return table


def build_market_model(settings: Settings = None) -> MarketModel:
    settings = settings or get_settings()
    return MarketModel(
        seed=settings.market.seed,
        min_multiplier=settings.market.min_multiplier,
        max_multiplier=settings.market.max_multiplier
    )


def build_runner(settings: Settings = None, rate_table: RateTable = None) -> SimulationRunner:
    settings = settings or get_settings()
    return SimulationRunner(
        rate_table=rate_table or build_rate_table(settings),
        market=build_market_model(settings),
        max_duration_days=settings.simulator.max_duration_days
    )


def build_driver(runner: SimulationRunner, settings: Settings = None) -> SimulationDriver:
    settings = settings or get_settings()
    return SimulationDriver(runner, speed=settings.simulator.default_speed)


def build_conversion_service(
    settings: Settings = None,
    rate_table: RateTable = None,
    bonus_enabled: bool = True
) -> ConversionService:
    settings = settings or get_settings()
    return ConversionService(
        rate_table=rate_table or build_rate_table(settings),
        bonus_enabled=bonus_enabled
    )
