"""
Configuration Management

Centralized configuration for:
- Rate table entries per target currency
- Market model seed and multiplier band
- Simulator limits and default speed
"""

from .settings import (
    Settings,
    MarketConfig,
    SimulatorConfig,
    DEFAULT_RATES,
    get_settings
)
from .factory import (
    build_rate_table,
    build_market_model,
    build_runner,
    build_driver,
    build_conversion_service
)

__all__ = [
    "Settings",
    "MarketConfig",
    "SimulatorConfig",
    "DEFAULT_RATES",
    "get_settings",
    "build_rate_table",
    "build_market_model",
    "build_runner",
    "build_driver",
    "build_conversion_service"
]
