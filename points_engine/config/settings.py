"""
Settings Management with Pydantic

Provides type-safe configuration for:
- The rate table (one entry per target currency)
- Market model seeding and clamping
- Simulator limits and defaults
"""

from functools import lru_cache
from typing import Any, Dict, List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..conversion.rates import RateTable, RateTableEntry
from ..simulation.driver import SimulationSpeed


DEFAULT_RATES: List[Dict[str, Any]] = [
    {
        "currency": "fiat",
        "name": "US Dollar",
        "symbol": "USD",
        "base_rate": 100,  # 100 points = $1
        "fee_percent": 2.5,
        "bonus_threshold": 50,  # $50 gross
        "bonus_percent": 5,
        "min_points": 1000,
        "max_points": 50000,
        "processing_time": "1-2 business days"
    },
    {
        "currency": "token",
        "name": "Stellar Lumens",
        "symbol": "XLM",
        "base_rate": 25,  # 25 points = 1 XLM
        "fee_percent": 1.0,
        "bonus_threshold": 100,  # 100 XLM gross
        "bonus_percent": 10,
        "min_points": 500,
        "max_points": 25000,
        "processing_time": "Instant"
    },
    {
        "currency": "gift_card",
        "name": "Gift Cards",
        "symbol": "GIFT",
        "base_rate": 100,
        "fee_percent": 0,
        "bonus_threshold": 0,
        "bonus_percent": 0,
        "min_points": 1000,
        "max_points": 10000,
        "processing_time": "Instant"
    },
    {
        "currency": "voucher",
        "name": "Store Vouchers",
        "symbol": "VOUCH",
        "base_rate": 95,  # better rate than gift cards
        "fee_percent": 0,
        "bonus_threshold": 0,
        "bonus_percent": 0,
        "min_points": 500,
        "max_points": 5000,
        "processing_time": "24 hours"
    }
]


class MarketConfig(BaseSettings):
    """Market model configuration."""
    model_config = SettingsConfigDict(
        env_prefix="MARKET_",
        extra="ignore"
    )

    seed: int = 42
    min_multiplier: float = 0.5
    max_multiplier: float = 1.5


class SimulatorConfig(BaseSettings):
    """Simulation runner configuration."""
    model_config = SettingsConfigDict(
        env_prefix="SIMULATOR_",
        extra="ignore"
    )

    max_duration_days: int = Field(default=365, ge=1)
    default_speed: SimulationSpeed = SimulationSpeed.MEDIUM
    recent_window: int = Field(default=10, ge=1)


class Settings(BaseSettings):
    """Main engine settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    # Application
    app_name: str = "Points Conversion Engine"
    debug: bool = False
    log_level: str = "INFO"

    # Sub-configurations
    market: MarketConfig = Field(default_factory=MarketConfig)
    simulator: SimulatorConfig = Field(default_factory=SimulatorConfig)

    # One entry per currency, checked for completeness at load time
    rates: List[RateTableEntry] = Field(
        default_factory=lambda: [RateTableEntry(**r) for r in DEFAULT_RATES]
    )

    @model_validator(mode="after")
    def _check_rate_table(self) -> "Settings":
        RateTable(self.rates)
        return self

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            market=MarketConfig(),
            simulator=SimulatorConfig()
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
