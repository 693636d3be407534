"""
Simulation Entities

- SimulationParams: what to simulate, fixed for the lifetime of a run
- RunState: the mutable progress of one run, owned by a single runner
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.entities import Currency, DayResult, Frequency, MarketRegime, RunStatus


class SimulationParams(BaseModel):
    """
    Parameters for one simulated run.

    Balances are not checked: a simulation is a hypothetical projection.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    currency: Currency = Currency.FIAT
    points_per_event: float = Field(default=1000.0, gt=0)
    frequency: Frequency = Frequency.DAILY
    duration_days: int = Field(default=30, ge=1)
    bonus_enabled: bool = True
    regime: MarketRegime = MarketRegime.STABLE


@dataclass
class RunState:
    """Progress of a run. Discarded on reset."""
    params: SimulationParams
    current_day: int = 0
    results: list[DayResult] = field(default_factory=list)
    status: RunStatus = RunStatus.RUNNING

    @property
    def latest(self) -> Optional[DayResult]:
        return self.results[-1] if self.results else None

    @property
    def is_finished(self) -> bool:
        return self.current_day >= self.params.duration_days
