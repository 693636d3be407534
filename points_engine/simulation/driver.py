"""
Simulation Driver

Steps a SimulationRunner on an asyncio event loop at one of three fixed
speed tiers. The driver only decides when to tick; what a tick computes
belongs to the runner.
"""

from enum import Enum
from typing import Callable, Optional
import asyncio

from ..core.entities import DayResult, RunStatus
from ..core.logging import get_logger
from .runner import SimulationRunner


logger = get_logger(__name__)


class SimulationSpeed(str, Enum):
    """Tick cadence tiers."""
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"

    @property
    def interval_seconds(self) -> float:
        return TICK_INTERVALS[self]


TICK_INTERVALS = {
    SimulationSpeed.SLOW: 0.5,
    SimulationSpeed.MEDIUM: 0.3,
    SimulationSpeed.FAST: 0.1
}


class SimulationDriver:
    """
    Ticks a runner until it completes or is reset.

    While the runner is paused the driver keeps waiting, so resume() picks
    up on the next interval.
    """

    def __init__(
        self,
        runner: SimulationRunner,
        speed: SimulationSpeed = SimulationSpeed.MEDIUM,
        interval_seconds: Optional[float] = None
    ):
        self.runner = runner
        self.speed = SimulationSpeed(speed)
        self._interval_override = interval_seconds

    @property
    def interval_seconds(self) -> float:
        if self._interval_override is not None:
            return self._interval_override
        return self.speed.interval_seconds

    async def run(
        self,
        on_result: Optional[Callable[[DayResult], None]] = None
    ) -> tuple[DayResult, ...]:
        """Drive the runner; `on_result` is called for every fired event."""
        logger.debug("Driving simulation at %s speed", self.speed.value)

        while self.runner.status in (RunStatus.RUNNING, RunStatus.PAUSED):
            if self.runner.status == RunStatus.RUNNING:
                result = self.runner.tick()
                if result is not None and on_result is not None:
                    on_result(result)
            await asyncio.sleep(self.interval_seconds)

        return self.runner.results
