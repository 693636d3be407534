"""
Conversion Simulation

Projects recurring points conversions over a simulated horizon:

- Market model: day-indexed exchange-rate multipliers per regime
- Schedule: which days a recurring conversion fires
- Runner: idle/running/paused/complete state machine, one day per tick
- Driver: asyncio ticking at slow, medium or fast cadence
"""

from .entities import SimulationParams, RunState
from .market import MarketModel
from .schedule import fires, event_days
from .runner import SimulationRunner
from .driver import SimulationDriver, SimulationSpeed

__all__ = [
    "SimulationParams",
    "RunState",
    "MarketModel",
    "fires",
    "event_days",
    "SimulationRunner",
    "SimulationDriver",
    "SimulationSpeed"
]
