"""
Simulation Runner

A state machine that advances a conversion simulation one day per tick:

    idle --start--> running --tick (last day)--> complete
                     |  ^
               pause |  | resume
                     v  |
                    paused

    reset: any status --> idle

The runner does not schedule itself. An external driver (a timer, an
event loop, or a plain loop in batch code) calls tick() at whatever
cadence it likes. Every tick appends at most one DayResult and runs to
completion before any control call is honoured.
"""

from threading import RLock
from typing import Optional

from ..conversion.calculator import convert
from ..conversion.rates import RateTable
from ..core.entities import DayResult, RunStatus
from ..core.errors import InvalidMarketState, InvalidTransition
from ..core.logging import get_logger
from .entities import RunState, SimulationParams
from .market import MarketModel
from .schedule import fires


logger = get_logger(__name__)

DEFAULT_MAX_DURATION_DAYS = 365


class SimulationRunner:
    """
    Owns the RunState of one simulation.

    Market multipliers and conversions are pure functions of the day index,
    so pausing and resuming yields exactly the results an uninterrupted run
    would have produced.
    """

    def __init__(
        self,
        rate_table: RateTable,
        market: MarketModel = None,
        max_duration_days: int = DEFAULT_MAX_DURATION_DAYS
    ):
        self.rate_table = rate_table
        self.market = market or MarketModel()
        self.max_duration_days = max_duration_days

        self._lock = RLock()
        self._state: Optional[RunState] = None

    # Read-only views

    @property
    def status(self) -> RunStatus:
        with self._lock:
            return self._state.status if self._state else RunStatus.IDLE

    @property
    def params(self) -> Optional[SimulationParams]:
        with self._lock:
            return self._state.params if self._state else None

    @property
    def current_day(self) -> int:
        with self._lock:
            return self._state.current_day if self._state else 0

    @property
    def results(self) -> tuple[DayResult, ...]:
        with self._lock:
            return tuple(self._state.results) if self._state else ()

    @property
    def latest(self) -> Optional[DayResult]:
        with self._lock:
            return self._state.latest if self._state else None

    @property
    def progress(self) -> float:
        """Fraction of the horizon simulated so far (0.0 to 1.0)."""
        with self._lock:
            if not self._state:
                return 0.0
            return min(self._state.current_day / self._state.params.duration_days, 1.0)

    # Control

    def start(self, params: SimulationParams) -> None:
        """Begin a new run. Only legal from idle."""
        with self._lock:
            if self.status != RunStatus.IDLE:
                raise InvalidTransition(
                    f"Cannot start a run while {self.status.value}; reset first"
                )
            if params.duration_days > self.max_duration_days:
                raise ValueError(
                    f"Duration {params.duration_days} exceeds maximum of {self.max_duration_days} days"
                )

            # Fail fast on an unconfigured currency
            self.rate_table.lookup(params.currency)

            self._state = RunState(params=params)
            logger.info(
                "Started simulation: %s points %s to %s for %d days (%s market)",
                params.points_per_event,
                params.frequency.value,
                params.currency.value,
                params.duration_days,
                params.regime.value
            )

    def tick(self) -> Optional[DayResult]:
        """
        Advance one day.

        Returns the DayResult appended on this day, or None when no event
        fired or the runner is not running.
        """
        with self._lock:
            state = self._state
            if state is None or state.status != RunStatus.RUNNING:
                return None

            day = state.current_day + 1
            result = None

            if fires(day, state.params.frequency):
                result = self._convert_day(state, day)
                state.results.append(result)
                logger.debug(
                    "Day %d: %.2f points -> %.6f net at rate %.4f",
                    day, result.input_points, result.net, result.market_rate
                )

            state.current_day = day
            if state.is_finished:
                state.status = RunStatus.COMPLETE
                logger.info(
                    "Simulation complete after %d days with %d conversions",
                    day, len(state.results)
                )

            return result

    def pause(self) -> None:
        with self._lock:
            if self.status == RunStatus.RUNNING:
                self._state.status = RunStatus.PAUSED
                logger.info("Simulation paused on day %d", self._state.current_day)

    def resume(self) -> None:
        with self._lock:
            if self.status == RunStatus.PAUSED:
                self._state.status = RunStatus.RUNNING
                logger.info("Simulation resumed on day %d", self._state.current_day)

    def reset(self) -> None:
        """Discard the current run and return to idle."""
        with self._lock:
            if self._state is not None:
                logger.info("Simulation reset at day %d", self._state.current_day)
            self._state = None

    def run_to_completion(self) -> tuple[DayResult, ...]:
        """
        Tick until the run completes.

        Intended for batch use; a paused or idle runner is returned as is.
        """
        while self.status == RunStatus.RUNNING:
            self.tick()
        return self.results

    def _convert_day(self, state: RunState, day: int) -> DayResult:
        params = state.params
        entry = self.rate_table.lookup(params.currency)
        multiplier = self.market.multiplier(day, params.regime)

        try:
            conversion = convert(
                params.points_per_event,
                entry,
                multiplier,
                params.bonus_enabled
            )
        except InvalidMarketState as e:
            logger.error("Market state invalid on day %d: multiplier %r", day, multiplier)
            raise InvalidMarketState(e.multiplier, day=day) from e

        return DayResult.from_conversion(day, conversion, state.latest)
