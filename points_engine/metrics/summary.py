"""
Simulation Summary

Headline figures for a run: totals, event count, average market rate and
total return against converting the same points at the base rate with no
fees or bonus.
"""

from dataclasses import dataclass
from typing import Sequence
import statistics

from ..conversion.rates import RateTableEntry
from ..core.entities import DayResult


@dataclass(frozen=True)
class SimulationSummary:
    """Aggregate view of a run's DayResults."""
    events: int = 0
    total_input: float = 0.0
    total_output: float = 0.0
    total_fees: float = 0.0
    total_bonus: float = 0.0
    average_market_rate: float = 0.0
    total_return_percent: float = 0.0

    @property
    def effective_points_per_unit(self) -> float:
        """Points spent per unit of net output received."""
        if self.total_output == 0:
            return 0.0
        return self.total_input / self.total_output


def summarize(results: Sequence[DayResult], entry: RateTableEntry) -> SimulationSummary:
    """Summarize a run against the entry's base rate."""
    if not results:
        return SimulationSummary()

    final = results[-1]
    baseline_output = final.cumulative_input / entry.base_rate

    return SimulationSummary(
        events=len(results),
        total_input=final.cumulative_input,
        total_output=final.cumulative_output,
        total_fees=final.cumulative_fees,
        total_bonus=final.cumulative_bonus,
        average_market_rate=statistics.mean(r.market_rate for r in results),
        total_return_percent=(final.cumulative_output - baseline_output) / baseline_output * 100
    )


def recent(results: Sequence[DayResult], n: int = 10) -> list[DayResult]:
    """The last `n` results, oldest first."""
    if n <= 0:
        return []
    return list(results[-n:])
