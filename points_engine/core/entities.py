"""
Core Conversion Entities

Value types shared by the calculator, the simulator and the presentation
collaborators that render their output.

Entities:
- Currency: target value types points can convert into
- MarketRegime: named exchange-rate drift patterns
- Frequency: recurrence of a simulated conversion event
- ConversionResult: the outcome of one conversion
- DayResult: one fired simulation event plus running totals
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class Currency(str, Enum):
    """Target value types."""
    FIAT = "fiat"
    TOKEN = "token"
    GIFT_CARD = "gift_card"
    VOUCHER = "voucher"


class MarketRegime(str, Enum):
    """
    Market conditions that govern how the simulated exchange rate
    drifts from day to day.
    """
    STABLE = "stable"
    VOLATILE = "volatile"
    BULLISH = "bullish"
    BEARISH = "bearish"


class Frequency(str, Enum):
    """How often a simulated conversion event fires."""
    ONE_TIME = "one-time"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class RunStatus(str, Enum):
    """Simulation runner lifecycle."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of converting points at a given effective rate.

    All amounts are in target-currency units.
    """
    points: float
    effective_rate: float
    gross: float
    fee: float
    bonus: float
    net: float

    @property
    def after_fees(self) -> float:
        return self.gross - self.fee


@dataclass(frozen=True)
class DayResult:
    """
    Record of one fired conversion event.

    The cumulative fields include this event: the first DayResult of a
    run carries its own values as cumulatives.
    """
    day: int
    input_points: float
    gross: float
    fee: float
    bonus: float
    market_rate: float
    net: float
    cumulative_input: float
    cumulative_output: float
    cumulative_fees: float
    cumulative_bonus: float

    @classmethod
    def from_conversion(
        cls,
        day: int,
        result: ConversionResult,
        previous: Optional["DayResult"] = None
    ) -> "DayResult":
        """Combine a conversion with the running totals of the prior event."""
        prior_input = previous.cumulative_input if previous else 0.0
        prior_output = previous.cumulative_output if previous else 0.0
        prior_fees = previous.cumulative_fees if previous else 0.0
        prior_bonus = previous.cumulative_bonus if previous else 0.0

        return cls(
            day=day,
            input_points=result.points,
            gross=result.gross,
            fee=result.fee,
            bonus=result.bonus,
            market_rate=result.effective_rate,
            net=result.net,
            cumulative_input=prior_input + result.points,
            cumulative_output=prior_output + result.net,
            cumulative_fees=prior_fees + result.fee,
            cumulative_bonus=prior_bonus + result.bonus
        )

    def to_dict(self) -> dict:
        return asdict(self)
