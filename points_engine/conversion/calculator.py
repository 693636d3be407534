"""
Conversion Calculator

The single conversion formula shared by the one-off calculator and the
multi-day simulator. The one-off path uses a market multiplier of 1.0.

    effective_rate = base_rate * multiplier
    gross          = points / effective_rate
    fee            = gross * fee_percent / 100
    bonus          = (gross - fee) * bonus_percent / 100   if eligible
    net            = gross - fee + bonus

Bonus eligibility compares gross output, in target-currency units, with the
entry's bonus threshold.
"""

from ..core.entities import ConversionResult
from ..core.errors import InvalidAmount, InvalidMarketState
from ..core.numbers import is_positive_finite
from .rates import RateTableEntry


def is_bonus_eligible(gross: float, entry: RateTableEntry, bonus_enabled: bool) -> bool:
    """Whether a conversion of `gross` output earns the entry's bonus."""
    return bonus_enabled and gross >= entry.bonus_threshold


def convert(
    points: float,
    entry: RateTableEntry,
    multiplier: float = 1.0,
    bonus_enabled: bool = True
) -> ConversionResult:
    """
    Convert points into the entry's target currency.

    Raises InvalidAmount for non-positive points and InvalidMarketState for
    a multiplier that would make the effective rate non-positive.
    """
    if not is_positive_finite(points):
        raise InvalidAmount(f"Points must be a finite positive number, got {points!r}")
    if not is_positive_finite(multiplier):
        raise InvalidMarketState(multiplier)

    effective_rate = entry.base_rate * multiplier
    gross = points / effective_rate
    fee = gross * entry.fee_percent / 100
    after_fees = gross - fee

    bonus = 0.0
    if is_bonus_eligible(gross, entry, bonus_enabled):
        bonus = after_fees * entry.bonus_percent / 100

    return ConversionResult(
        points=float(points),
        effective_rate=effective_rate,
        gross=gross,
        fee=fee,
        bonus=bonus,
        net=after_fees + bonus
    )
