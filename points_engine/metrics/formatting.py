"""Display formatting for points and target-currency amounts."""

from typing import Union

from ..conversion.rates import RateTableEntry
from ..core.entities import Currency


POINTS = "points"


def format_amount(amount: float, unit: Union[RateTableEntry, str]) -> str:
    """
    Format an amount for display.

    `unit` is either POINTS or the rate table entry the amount is denominated
    in. Points render with thousands separators, fiat as dollars, and other
    currencies with four decimals and the entry's display symbol.
    """
    if isinstance(unit, RateTableEntry):
        if unit.currency == Currency.FIAT:
            return f"${amount:,.2f}"
        return f"{amount:.4f} {unit.display_symbol}"

    if unit == POINTS:
        return f"{amount:,.0f} PTS"

    raise TypeError(f"Expected a RateTableEntry or {POINTS!r}, got {unit!r}")


def format_percent(value: float) -> str:
    """Signed percentage, e.g. +2.50% or -1.20%."""
    return f"{value:+.2f}%"
