"""
Schedule Generator

Decides whether a recurring conversion fires on a simulated day. Days are
numbered from 1; weekly and monthly events fire on the first day of each
7- or 30-day period.
"""

from typing import Union

from ..core.entities import Frequency


PERIOD_DAYS = {
    Frequency.DAILY: 1,
    Frequency.WEEKLY: 7,
    Frequency.MONTHLY: 30
}


def fires(day: int, frequency: Union[Frequency, str]) -> bool:
    """Whether a conversion event fires on `day` (day >= 1)."""
    if isinstance(day, bool) or not isinstance(day, int) or day < 1:
        raise ValueError(f"Day must be a positive integer, got {day!r}")

    frequency = Frequency(frequency)
    if frequency == Frequency.ONE_TIME:
        return day == 1

    return (day - 1) % PERIOD_DAYS[frequency] == 0


def event_days(duration: int, frequency: Union[Frequency, str]) -> list[int]:
    """All days in 1..duration on which an event fires."""
    return [day for day in range(1, duration + 1) if fires(day, frequency)]
