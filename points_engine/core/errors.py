"""
Engine Errors

Every error the engine raises derives from PointsEngineError. Each also
subclasses the closest built-in so callers that only know about KeyError or
ValueError still catch them.
"""

from typing import Optional


class PointsEngineError(Exception):
    """Base class for all engine errors."""


class UnknownCurrency(PointsEngineError, KeyError):
    """The requested currency is not configured in the rate table."""

    def __init__(self, currency):
        self.currency = currency
        super().__init__(f"Unknown currency: {currency}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidMarketState(PointsEngineError, ValueError):
    """The market multiplier produced a non-positive effective rate."""

    def __init__(self, multiplier: float, day: Optional[int] = None):
        self.multiplier = multiplier
        self.day = day
        where = f" on day {day}" if day is not None else ""
        super().__init__(f"Invalid market multiplier {multiplier!r}{where}")


class InvalidAmount(PointsEngineError, ValueError):
    """A points amount that is not a finite positive number."""


class RateTableConfigError(PointsEngineError, ValueError):
    """The configured rate table violates its invariants."""


class InvalidTransition(PointsEngineError, RuntimeError):
    """A runner control call that is not legal in the current status."""


class ConversionRejected(PointsEngineError):
    """A one-off conversion failed pre-flight validation."""

    def __init__(self, reason, message: str):
        self.reason = reason
        self.message = message
        super().__init__(message)
