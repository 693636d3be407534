"""
Conversion Validator

Pre-flight checks for a single real conversion request. The simulator does
not use this: simulated runs are hypothetical and ignore balances.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..core.entities import Currency
from ..core.logging import get_logger
from ..core.numbers import is_positive_finite
from .rates import RateTable


logger = get_logger(__name__)


class RejectionReason(str, Enum):
    """Why a conversion request was rejected."""
    INVALID_AMOUNT = "invalid_amount"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"
    INSUFFICIENT_BALANCE = "insufficient_balance"


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one conversion request."""
    ok: bool
    reason: Optional[RejectionReason] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def accepted(cls) -> "ValidationResult":
        return cls(ok=True, message="Conversion amount is valid")

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> "ValidationResult":
        return cls(ok=False, reason=reason, message=message)


class ConversionValidator:
    """
    Checks a request against rate table bounds and the caller's balance.

    Checks run in order and stop at the first failure:
    1. amount is a finite positive number
    2. amount meets the currency minimum
    3. amount does not exceed the currency maximum (when one is set)
    4. amount does not exceed the available balance
    """

    def __init__(self, rate_table: RateTable):
        self.rate_table = rate_table

    def validate(
        self,
        points: float,
        currency: Union[Currency, str],
        available_balance: float
    ) -> ValidationResult:
        """Validate a conversion request. Raises UnknownCurrency for unconfigured currencies."""
        entry = self.rate_table.lookup(currency)
        result = self._check(points, entry, available_balance)

        if not result.ok:
            logger.info(
                "Rejected conversion of %r points to %s: %s",
                points, entry.currency.value, result.reason.value
            )
        return result

    def _check(self, points, entry, available_balance) -> ValidationResult:
        if not is_positive_finite(points):
            return ValidationResult.rejected(
                RejectionReason.INVALID_AMOUNT,
                "Please enter a valid number"
            )

        if points < entry.min_points:
            return ValidationResult.rejected(
                RejectionReason.BELOW_MINIMUM,
                f"Minimum {entry.min_points:g} points required"
            )

        if entry.max_points is not None and points > entry.max_points:
            return ValidationResult.rejected(
                RejectionReason.ABOVE_MAXIMUM,
                f"Maximum {entry.max_points:g} points allowed"
            )

        if points > available_balance:
            return ValidationResult.rejected(
                RejectionReason.INSUFFICIENT_BALANCE,
                "Insufficient points balance"
            )

        return ValidationResult.accepted()
