"""
Conversion Service

The interactive single-conversion path: quote a points amount against the
rate table at today's rate (multiplier 1.0), and commit it only when the
request passes validation.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..core.entities import ConversionResult, Currency
from ..core.errors import ConversionRejected
from ..core.logging import get_logger
from .calculator import convert
from .rates import RateTable, RateTableEntry
from .validator import ConversionValidator, RejectionReason, ValidationResult


logger = get_logger(__name__)

SPOT_MULTIPLIER = 1.0


@dataclass(frozen=True)
class ConversionQuote:
    """A validation verdict plus the projected conversion, if computable."""
    entry: RateTableEntry
    validation: ValidationResult
    result: Optional[ConversionResult] = None

    @property
    def is_valid(self) -> bool:
        return self.validation.ok


class ConversionService:
    """
    One-off conversions.

    A quote is computed whenever the amount is a usable positive number, so
    callers can show the projected value next to a validation message.
    """

    def __init__(self, rate_table: RateTable, bonus_enabled: bool = True):
        self.rate_table = rate_table
        self.validator = ConversionValidator(rate_table)
        self.bonus_enabled = bonus_enabled

    def options(self) -> list[RateTableEntry]:
        """Available conversion targets."""
        return self.rate_table.entries()

    def quote(
        self,
        points: float,
        currency: Union[Currency, str],
        available_balance: float
    ) -> ConversionQuote:
        entry = self.rate_table.lookup(currency)
        validation = self.validator.validate(points, entry.currency, available_balance)

        result = None
        if validation.reason is not RejectionReason.INVALID_AMOUNT:
            result = convert(points, entry, SPOT_MULTIPLIER, self.bonus_enabled)

        return ConversionQuote(entry=entry, validation=validation, result=result)

    def convert(
        self,
        points: float,
        currency: Union[Currency, str],
        available_balance: float
    ) -> ConversionQuote:
        """Quote and accept a conversion; raises ConversionRejected when invalid."""
        quote = self.quote(points, currency, available_balance)
        if not quote.is_valid:
            raise ConversionRejected(quote.validation.reason, quote.validation.message)

        logger.info(
            "Converted %s points to %.4f %s",
            points, quote.result.net, quote.entry.display_symbol
        )
        return quote
