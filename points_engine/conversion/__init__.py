"""
Conversion Layer

- Rate table: per-currency conversion parameters, validated at load
- Calculator: the conversion formula shared with the simulator
- Validator: pre-flight checks for one-off conversions
- Service: quote and commit one-off conversions
"""

from .rates import RateTable, RateTableEntry
from .calculator import convert, is_bonus_eligible
from .validator import ConversionValidator, RejectionReason, ValidationResult
from .service import ConversionService, ConversionQuote

__all__ = [
    "RateTable",
    "RateTableEntry",
    "convert",
    "is_bonus_eligible",
    "ConversionValidator",
    "RejectionReason",
    "ValidationResult",
    "ConversionService",
    "ConversionQuote"
]
