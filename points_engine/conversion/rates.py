"""
Rate Table

Static per-currency conversion parameters. The table is built once at
startup from configuration and is read-only afterwards. Entry invariants
are checked at load time so the calculator never has to re-check them.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.entities import Currency
from ..core.errors import RateTableConfigError, UnknownCurrency


class RateTableEntry(BaseModel):
    """Conversion parameters for one target currency."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    currency: Currency
    base_rate: float = Field(gt=0, description="Points required per one unit of target currency")
    fee_percent: float = Field(default=0.0, ge=0, lt=100)
    bonus_threshold: float = Field(
        default=0.0,
        ge=0,
        description="Minimum gross output (target-currency units) before a bonus applies"
    )
    bonus_percent: float = Field(default=0.0, ge=0)
    min_points: float = Field(default=0.0, ge=0)
    max_points: Optional[float] = Field(default=None, gt=0)

    # Display metadata
    name: str = ""
    symbol: str = ""
    processing_time: str = ""

    @model_validator(mode="after")
    def _check_bounds(self) -> "RateTableEntry":
        if self.max_points is not None and self.min_points > self.max_points:
            raise ValueError(
                f"min_points ({self.min_points}) exceeds max_points ({self.max_points})"
            )
        return self

    @property
    def display_symbol(self) -> str:
        return self.symbol or self.currency.value.upper()


EntryLike = Union[RateTableEntry, Mapping[str, Any]]


class RateTable:
    """
    Lookup of conversion parameters by currency.

    Every Currency must have exactly one entry.
    """

    def __init__(self, entries: Iterable[EntryLike]):
        self._entries: dict[Currency, RateTableEntry] = {}

        for raw in entries:
            entry = self._coerce(raw)
            if entry.currency in self._entries:
                raise RateTableConfigError(
                    f"Duplicate rate table entry for {entry.currency.value}"
                )
            self._entries[entry.currency] = entry

        missing = [c.value for c in Currency if c not in self._entries]
        if missing:
            raise RateTableConfigError(
                f"Rate table is missing entries for: {', '.join(missing)}"
            )

    @staticmethod
    def _coerce(raw: EntryLike) -> RateTableEntry:
        if isinstance(raw, RateTableEntry):
            return raw
        if not isinstance(raw, Mapping):
            raise RateTableConfigError(f"Rate table entry must be a mapping, got {raw!r}")
        try:
            return RateTableEntry.model_validate(dict(raw))
        except ValidationError as e:
            raise RateTableConfigError(f"Invalid rate table entry {dict(raw)!r}: {e}") from e

    def lookup(self, currency: Union[Currency, str]) -> RateTableEntry:
        """Get the entry for a currency."""
        try:
            key = Currency(currency)
        except ValueError:
            raise UnknownCurrency(currency) from None

        entry = self._entries.get(key)
        if entry is None:
            raise UnknownCurrency(currency)
        return entry

    def currencies(self) -> list[Currency]:
        return list(self._entries)

    def entries(self) -> list[RateTableEntry]:
        return list(self._entries.values())

    def __contains__(self, currency: object) -> bool:
        try:
            return Currency(currency) in self._entries
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._entries)
