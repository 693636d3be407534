from __future__ import annotations

import math
from decimal import Decimal

import pytest

from points_engine.conversion import ConversionValidator, RateTable, convert
from points_engine.core.entities import Currency
from points_engine.core.errors import InvalidAmount
from points_engine.core.numbers import is_finite_number, is_positive_finite


@pytest.mark.parametrize("value", [1, 0.5, 6000, -3, 0, 1e300])
def test_finite_numbers(value) -> None:
    assert is_finite_number(value)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, True, None, "1", Decimal("1")])
def test_non_numbers_are_rejected(value) -> None:
    assert not is_finite_number(value)


@pytest.mark.parametrize("value,expected", [(1, True), (0.01, True), (0, False), (-1, False)])
def test_positive_finite(value, expected: bool) -> None:
    assert is_positive_finite(value) is expected


@pytest.mark.parametrize("points", [Decimal("6000"), math.nan, "6000", False])
def test_calculator_and_validator_agree_on_invalid_amounts(
    rate_table: RateTable, points
) -> None:
    result = ConversionValidator(rate_table).validate(points, Currency.FIAT, 10_000)
    assert not result.ok

    with pytest.raises(InvalidAmount):
        convert(points, rate_table.lookup(Currency.FIAT))
