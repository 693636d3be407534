"""Numeric guards shared by the calculator and the validator."""

import math


def is_finite_number(value) -> bool:
    """
    True for finite int or float values.

    bool, Decimal, strings and None are rejected so every entry point
    accepts the same inputs the float arithmetic can handle.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_positive_finite(value) -> bool:
    return is_finite_number(value) and value > 0
