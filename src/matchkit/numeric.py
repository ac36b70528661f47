"""Numeric ordering, closeness and NaN checks."""

from __future__ import annotations

import math
import numbers
from typing import Any

from matchkit.errors import PreconditionError

DEFAULT_PRECISION = 2


def is_real_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def ensure_number(value: Any, role: str, matcher_name: str) -> None:
    """Raise PreconditionError unless *value* is a real number (bools excluded)."""
    if not is_real_number(value):
        raise PreconditionError(
            matcher_name,
            f"{role} value must be a number, got {type(value).__name__}: {value!r}",
        )


def ensure_precision(precision: Any, matcher_name: str) -> None:
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        raise PreconditionError(
            matcher_name,
            f"precision must be a non-negative int, got {precision!r}",
        )


def greater_than(received: float, expected: float) -> bool:
    return received > expected


def greater_than_or_equal(received: float, expected: float) -> bool:
    return received >= expected


def less_than(received: float, expected: float) -> bool:
    return received < expected


def less_than_or_equal(received: float, expected: float) -> bool:
    return received <= expected


def close_to(received: float, expected: float, precision: int = DEFAULT_PRECISION) -> bool:
    """Check ``abs(expected - received) < 10 ** -precision / 2``.

    A difference exactly on the half-unit boundary is not close enough.
    Infinities are only close to the same infinity.
    """
    if math.isinf(received) or math.isinf(expected):
        return received == expected
    return abs(expected - received) < 10**-precision / 2


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
