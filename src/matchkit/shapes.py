"""Value classification shared by the equality and collection logic."""

from __future__ import annotations

import array
import dataclasses
import numbers
import re
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any

import numpy as np


class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class Shape(str, Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    SET_LIKE = "set_like"
    BUFFER_LIKE = "buffer_like"
    RECORD = "record"
    PATTERN = "pattern"
    CUSTOM = "custom"


_BUFFER_TYPES = (bytearray, array.array, memoryview, np.ndarray)


def is_scalar(value: Any) -> bool:
    return (
        value is None
        or value is UNDEFINED
        or isinstance(value, (bool, numbers.Number, str, bytes))
    )


def _overrides_eq(value: Any) -> bool:
    return type(value).__eq__ is not object.__eq__


def classify(value: Any) -> Shape:
    """Return the shape tag that drives comparison and iteration of *value*.

    The checks run in a fixed order: strings and bytes are scalars even though
    they are sequences, buffers are recognised before generic sequences,
    dataclass instances are records whatever their ``__eq__``, and any other
    user type only counts as an attribute record when it keeps the default
    ``__eq__``.
    """
    if is_scalar(value):
        return Shape.SCALAR
    if isinstance(value, re.Pattern):
        return Shape.PATTERN
    if isinstance(value, Mapping):
        return Shape.RECORD
    if isinstance(value, Set):
        return Shape.SET_LIKE
    if isinstance(value, _BUFFER_TYPES):
        return Shape.BUFFER_LIKE
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return Shape.RECORD
    if _overrides_eq(value):
        return Shape.CUSTOM
    if hasattr(value, "__dict__") and not callable(value):
        return Shape.RECORD
    return Shape.CUSTOM
