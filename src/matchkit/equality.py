"""Structural equality engine used by ``to_be``, ``to_equal`` and containment."""

from __future__ import annotations

import array
import dataclasses
import math
import numbers
from collections.abc import Mapping
from enum import Enum
from typing import Any

import numpy as np

from matchkit.shapes import UNDEFINED, Shape, classify, is_scalar

# (id(received_node), id(expected_node)) pairs whose comparison is in progress.
VisitedPairs = set[tuple[int, int]]


class Mode(str, Enum):
    STRICT = "strict"
    VALUE = "value"


def equals(a: Any, b: Any, mode: Mode | str = Mode.VALUE) -> bool:
    """Compare two values under *mode*.

    ``Mode.STRICT`` requires the same object for anything composite and
    ``Object.is``-style identity for scalars. ``Mode.VALUE`` walks both values
    structurally; each call owns a fresh visited-pair set so cycles terminate
    and nothing carries over to the next call.
    """
    if Mode(mode) is Mode.STRICT:
        return _identical(a, b)
    visited: VisitedPairs = set()
    return _equivalent(a, b, visited)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _same_scalar_family(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool)
    for family in (numbers.Number, str, bytes):
        if isinstance(a, family) and isinstance(b, family):
            return True
    return False


def _identical(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if not (is_scalar(a) and is_scalar(b)):
        return False
    if a is None or b is None or a is UNDEFINED or b is UNDEFINED:
        return False
    if not _same_scalar_family(a, b):
        return False
    if _is_nan(a) or _is_nan(b):
        return _is_nan(a) and _is_nan(b)
    if isinstance(a, numbers.Real) and isinstance(b, numbers.Real) and a == 0 and b == 0:
        # 0.0 and -0.0 are different values
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return bool(a == b)


def _scalar_equivalent(a: Any, b: Any) -> bool:
    if a is None or b is None or a is UNDEFINED or b is UNDEFINED:
        return a is b
    if not _same_scalar_family(a, b):
        return False
    return bool(a == b)


def _equivalent(a: Any, b: Any, visited: VisitedPairs) -> bool:
    shape = classify(a)
    if classify(b) is not shape:
        return False
    if shape is Shape.SCALAR:
        return _scalar_equivalent(a, b)
    if shape is Shape.PATTERN:
        return a.pattern == b.pattern and a.flags == b.flags
    if shape is Shape.CUSTOM:
        return bool(a == b)
    if shape is Shape.BUFFER_LIKE:
        return _buffers_equal(a, b)
    if a is b:
        return True

    pair = (id(a), id(b))
    if pair in visited:
        return True
    visited.add(pair)
    try:
        if shape is Shape.SEQUENCE:
            return _sequences_equal(a, b, visited)
        if shape is Shape.SET_LIKE:
            return _sets_equal(a, b, visited)
        return _records_equal(a, b, visited)
    finally:
        visited.discard(pair)


def _sequences_equal(a: Any, b: Any, visited: VisitedPairs) -> bool:
    if type(a) is not type(b) or len(a) != len(b):
        return False
    return all(_equivalent(x, y, visited) for x, y in zip(a, b))


def _sets_equal(a: Any, b: Any, visited: VisitedPairs) -> bool:
    if len(a) != len(b):
        return False
    remaining = list(b)
    for item in a:
        for index, candidate in enumerate(remaining):
            if _equivalent(item, candidate, visited):
                del remaining[index]
                break
        else:
            return False
    return True


def _mappings_equal(a: Mapping, b: Mapping, visited: VisitedPairs) -> bool:
    if a.keys() != b.keys():
        return False
    # hash lookup pairs True with 1; the stored keys must also be equivalent
    b_keys = {key: key for key in b}
    return all(
        _same_key(key, b_keys[key], visited) and _equivalent(a[key], b[key], visited)
        for key in a
    )


def _same_key(a: Any, b: Any, visited: VisitedPairs) -> bool:
    return a is b or _equivalent(a, b, visited)


def _fields(record: Any) -> dict[str, Any]:
    return {
        f.name: getattr(record, f.name) for f in dataclasses.fields(record) if f.compare
    }


def _records_equal(a: Any, b: Any, visited: VisitedPairs) -> bool:
    a_is_mapping = isinstance(a, Mapping)
    if a_is_mapping != isinstance(b, Mapping):
        return False
    if a_is_mapping:
        return _mappings_equal(a, b, visited)
    if type(a) is not type(b):
        return False
    if dataclasses.is_dataclass(a):
        return _mappings_equal(_fields(a), _fields(b), visited)
    return _mappings_equal(vars(a), vars(b), visited)


def _buffers_equal(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, np.ndarray):
        return a.dtype == b.dtype and a.shape == b.shape and bool(np.array_equal(a, b))
    if isinstance(a, array.array):
        return a.typecode == b.typecode and a == b
    if isinstance(a, memoryview):
        return a.format == b.format and a.shape == b.shape and a.tolist() == b.tolist()
    return bool(a == b)
