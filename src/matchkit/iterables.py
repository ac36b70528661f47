"""Turn container-like values into something the containment scan can walk."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from matchkit.errors import NotIterableError
from matchkit.shapes import Shape, classify


def to_iterable(value: Any, matcher_name: str = "to_iterable") -> Iterable[Any]:
    """Return an iterable over the elements of *value*.

    Strings yield characters and bytes yield ints. A one-shot iterator is
    returned as-is: it is consumed by a single scan, and a later scan over the
    same exhausted iterator sees an empty container.

    Raises:
        NotIterableError: for ``None``, ``UNDEFINED``, non-string scalars,
            mappings, and objects without the iteration protocol.
    """
    shape = classify(value)
    if shape is Shape.SCALAR:
        if isinstance(value, (str, bytes)):
            return value
    elif shape in (Shape.SEQUENCE, Shape.SET_LIKE):
        return value
    elif shape is Shape.BUFFER_LIKE:
        if isinstance(value, memoryview):
            return value.tolist()
        if isinstance(value, np.ndarray) and value.ndim == 0:
            raise NotIterableError(matcher_name, "received value is a zero-dimensional array")
        return value
    elif shape is not Shape.PATTERN and not isinstance(value, Mapping):
        if isinstance(value, Iterable):
            return value

    raise NotIterableError(
        matcher_name,
        "received value must be a sequence, str, set, buffer or iterable, "
        f"got {type(value).__name__}: {value!r}",
    )
