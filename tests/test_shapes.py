"""Tests for value classification."""

import array
import datetime
import re
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal

import numpy as np
import pytest

from matchkit.shapes import UNDEFINED, Shape, classify


class Plain:
    def __init__(self, x):
        self.x = x


@dataclass
class Point:
    x: int
    y: int


def _gen():
    yield 1


@pytest.mark.parametrize(
    "value",
    [None, UNDEFINED, True, 0, 1.5, float("nan"), 2j, Decimal("1.1"), "abc", b"abc"],
)
def test_scalars(value):
    assert classify(value) is Shape.SCALAR


@pytest.mark.parametrize(
    "value, shape",
    [
        ([1, 2], Shape.SEQUENCE),
        ((1, 2), Shape.SEQUENCE),
        (range(3), Shape.SEQUENCE),
        ({"a": 1}, Shape.RECORD),
        (OrderedDict(a=1), Shape.RECORD),
        (Plain(1), Shape.RECORD),
        ({1, 2}, Shape.SET_LIKE),
        (frozenset(), Shape.SET_LIKE),
        (bytearray(b"ab"), Shape.BUFFER_LIKE),
        (array.array("b", [0, 1]), Shape.BUFFER_LIKE),
        (memoryview(b"ab"), Shape.BUFFER_LIKE),
        (np.array([1, 2], dtype=np.int8), Shape.BUFFER_LIKE),
        (re.compile("a", re.I), Shape.PATTERN),
        (Point(1, 2), Shape.RECORD),
        (Point, Shape.CUSTOM),
        (datetime.date(2020, 1, 1), Shape.CUSTOM),
        (_gen(), Shape.CUSTOM),
        (len, Shape.CUSTOM),
        (Plain, Shape.CUSTOM),
        (object(), Shape.CUSTOM),
    ],
)
def test_composites(value, shape):
    assert classify(value) is shape


def test_undefined_is_singleton_and_falsy():
    assert type(UNDEFINED)() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "undefined"
    assert UNDEFINED is not None
