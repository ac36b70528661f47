"""Tests for the collection normalizer and containment search."""

import array
import re

import numpy as np
import pytest

from matchkit.containment import contains
from matchkit.errors import NotIterableError, PreconditionError
from matchkit.iterables import to_iterable
from matchkit.shapes import UNDEFINED


class Countdown:
    def __init__(self, start):
        self.start = start

    def __iter__(self):
        n = self.start
        while n > 0:
            yield n
            n -= 1


def _numbers():
    yield 1
    yield 2
    yield 3


# --- to_iterable ---


def test_to_iterable_accepts_containers():
    assert list(to_iterable([1, 2])) == [1, 2]
    assert list(to_iterable("ab")) == ["a", "b"]
    assert list(to_iterable(b"ab")) == [97, 98]
    assert sorted(to_iterable({3, 1})) == [1, 3]
    assert list(to_iterable(bytearray(b"a"))) == [97]
    assert list(to_iterable(array.array("b", [0, 1]))) == [0, 1]
    assert list(to_iterable(memoryview(b"ab"))) == [97, 98]
    assert list(to_iterable(np.array([0, 1], dtype=np.int8))) == [0, 1]
    assert list(to_iterable(_numbers())) == [1, 2, 3]
    assert list(to_iterable(Countdown(2))) == [2, 1]


@pytest.mark.parametrize(
    "value",
    [None, UNDEFINED, 1, 1.5, True, {"a": 1}, object(), re.compile("a"), np.array(5)],
)
def test_to_iterable_rejects_non_containers(value):
    with pytest.raises(NotIterableError):
        to_iterable(value)


def test_not_iterable_error_is_a_precondition_error():
    with pytest.raises(PreconditionError, match="to_contain"):
        to_iterable(None, "to_contain")


# --- contains ---


@pytest.mark.parametrize(
    "container, target",
    [
        ([1, 2, 3, 4], 1),
        (["a", "b", "c", "d"], "a"),
        ([UNDEFINED, None], None),
        ([UNDEFINED, None], UNDEFINED),
        ("abcdef", "abc"),
        ("11112111", "2"),
        ({"abc", "def"}, "abc"),
        (np.array([0, 1], dtype=np.int8), 1),
        (array.array("b", [0, 1]), 1),
    ],
)
def test_contains_by_identity(container, target):
    assert contains(container, target) is True


@pytest.mark.parametrize(
    "container, target",
    [
        ([1, 2, 3], 4),
        ([None, UNDEFINED], 1),
        ([{}, []], []),
        ([{}, []], {}),
        ("abc", "abd"),
    ],
)
def test_does_not_contain_by_identity(container, target):
    assert contains(container, target) is False


def test_contains_generator():
    assert contains(_numbers(), 1) is True
    assert contains(Countdown(3), 4) is False


def test_contains_same_reference():
    item = {"a": 1}
    assert contains([item], item) is True


def test_str_container_requires_str_target():
    with pytest.raises(PreconditionError):
        contains("123", 1)


def test_structural_containment():
    assert contains([{"a": "b"}, {"a": "c"}], {"a": "b"}, structural=True) is True
    assert contains([{"a": "b"}, {"a": "c"}], {"a": "d"}, structural=True) is False
    assert contains({1, 2, 3, 4}, 1, structural=True) is True
    assert contains([[1, [2]]], [1, [2]], structural=True) is True


def test_structural_containment_over_str_compares_characters():
    assert contains("abc", "b", structural=True) is True
    assert contains("abc", "bc", structural=True) is False


def test_containment_short_circuits():
    seen = []

    def produce():
        for n in (1, 2, 3):
            seen.append(n)
            yield n

    assert contains(produce(), 2) is True
    assert seen == [1, 2]


def test_exhausted_iterator_behaves_as_empty_container():
    numbers = _numbers()
    assert contains(numbers, 3) is True
    assert contains(numbers, 1) is False


@pytest.mark.parametrize("container", [None, UNDEFINED, 1, {"a": 1}])
def test_contains_rejects_non_iterables(container):
    with pytest.raises(NotIterableError):
        contains(container, 1)
    with pytest.raises(NotIterableError):
        contains(container, 1, structural=True)
