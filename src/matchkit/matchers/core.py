"""Matcher implementations (equality, truthiness, numbers, containment, text)."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Callable

import numpy as np

from matchkit.containment import contains
from matchkit.equality import Mode, equals
from matchkit.errors import PreconditionError
from matchkit.matchers.base import MISSING, MatchResult, MatcherContext
from matchkit.numeric import (
    close_to,
    ensure_number,
    ensure_precision,
    greater_than,
    greater_than_or_equal,
    is_nan,
    less_than,
    less_than_or_equal,
)
from matchkit.shapes import UNDEFINED, Shape, classify


def _require(name: str, value: Any, what: str = "expected value") -> None:
    if value is MISSING:
        raise PreconditionError(name, f"{what} is required")


def check_to_be(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    _require("to_be", expected)
    passed = equals(received, expected, Mode.STRICT)
    return ctx.result("to_be", passed, received, expected)


def check_to_equal(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    _require("to_equal", expected)
    passed = equals(received, expected, Mode.VALUE)
    return ctx.result("to_equal", passed, received, expected)


def check_to_be_instance_of(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    _require("to_be_instance_of", expected, "expected class")
    if not isinstance(expected, type):
        raise PreconditionError(
            "to_be_instance_of",
            f"expected value must be a class, got {type(expected).__name__}: {expected!r}",
        )
    passed = isinstance(received, expected)
    return ctx.result(
        "to_be_instance_of", passed, received, expected, received_type=type(received)
    )


def _is_truthy(value: Any) -> bool:
    """Python truthiness, except that buffers are truthy when non-empty.

    ndarrays refuse ``bool()`` once they hold more than one element, so every
    buffer goes by its element count instead.
    """
    if classify(value) is Shape.BUFFER_LIKE:
        if isinstance(value, np.ndarray):
            return value.size > 0
        if isinstance(value, memoryview):
            return value.nbytes > 0
        return len(value) > 0
    return bool(value)


def check_to_be_truthy(received: Any, ctx: MatcherContext) -> MatchResult:
    return ctx.result("to_be_truthy", _is_truthy(received), received)


def check_to_be_falsy(received: Any, ctx: MatcherContext) -> MatchResult:
    return ctx.result("to_be_falsy", not _is_truthy(received), received)


def check_to_be_nan(received: Any, ctx: MatcherContext) -> MatchResult:
    return ctx.result("to_be_nan", is_nan(received), received)


def check_to_be_none(received: Any, ctx: MatcherContext) -> MatchResult:
    return ctx.result("to_be_none", received is None, received, None)


def check_to_be_defined(received: Any, ctx: MatcherContext) -> MatchResult:
    return ctx.result("to_be_defined", received is not UNDEFINED, received)


def check_to_be_undefined(received: Any, ctx: MatcherContext) -> MatchResult:
    return ctx.result("to_be_undefined", received is UNDEFINED, received, UNDEFINED)


def _ordering(
    name: str,
    compare: Callable[[Any, Any], bool],
    received: Any,
    expected: Any,
    ctx: MatcherContext,
) -> MatchResult:
    _require(name, expected)
    ensure_number(received, "received", name)
    ensure_number(expected, "expected", name)
    return ctx.result(name, compare(received, expected), received, expected)


def check_to_be_greater_than(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    return _ordering("to_be_greater_than", greater_than, received, expected, ctx)


def check_to_be_greater_than_or_equal(
    received: Any, expected: Any, ctx: MatcherContext
) -> MatchResult:
    return _ordering(
        "to_be_greater_than_or_equal", greater_than_or_equal, received, expected, ctx
    )


def check_to_be_less_than(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    return _ordering("to_be_less_than", less_than, received, expected, ctx)


def check_to_be_less_than_or_equal(
    received: Any, expected: Any, ctx: MatcherContext
) -> MatchResult:
    return _ordering("to_be_less_than_or_equal", less_than_or_equal, received, expected, ctx)


def check_to_be_close_to(
    received: Any,
    expected: Any,
    precision: Any = MISSING,
    *,
    ctx: MatcherContext,
) -> MatchResult:
    name = "to_be_close_to"
    _require(name, expected)
    if precision is MISSING:
        precision = ctx.precision
    ensure_number(received, "received", name)
    ensure_number(expected, "expected", name)
    ensure_precision(precision, name)
    passed = close_to(received, expected, precision)
    return ctx.result(name, passed, received, expected, precision=precision)


def check_to_contain(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    _require("to_contain", expected)
    passed = contains(received, expected, structural=False, matcher_name="to_contain")
    return ctx.result("to_contain", passed, received, expected)


def check_to_contain_equal(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    _require("to_contain_equal", expected)
    passed = contains(received, expected, structural=True, matcher_name="to_contain_equal")
    return ctx.result("to_contain_equal", passed, received, expected)


def check_to_match(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    """Match a str against a substring or a compiled pattern.

    A plain str is searched for literally; regex metacharacters in it have no
    special meaning. Use ``re.compile`` for pattern semantics.
    """
    name = "to_match"
    _require(name, expected)
    if not isinstance(received, str):
        raise PreconditionError(
            name, f"received value must be a str, got {type(received).__name__}: {received!r}"
        )
    if isinstance(expected, str):
        passed = expected in received
    elif isinstance(expected, re.Pattern) and isinstance(expected.pattern, str):
        passed = expected.search(received) is not None
    else:
        raise PreconditionError(
            name,
            "expected value must be a str or a compiled str pattern, "
            f"got {type(expected).__name__}: {expected!r}",
        )
    return ctx.result(name, passed, received, expected)


def check_to_have_length(received: Any, expected: Any, ctx: MatcherContext) -> MatchResult:
    name = "to_have_length"
    _require(name, expected, "expected length")
    if classify(received) is Shape.SCALAR:
        has_length = isinstance(received, (str, bytes))
    else:
        has_length = (
            not isinstance(received, (Mapping, type))
            and hasattr(received, "__len__")
            and not (isinstance(received, np.ndarray) and received.ndim == 0)
        )
    if not has_length:
        raise PreconditionError(
            name,
            f"received value must have a length, got {type(received).__name__}: {received!r}",
        )
    if not isinstance(expected, int) or isinstance(expected, bool) or expected < 0:
        raise PreconditionError(
            name, f"expected length must be a non-negative int, got {expected!r}"
        )
    try:
        actual = len(received)
    except TypeError as e:
        raise PreconditionError(name, f"received value has no length: {e}") from e
    return ctx.result(name, actual == expected, received, expected, received_length=actual)


MATCHERS: dict[str, Callable[..., MatchResult]] = {
    "to_be": check_to_be,
    "to_equal": check_to_equal,
    "to_be_instance_of": check_to_be_instance_of,
    "to_be_truthy": check_to_be_truthy,
    "to_be_falsy": check_to_be_falsy,
    "to_be_nan": check_to_be_nan,
    "to_be_none": check_to_be_none,
    "to_be_defined": check_to_be_defined,
    "to_be_undefined": check_to_be_undefined,
    "to_be_greater_than": check_to_be_greater_than,
    "to_be_greater_than_or_equal": check_to_be_greater_than_or_equal,
    "to_be_less_than": check_to_be_less_than,
    "to_be_less_than_or_equal": check_to_be_less_than_or_equal,
    "to_be_close_to": check_to_be_close_to,
    "to_contain": check_to_contain,
    "to_contain_equal": check_to_contain_equal,
    "to_match": check_to_match,
    "to_have_length": check_to_have_length,
}


def get_matcher(name: str) -> Callable[..., MatchResult]:
    matcher = MATCHERS.get(name)
    if matcher is None:
        raise ValueError(
            f"Unknown matcher: {name!r}. Available: {', '.join(sorted(MATCHERS))}"
        )
    return matcher


def evaluate_matcher(
    name: str, received: Any, *args: Any, ctx: MatcherContext, **kwargs: Any
) -> MatchResult:
    """Dispatch to the named matcher and return its un-negated result."""
    return get_matcher(name)(received, *args, ctx=ctx, **kwargs)
