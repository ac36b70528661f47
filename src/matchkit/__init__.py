"""Assertion matchers with structural equality, containment and numeric checks."""

from matchkit.config import MatchkitConfig, get_config, load_config, set_config
from matchkit.containment import contains
from matchkit.equality import Mode, equals
from matchkit.errors import MatchFailure, MatchkitError, NotIterableError, PreconditionError
from matchkit.expect import Expectation, assert_on, expect
from matchkit.iterables import to_iterable
from matchkit.matchers import MatchResult
from matchkit.shapes import UNDEFINED, Shape, classify

__all__ = [
    "UNDEFINED",
    "Expectation",
    "MatchFailure",
    "MatchResult",
    "MatchkitConfig",
    "MatchkitError",
    "Mode",
    "NotIterableError",
    "PreconditionError",
    "Shape",
    "assert_on",
    "classify",
    "contains",
    "equals",
    "expect",
    "get_config",
    "load_config",
    "set_config",
    "to_iterable",
]
