"""Matcher system: one function per matcher plus a name-based dispatcher."""

from matchkit.matchers.base import MISSING, Formatter, MatchResult, MatcherContext
from matchkit.matchers.core import MATCHERS, evaluate_matcher, get_matcher

__all__ = [
    "MATCHERS",
    "MISSING",
    "Formatter",
    "MatchResult",
    "MatcherContext",
    "evaluate_matcher",
    "get_matcher",
]
