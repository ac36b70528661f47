"""Base data structures for the matcher system."""

from dataclasses import dataclass
from typing import Any, Callable

# (matcher_name, received, expected, negated, extra) -> message thunk
Formatter = Callable[[str, Any, Any, bool, dict[str, Any]], Callable[[], str]]


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


# Default for matcher parameters, so "no argument" differs from an explicit None.
MISSING: Any = _Missing()


@dataclass
class MatchResult:
    """Outcome of evaluating a single matcher.

    Attributes:
        name: Matcher name (e.g. "to_equal").
        passed: Whether the received value satisfied the matcher, before
            negation is applied.
        message: Zero-argument callable producing the explanation. Only
            called when a failure is reported.
    """

    name: str
    passed: bool
    message: Callable[[], str]


@dataclass(frozen=True)
class MatcherContext:
    """Per-call settings a matcher needs besides its operands."""

    negated: bool
    formatter: Formatter
    precision: int = 2

    def result(
        self,
        name: str,
        passed: bool,
        received: Any,
        expected: Any = MISSING,
        **extra: Any,
    ) -> MatchResult:
        message = self.formatter(name, received, expected, self.negated, extra)
        return MatchResult(name=name, passed=passed, message=message)
