"""The ``expect`` entry point and the Expectation dispatcher."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Any

from matchkit.config import get_config
from matchkit.errors import MatchFailure, PreconditionError
from matchkit.formatting import build_message
from matchkit.matchers import MISSING, Formatter, MatcherContext, evaluate_matcher
from matchkit.shapes import UNDEFINED


def _default_logger() -> logging.Logger:
    return logging.getLogger("matchkit")


@dataclass(frozen=True)
class Expectation:
    """A subject value plus a negation flag.

    Every matcher method returns ``None`` when the (possibly negated) check
    holds and raises ``MatchFailure`` otherwise. Misuse raises
    ``PreconditionError`` whether or not the expectation is negated.
    """

    subject: Any
    negated: bool = False
    formatter: Formatter = build_message
    logger: logging.Logger = field(default_factory=_default_logger, repr=False, compare=False)

    def negate(self) -> Expectation:
        return replace(self, negated=not self.negated)

    @property
    def not_(self) -> Expectation:
        return self.negate()

    def _check(self, name: str, *args: Any, **kwargs: Any) -> None:
        ctx = MatcherContext(
            negated=self.negated,
            formatter=self.formatter,
            precision=get_config().close_to_precision,
        )
        result = evaluate_matcher(name, self.subject, *args, ctx=ctx, **kwargs)
        tags = {"matcher": name, "negated": self.negated}
        self.logger.debug(f"{name}: passed={result.passed} negated={self.negated}", extra=tags)
        if result.passed == self.negated:
            failure = MatchFailure(name, result.message, result.passed)
            # %-style so the message is only built if a handler emits the record
            self.logger.info("%s failed\n%s", name, failure, extra=tags)
            raise failure

    def _check_without_arguments(self, name: str, args: tuple[Any, ...]) -> None:
        if args:
            raise PreconditionError(name, f"takes no arguments, got {len(args)}: {args!r}")
        self._check(name)

    # identity and equality

    def to_be(self, expected: Any = MISSING) -> None:
        self._check("to_be", expected)

    def to_equal(self, expected: Any = MISSING) -> None:
        self._check("to_equal", expected)

    def to_be_instance_of(self, expected: type = MISSING) -> None:
        self._check("to_be_instance_of", expected)

    # truthiness and presence

    def to_be_truthy(self, *args: Any) -> None:
        self._check_without_arguments("to_be_truthy", args)

    def to_be_falsy(self, *args: Any) -> None:
        self._check_without_arguments("to_be_falsy", args)

    def to_be_nan(self, *args: Any) -> None:
        self._check_without_arguments("to_be_nan", args)

    def to_be_none(self, *args: Any) -> None:
        self._check_without_arguments("to_be_none", args)

    def to_be_defined(self, *args: Any) -> None:
        self._check_without_arguments("to_be_defined", args)

    def to_be_undefined(self, *args: Any) -> None:
        self._check_without_arguments("to_be_undefined", args)

    # numbers

    def to_be_greater_than(self, expected: float = MISSING) -> None:
        self._check("to_be_greater_than", expected)

    def to_be_greater_than_or_equal(self, expected: float = MISSING) -> None:
        self._check("to_be_greater_than_or_equal", expected)

    def to_be_less_than(self, expected: float = MISSING) -> None:
        self._check("to_be_less_than", expected)

    def to_be_less_than_or_equal(self, expected: float = MISSING) -> None:
        self._check("to_be_less_than_or_equal", expected)

    def to_be_close_to(self, expected: float = MISSING, precision: int = MISSING) -> None:
        self._check("to_be_close_to", expected, precision=precision)

    # collections and text

    def to_contain(self, expected: Any = MISSING) -> None:
        self._check("to_contain", expected)

    def to_contain_equal(self, expected: Any = MISSING) -> None:
        self._check("to_contain_equal", expected)

    def to_match(self, expected: str | re.Pattern = MISSING) -> None:
        self._check("to_match", expected)

    def to_have_length(self, expected: int = MISSING) -> None:
        self._check("to_have_length", expected)


def expect(
    subject: Any = UNDEFINED,
    *,
    formatter: Formatter | None = None,
    logger: logging.Logger | None = None,
) -> Expectation:
    """Wrap *subject* for assertions; call with no argument to test ``UNDEFINED``."""
    return Expectation(
        subject=subject,
        formatter=formatter or build_message,
        logger=logger or _default_logger(),
    )


assert_on = expect
