"""Exceptions raised by matchers."""

from __future__ import annotations

from typing import Callable


class MatchkitError(Exception):
    """Base class for every error raised by matchkit."""


class PreconditionError(MatchkitError, TypeError):
    """A matcher was called with arguments it cannot evaluate.

    Raised before any comparison happens and independently of negation, so
    ``expect(x).not_.to_have_length("3")`` fails the same way as the
    affirmative call.
    """

    def __init__(self, matcher_name: str, message: str):
        super().__init__(f"{matcher_name}: {message}")
        self.matcher_name = matcher_name


class NotIterableError(PreconditionError):
    """The value given as a container cannot be iterated."""


class MatchFailure(MatchkitError, AssertionError):
    """The subject did not satisfy the matcher (or did, under negation).

    The explanation is produced by *message_factory* the first time it is
    read and cached afterwards.
    """

    def __init__(
        self,
        matcher_name: str,
        message_factory: Callable[[], str],
        passed: bool,
    ):
        super().__init__(matcher_name)
        self.matcher_name = matcher_name
        self.passed = passed
        self._message_factory = message_factory
        self._message: str | None = None

    @property
    def message(self) -> str:
        if self._message is None:
            self._message = self._message_factory()
        return self._message

    def __str__(self) -> str:
        return self.message
