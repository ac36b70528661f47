"""Default failure-message builder.

Matchers never format values themselves. They hand their operands to a
formatter, which returns a thunk; the thunk runs only when a failure is
reported.
"""

from __future__ import annotations

import reprlib
from typing import Any, Callable

from matchkit.config import MessageConfig, get_config
from matchkit.matchers.base import MISSING


def _make_repr(limits: MessageConfig) -> reprlib.Repr:
    r = reprlib.Repr()
    r.maxstring = limits.max_string
    r.maxother = limits.max_string
    r.maxlevel = limits.max_level
    r.maxlist = r.maxtuple = r.maxset = r.maxfrozenset = r.maxdict = limits.max_items
    return r


def _label(key: str) -> str:
    return key.replace("_", " ").capitalize()


def build_message(
    matcher_name: str,
    received: Any,
    expected: Any,
    negated: bool,
    extra: dict[str, Any],
) -> Callable[[], str]:
    limits = get_config().message

    def _message() -> str:
        r = _make_repr(limits)
        chain = "not_." if negated else ""
        argument = "" if expected is MISSING else "expected"
        lines = [f"expect(received).{chain}{matcher_name}({argument})", ""]
        if expected is not MISSING:
            qualifier = "not " if negated else ""
            lines.append(f"Expected: {qualifier}{r.repr(expected)}")
        lines.append(f"Received: {r.repr(received)}")
        for key, value in extra.items():
            lines.append(f"{_label(key)}: {r.repr(value)}")
        return "\n".join(lines)

    return _message
