"""Containment search over normalized collections."""

from __future__ import annotations

from typing import Any

from matchkit.equality import Mode, equals
from matchkit.errors import PreconditionError
from matchkit.iterables import to_iterable


def contains(
    container: Any,
    target: Any,
    structural: bool = False,
    matcher_name: str = "contains",
) -> bool:
    """Return whether *target* occurs in *container*.

    With ``structural=False`` elements are compared by identity and a ``str``
    container is searched for *target* as a substring. With
    ``structural=True`` every element, characters included, is compared by
    value equivalence.
    """
    if isinstance(container, str) and not structural:
        if not isinstance(target, str):
            raise PreconditionError(
                matcher_name,
                f"a str can only contain a str, got {type(target).__name__}: {target!r}",
            )
        return target in container

    mode = Mode.VALUE if structural else Mode.STRICT
    for element in to_iterable(container, matcher_name):
        if equals(element, target, mode):
            return True
    return False
