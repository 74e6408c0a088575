"""Deep equivalence for arbitrary values, tolerant of cycles."""

from __future__ import annotations

import dataclasses
from typing import Any

_SCALARS = (bool, int, float, complex, str, bytes, bytearray)


def equal(x: Any, y: Any) -> bool:
    """Report whether ``x`` and ``y`` are deeply equal.

    Values of different types are never equal. Dictionary keys are compared
    with ``==``, not deeply.
    """
    return _equal(x, y, set())


def _equal(x: Any, y: Any, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is y
    if type(x) is not type(y):
        return False
    if isinstance(x, _SCALARS):
        return x == y

    if x is y:
        return True
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(
            _equal(a, b, seen) for a, b in zip(x, y)
        )
    if isinstance(x, dict):
        if len(x) != len(y):
            return False
        return all(k in y and _equal(v, y[k], seen) for k, v in x.items())
    if isinstance(x, (set, frozenset)):
        return x == y
    if dataclasses.is_dataclass(x) and not isinstance(x, type):
        return all(
            _equal(getattr(x, f.name), getattr(y, f.name), seen)
            for f in dataclasses.fields(x)
        )
    if callable(x):
        return False
    if hasattr(x, "__dict__"):
        return _equal(vars(x), vars(y), seen)
    return x == y