"""Small string and sequence helpers."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, MutableSequence
from typing import TypeVar

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def basename(s: str) -> str:
    """Remove directory components and a trailing ``.suffix``.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s[s.rfind("/") + 1 :]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers as a bracketed, comma-separated list."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings, in order."""
    return [s for s in strings if s]


def reverse(values: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``values`` in place and return it."""
    values.reverse()
    return values


def _parse_int(word: str) -> int:
    if not _INT_PATTERN.fullmatch(word):
        raise ValueError(f'parsing "{word}": invalid syntax')
    value = int(word)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'parsing "{word}": value out of range')
    return value


def reverse_lines(lines: Iterable[str]) -> Iterator[list[int]]:
    """Yield the integers of each line in reverse order.

    A line holding a field that is not a 64-bit decimal integer is reported
    on standard error and skipped.
    """
    for line in lines:
        try:
            ints = [_parse_int(word) for word in line.split()]
        except ValueError as err:
            print(err, file=sys.stderr)
            continue
        yield reverse(ints)