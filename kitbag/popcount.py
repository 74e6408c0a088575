"""Population count of 64-bit unsigned integers."""

from __future__ import annotations

_PC: list[int] = [0]
for _i in range(1, 256):
    _PC.append(_PC[_i >> 1] + (_i & 1))
del _i

_UINT64_LIMIT = 1 << 64


def pop_count(x: int) -> int:
    """Return the number of set bits in the 64-bit unsigned integer ``x``."""
    if not 0 <= x < _UINT64_LIMIT:
        raise ValueError(f"{x} is not a 64-bit unsigned integer")
    return sum(_PC[b] for b in x.to_bytes(8, "little"))