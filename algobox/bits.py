"""Bit-twiddling helpers over 32-bit integers."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def hamming_weight(n: int) -> int:
    """Return the number of set bits in the 32-bit two's-complement form of ``n``."""
    n &= _MASK32
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits must flip to turn ``start`` into ``goal``."""
    return hamming_weight(start ^ goal)