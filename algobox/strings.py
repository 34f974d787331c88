"""Algorithms over strings."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Iterable

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_DIGITS = "0123456789"


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive characters are equal."""
    return "".join(char * min(len(list(run)), 2) for char, run in groupby(s))


def word_break(s: str, words: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into a sequence of words from ``words``."""
    vocabulary = set(words)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in vocabulary for start in range(end)
        )
    return reachable[-1]


def maximum_gain(s: str, x: int, y: int) -> int:
    """Return the best score from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    first, second = "a", "b"
    if x < y:
        x, y = y, x
        first, second = "b", "a"
    score = 0
    pending_first = pending_second = 0
    for char in s:
        if char == first:
            pending_first += 1
        elif char == second:
            if pending_first:
                pending_first -= 1
                score += x
            else:
                pending_second += 1
        else:
            score += min(pending_first, pending_second) * y
            pending_first = pending_second = 0
    return score + min(pending_first, pending_second) * y


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict = {}
    backward: dict = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        signed = sign * value
        if signed >= _INT_MAX:
            return _INT_MAX
        if signed <= _INT_MIN:
            return _INT_MIN
    return sign * value