"""String questions: prefixes, rotations, isomorphism, numerals and pattern matching."""

from __future__ import annotations

import heapq
from collections import Counter
from functools import lru_cache
from typing import Iterable

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def longest_common_prefix(words: Iterable[str]) -> str:
    """The longest prefix shared by every word; empty when there is none."""
    prefix: list[str] = []
    for chars in zip(*words):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def remove_duplicates(text: str) -> str:
    """Keep the first occurrence of each character, in order."""
    return "".join(dict.fromkeys(text))


def are_rotations(s1: str, s2: str) -> bool:
    """True when ``s2`` is a rotation of the non-empty string ``s1``."""
    return bool(s1) and len(s1) == len(s2) and s2 in s1 + s1


def are_isomorphic(s1: str, s2: str) -> bool:
    """True when a one-to-one character mapping turns ``s1`` into ``s2``."""
    return (
        len(s1) == len(s2)
        and len(set(s1)) == len(set(s2)) == len(set(zip(s1, s2)))
    )


def reverse_word(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def roman_to_int(text: str) -> int:
    """Value of a Roman numeral; a symbol smaller than its successor is subtracted.

    Raises ``ValueError`` for an empty string or an unknown symbol.
    """
    if not text:
        raise ValueError("empty Roman numeral")
    try:
        numbers = [_ROMAN_VALUES[symbol] for symbol in text]
    except KeyError as error:
        raise ValueError(f"unknown Roman symbol {error.args[0]!r}") from None
    total = numbers[-1]
    for current, following in zip(numbers, numbers[1:]):
        total += current if current >= following else -current
    return total


def _z_array(s: str) -> list[int]:
    z = [0] * len(s)
    left = right = 0
    for i in range(1, len(s)):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < len(s) and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def search_pattern(pattern: str, text: str) -> list[int]:
    """1-based start positions of every occurrence of ``pattern`` in ``text``, overlaps included.

    Raises ``ValueError`` for an empty pattern.
    """
    if not pattern:
        raise ValueError("empty pattern")
    z = _z_array(f"{pattern}${text}")
    return [i - len(pattern) for i, length in enumerate(z) if length == len(pattern)]


def wildcard_match(wild: str, pattern: str) -> bool:
    """Match ``pattern`` against ``wild``, where ``?`` takes one character and ``*`` one or more."""

    @lru_cache(maxsize=None)
    def matches(i: int, j: int) -> bool:
        if i == len(wild) and j == len(pattern):
            return True
        if i == len(wild) or j == len(pattern):
            return False
        symbol = wild[i]
        if symbol == pattern[j] or symbol == "?":
            return matches(i + 1, j + 1)
        if symbol == "*":
            return matches(i, j + 1) or matches(i + 1, j + 1)
        return False

    return matches(0, 0)


def min_value_after_removals(text: str, k: int) -> int:
    """Smallest sum of squared character counts after removing ``k`` characters.

    Raises ``ValueError`` when ``k`` is negative or exceeds the text's length.
    """
    if not 0 <= k <= len(text):
        raise ValueError(f"cannot remove {k} characters from {len(text)}")
    heap = [-count for count in Counter(text).values()]
    heapq.heapify(heap)
    for _ in range(k):
        remaining = heapq.heappop(heap) + 1
        if remaining:
            heapq.heappush(heap, remaining)
    return sum(count * count for count in heap)