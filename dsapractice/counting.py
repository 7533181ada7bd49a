"""Counting questions: subsets, common values, frequencies, pairs and differences."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def is_subset(a1: Iterable[int], a2: Iterable[int]) -> bool:
    """True when ``a2`` is contained in ``a1``, counting repeated values."""
    return not Counter(a2) - Counter(a1)


def common_elements(a: Iterable[int], b: Iterable[int], c: Iterable[int]) -> list[int]:
    """Distinct values present in all three sequences, in ascending order."""
    return sorted(set(a) & set(b) & set(c))


def count_frequent(values: Iterable[int], k: int) -> int:
    """How many distinct values occur more than ``n // k`` times.

    Raises ``ValueError`` when ``k`` is below one.
    """
    if k < 1:
        raise ValueError("k must be at least one")
    counts = Counter(values)
    threshold = sum(counts.values()) // k
    return sum(1 for count in counts.values() if count > threshold)


def count_pairs_with_sum(values: Iterable[int], k: int) -> int:
    """Number of index pairs ``i < j`` whose values sum to ``k``."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in values:
        pairs += seen[k - value]
        seen[value] += 1
    return pairs


def has_pair_with_difference(values: Iterable[int], x: int) -> bool:
    """True when two distinct positions hold values differing by ``x``."""
    counts = Counter(values)
    if x == 0:
        return any(count > 1 for count in counts.values())
    return any(value + x in counts for value in counts)