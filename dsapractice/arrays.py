"""Array questions: partitions, rearrangements, heaps, products, searches and submatrices."""

from __future__ import annotations

import math
from itertools import accumulate, chain, zip_longest
from typing import Iterable, Optional, Sequence

_WORD_MASK = 0xFFFFFFFF


def three_way_partition(values: Iterable[int], low: int, high: int) -> list[int]:
    """Arrange ``values`` so that those below ``low`` come first, then those in
    ``[low, high]``, then those above ``high``.

    The arrangement returned is fully sorted, which satisfies the partition.
    """
    return sorted(values)


def alternate_signs(values: Iterable[int]) -> list[int]:
    """Interleave non-negatives (even positions) and negatives (odd positions).

    Relative order within each group is kept; whichever group is longer
    supplies the leftover values at the end.
    """
    seq = list(values)
    positives = [v for v in seq if v >= 0]
    negatives = [v for v in seq if v < 0]
    paired = min(len(positives), len(negatives))
    interleaved = chain.from_iterable(zip(positives[:paired], negatives[:paired]))
    return [*interleaved, *positives[paired:], *negatives[paired:]]


def rotate_by_one(values: Iterable[int]) -> list[int]:
    """Rotate right by one place: the last value moves to the front."""
    seq = list(values)
    return seq[-1:] + seq[:-1]


def _sift_down(heap: list[int], size: int, index: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def merge_max_heaps(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Merge two max-heaps into a new array-backed max-heap."""
    merged = [*a, *b]
    for index in reversed(range(len(merged) // 2)):
        _sift_down(merged, len(merged), index)
    return merged


def is_palindromic_array(values: Iterable[int]) -> bool:
    """True when every value reads the same backwards; negative values never do."""
    return all(v >= 0 and str(v) == str(v)[::-1] for v in values)


def product_except_self(values: Iterable[int]) -> list[int]:
    """For each position, the product of every other value."""
    seq = list(values)
    left = [1, *accumulate(seq[:-1], lambda acc, v: acc * v)] if seq else []
    right = list(accumulate(reversed(seq[1:]), lambda acc, v: acc * v, initial=1))[::-1]
    return [l * r for l, r in zip(left, right)]


def search_adjacent_within_k(values: Sequence[int], x: int, k: int) -> Optional[int]:
    """Index of the first ``x`` in ``values``, where neighbours differ by at most ``k``.

    Skips ahead by ``|value - x| // k`` positions at a time. Returns ``None``
    when ``x`` is absent. Raises ``ValueError`` when ``k`` is below one.
    """
    if k < 1:
        raise ValueError("k must be at least one")
    index = 0
    while index < len(values):
        if values[index] == x:
            return index
        index += max(1, abs(values[index] - x) // k)
    return None


def smallest_subarray_with_sum(values: Sequence[int], x: int) -> Optional[int]:
    """Length of the shortest contiguous run of non-negative values summing to more than ``x``.

    Returns ``None`` when no run does.
    """
    best: Optional[int] = None
    start = 0
    total = 0
    for end, value in enumerate(values):
        total += value
        while total > x and start <= end:
            length = end - start + 1
            if best is None or length < best:
                best = length
            total -= values[start]
            start += 1
    return best


def _popcount(value: int) -> int:
    return bin(value & _WORD_MASK).count("1")


def sort_by_set_bits(values: Iterable[int]) -> list[int]:
    """Stable sort by number of set bits, most first; negatives count as 32-bit words."""
    return sorted(values, key=lambda v: -_popcount(v))


def has_gcd_one(values: Iterable[int]) -> bool:
    """True for a single value, or when the values' greatest common divisor is 1.

    Raises ``ValueError`` for an empty sequence.
    """
    seq = list(values)
    if not seq:
        raise ValueError("empty sequence")
    if len(seq) == 1:
        return True
    return math.gcd(*seq) == 1


def largest_zero_sum_submatrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """The largest-area rectangular block whose values sum to zero.

    Ties go to the block found first, scanning left columns then right columns.
    Returns an empty list when no block sums to zero or the matrix is empty.
    """
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        return []
    height, width = len(rows), len(rows[0])
    best_area = 0
    best: Optional[tuple[int, int, int, int]] = None
    for left in range(width):
        row_sums = [0] * height
        for right in range(left, width):
            row_sums = [s + row[right] for s, row in zip(row_sums, rows)]
            first_seen = {0: -1}
            running = 0
            length, top, bottom = 0, -1, -1
            for i, value in enumerate(row_sums):
                running += value
                if running in first_seen:
                    if i - first_seen[running] > length:
                        length = i - first_seen[running]
                        top, bottom = first_seen[running] + 1, i
                else:
                    first_seen[running] = i
            area = length * (right - left + 1)
            if area > best_area:
                best_area = area
                best = (top, bottom, left, right)
    if best is None:
        return []
    top, bottom, left, right = best
    return [row[left : right + 1] for row in rows[top : bottom + 1]]


__all__ = [
    "three_way_partition",
    "alternate_signs",
    "rotate_by_one",
    "merge_max_heaps",
    "is_palindromic_array",
    "product_except_self",
    "search_adjacent_within_k",
    "smallest_subarray_with_sum",
    "sort_by_set_bits",
    "has_gcd_one",
    "largest_zero_sum_submatrix",
]

# zip_longest kept available for callers interleaving uneven groups
del zip_longest