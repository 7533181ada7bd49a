"""Greedy questions: knapsack fractions, jumps, platforms, negations and heights."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Item:
    """Something to pack, with its value and weight."""

    value: int
    weight: int


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Greatest value packable in ``capacity`` when items may be split.

    Raises ``ValueError`` for a negative capacity or an item weighing less than one.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    item_list = list(items)
    if any(item.weight < 1 for item in item_list):
        raise ValueError("weights must be positive")
    ranked = sorted(
        enumerate(item_list),
        key=lambda pair: (pair[1].value / pair[1].weight, pair[0]),
        reverse=True,
    )
    remaining = capacity
    total = 0.0
    for _, item in ranked:
        if item.weight < remaining:
            total += item.value
            remaining -= item.weight
        else:
            total += item.value / item.weight * remaining
            break
    return total


def min_jumps(steps: Iterable[int]) -> Optional[int]:
    """Fewest jumps from the first position to the last, each jumping at most its value.

    Returns ``None`` when the end cannot be reached.
    """
    seq = list(steps)
    farthest = current = jumps = 0
    for position, step in enumerate(seq[:-1]):
        farthest = max(farthest, position + step)
        if position == current:
            jumps += 1
            current = farthest
    return jumps if current >= len(seq) - 1 else None


def min_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Platforms needed so that no train waits; a train arriving as another leaves needs its own.

    Raises ``ValueError`` when the lists differ in length.
    """
    arriving = sorted(arrivals)
    leaving = sorted(departures)
    if len(arriving) != len(leaving):
        raise ValueError("arrivals and departures differ in length")
    needed = most = 0
    i = j = 0
    while i < len(arriving) and j < len(leaving):
        if arriving[i] <= leaving[j]:
            needed += 1
            i += 1
        else:
            needed -= 1
            j += 1
        most = max(most, needed)
    return most


def maximize_sum_after_negations(values: Iterable[int], k: int) -> int:
    """Largest sum after exactly ``k`` sign flips, repeats allowed."""
    flipped = sorted(values)
    if not flipped:
        return 0
    for index, value in enumerate(flipped):
        if k == 0 or value >= 0:
            break
        flipped[index] = -value
        k -= 1
    total = sum(flipped)
    if k % 2:
        total -= 2 * min(flipped)
    return total


def min_height_difference(heights: Iterable[int], k: int) -> int:
    """Smallest spread of heights after raising or lowering each by exactly ``k``,
    never going below zero.

    Raises ``ValueError`` for an empty sequence.
    """
    ordered = sorted(heights)
    if not ordered:
        raise ValueError("empty sequence")
    lowest, highest = ordered[0], ordered[-1]
    result = highest - lowest
    start = max(bisect_left(ordered, k), 1)
    for previous, current in zip(ordered[start - 1 :], ordered[start:]):
        smallest = min(lowest + k, current - k)
        largest = max(highest - k, previous + k)
        result = min(result, largest - smallest)
    return result


def min_subset_greater_sum(values: Iterable[int]) -> int:
    """Fewest elements whose sum exceeds half of the total, truncated toward zero."""
    ordered = sorted(values, reverse=True)
    total = sum(ordered)
    half = total // 2 if total >= 0 else -(-total // 2)
    running = 0
    for count, value in enumerate(ordered, 1):
        running += value
        if running > half:
            return count
    return len(ordered)