"""Path questions on binary trees: downward paths with a given sum, distances between nodes."""

from __future__ import annotations

from collections import Counter
from typing import Optional

from dsapractice.binary_tree import Node


def count_k_sum_paths(root: Optional[Node], k: int) -> int:
    """Count downward paths (any start, any end below it) whose values sum to ``k``."""
    prefix_sums: Counter[int] = Counter()

    def walk(node: Optional[Node], running: int) -> int:
        if node is None:
            return 0
        running += node.data
        found = prefix_sums[running - k]
        if running == k:
            found += 1
        prefix_sums[running] += 1
        found += walk(node.left, running)
        found += walk(node.right, running)
        prefix_sums[running] -= 1
        return found

    return walk(root, 0)


def _path_to(root: Optional[Node], target: int) -> list[int]:
    """Values on the path from ``root`` to the first node holding ``target``; empty if absent."""
    path: list[int] = []

    def visit(node: Optional[Node]) -> bool:
        if node is None:
            return False
        path.append(node.data)
        if node.data == target or visit(node.left) or visit(node.right):
            return True
        path.pop()
        return False

    visit(root)
    return path


def min_distance(root: Optional[Node], a: int, b: int) -> int:
    """Number of edges between the nodes holding ``a`` and ``b``."""
    path_a = _path_to(root, a)
    path_b = _path_to(root, b)
    shared = 0
    for x, y in zip(path_a, path_b):
        if x != y:
            break
        shared += 1
    return len(path_a) + len(path_b) - 2 * shared