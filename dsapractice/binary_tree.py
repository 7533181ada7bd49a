"""Binary trees built from level-order strings, and traversals over them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

NULL_TOKEN = "N"


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def build_tree(text: str) -> Optional[Node]:
    """Build a tree from space-separated level-order values, ``N`` marking a missing child.

    Returns ``None`` for an empty string or one that starts with ``N``.
    Raises ``ValueError`` when a token is neither ``N`` nor an integer.
    """
    if not text or text[0] == NULL_TOKEN:
        return None
    tokens = iter(text.split())
    first = next(tokens, None)
    if first is None:
        return None
    root = Node(int(first))
    pending: deque[Node] = deque([root])
    while pending:
        current = pending.popleft()
        left = next(tokens, None)
        if left is None:
            break
        if left != NULL_TOKEN:
            current.left = Node(int(left))
            pending.append(current.left)
        right = next(tokens, None)
        if right is None:
            break
        if right != NULL_TOKEN:
            current.right = Node(int(right))
            pending.append(current.right)
    return root


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    """Yield the nodes of each level, top to bottom, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    return sum(1 for _ in _levels(root))


def is_balanced(root: Optional[Node]) -> bool:
    """True when, at every node, the subtree heights differ by at most one."""

    def checked_height(node: Optional[Node]) -> int:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left < 0:
            return -1
        right = checked_height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return checked_height(root) >= 0


def leaves_at_same_level(root: Optional[Node]) -> bool:
    """True when every leaf lies at the same depth."""
    leaf_depths = {
        depth
        for depth, level in enumerate(_levels(root))
        for node in level
        if node.left is None and node.right is None
    }
    return len(leaf_depths) <= 1


def left_view(root: Optional[Node]) -> list[int]:
    """The leftmost value of each level, top to bottom."""
    return [level[0].data for level in _levels(root)]


def reverse_level_order(root: Optional[Node]) -> list[int]:
    """Values level by level from the bottom up, each level left to right."""
    return [
        node.data
        for level in reversed(list(_levels(root)))
        for node in level
    ]


def zigzag_traversal(root: Optional[Node]) -> list[int]:
    """Level-order values, alternating left-to-right and right-to-left, starting left-to-right."""
    result: list[int] = []
    for depth, level in enumerate(_levels(root)):
        values = [node.data for node in level]
        if depth % 2:
            values.reverse()
        result.extend(values)
    return result