"""Binary search trees: building, checking and reshaping."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from dsapractice.binary_tree import Node


def insert(root: Optional[Node], value: int) -> Node:
    """Insert ``value`` into the tree and return its root; duplicates are ignored."""
    new = Node(value)
    if root is None:
        return new
    current = root
    while True:
        if value < current.data:
            if current.left is None:
                current.left = new
                return root
            current = current.left
        elif value > current.data:
            if current.right is None:
                current.right = new
                return root
            current = current.right
        else:
            return root


def from_values(values: Iterable[int]) -> Optional[Node]:
    """Build a tree by inserting ``values`` in order."""
    root: Optional[Node] = None
    for value in values:
        root = insert(root, value)
    return root


def _inorder(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def _reverse_inorder(root: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.right
        current = stack.pop()
        yield current
        current = current.left


def is_bst(root: Optional[Node]) -> bool:
    """True when the in-order values are strictly increasing."""
    previous: Optional[int] = None
    for node in _inorder(root):
        if previous is not None and previous >= node.data:
            return False
        previous = node.data
    return True


def has_dead_end(root: Optional[Node]) -> bool:
    """True when some leaf ``v`` cannot take a new positive value: ``v-1`` and ``v+1`` are both taken.

    Zero counts as taken, so a leaf holding 1 next to a 2 is a dead end.
    """
    taken = {0, *(node.data for node in _inorder(root))}
    return any(
        node.left is None
        and node.right is None
        and node.data - 1 in taken
        and node.data + 1 in taken
        for node in _inorder(root)
    )


def count_pairs_with_sum(root1: Optional[Node], root2: Optional[Node], x: int) -> int:
    """Count pairs, one value from each tree, that sum to ``x``."""
    ascending = _inorder(root1)
    descending = _reverse_inorder(root2)
    a = next(ascending, None)
    b = next(descending, None)
    count = 0
    while a is not None and b is not None:
        total = a.data + b.data
        if total == x:
            count += 1
            a = next(ascending, None)
            b = next(descending, None)
        elif total < x:
            a = next(ascending, None)
        else:
            b = next(descending, None)
    return count


def balance(root: Optional[Node]) -> Optional[Node]:
    """Relink the nodes into a height-balanced tree with the same in-order sequence."""
    nodes = list(_inorder(root))

    def link(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = nodes[mid]
        node.left = link(start, mid - 1)
        node.right = link(mid + 1, end)
        return node

    return link(0, len(nodes) - 1)