"""Singly and doubly linked lists: building, loops, intersections and reversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer."""

    data: int
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class DoublyNode:
    """A doubly linked list node holding an integer."""

    data: int
    next: Optional["DoublyNode"] = None
    prev: Optional["DoublyNode"] = field(default=None, repr=False)


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    """Yield each node once, stopping before a node already seen."""
    seen: set[int] = set()
    current = head
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a singly linked list holding ``values`` in order."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Values of the list in order; a loop is followed only once round."""
    return [node.data for node in _nodes(head)]


def make_loop(head: Optional[ListNode], position: int) -> None:
    """Link the tail back to the node at 1-based ``position``; 0 leaves the list alone.

    Raises ``ValueError`` when ``position`` lies outside the list.
    """
    if position == 0:
        return
    nodes = list(_nodes(head))
    if not 1 <= position <= len(nodes):
        raise ValueError(f"position {position} outside a list of {len(nodes)} nodes")
    nodes[-1].next = nodes[position - 1]


def has_loop(head: Optional[ListNode]) -> bool:
    """True when following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def remove_loop(head: Optional[ListNode]) -> None:
    """Break a loop in place by cutting the link that returns to a visited node."""
    nodes = list(_nodes(head))
    if nodes and nodes[-1].next is not None:
        nodes[-1].next = None


def intersection(
    head1: Optional[ListNode], head2: Optional[ListNode]
) -> Optional[ListNode]:
    """A new list of the values common to two sorted lists, each match used once."""
    common: list[int] = []
    a, b = head1, head2
    while a is not None and b is not None:
        if a.data == b.data:
            common.append(a.data)
            a, b = a.next, b.next
        elif a.data < b.data:
            a = a.next
        else:
            b = b.next
    return from_values(common)


def kth_from_end(head: Optional[ListNode], k: int) -> int:
    """Value of the ``k``-th node counted from the end, the last node being 1.

    Raises ``IndexError`` when ``k`` is not between 1 and the list's length.
    """
    values = to_list(head)
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} outside a list of {len(values)} nodes")
    return values[-k]


def middle(head: Optional[ListNode]) -> int:
    """Value of the middle node; of the two middles, the second.

    Raises ``ValueError`` for an empty list.
    """
    if head is None:
        raise ValueError("empty list has no middle")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow.data


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def doubly_from_values(values: Iterable[int]) -> Optional[DoublyNode]:
    """Build a doubly linked list holding ``values`` in order."""
    head: Optional[DoublyNode] = None
    tail: Optional[DoublyNode] = None
    for value in values:
        node = DoublyNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def reverse_doubly(head: Optional[DoublyNode]) -> Optional[DoublyNode]:
    """Reverse a doubly linked list in place and return its new head."""
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    current: Optional[DoublyNode] = tail
    while current is not None:
        current.next, current.prev = current.prev, current.next
        current = current.next
    return tail