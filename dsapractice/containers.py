"""Fixed-capacity stacks and a queue, plus small stack and queue manipulations."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 1000) -> None:
        self._items: list[int] = []
        self.capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Push ``x``; raises ``StackOverflowError`` when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top item; raises ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()


class TwoStacks:
    """Two stacks sharing one array, growing toward each other from its ends."""

    def __init__(self, size: int = 100) -> None:
        self.size = size
        self._slots: list[int] = [0] * size
        self._top1 = -1
        self._top2 = size

    def _full(self) -> bool:
        return self._top1 >= self._top2 - 1

    def push1(self, x: int) -> None:
        """Push onto the first stack; raises ``StackOverflowError`` when the array is full."""
        if self._full():
            raise StackOverflowError("no room left in the shared array")
        self._top1 += 1
        self._slots[self._top1] = x

    def push2(self, x: int) -> None:
        """Push onto the second stack; raises ``StackOverflowError`` when the array is full."""
        if self._full():
            raise StackOverflowError("no room left in the shared array")
        self._top2 -= 1
        self._slots[self._top2] = x

    def pop1(self) -> int:
        """Pop from the first stack; raises ``IndexError`` when it is empty."""
        if self._top1 < 0:
            raise IndexError("pop from empty first stack")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> int:
        """Pop from the second stack; raises ``IndexError`` when it is empty."""
        if self._top2 >= self.size:
            raise IndexError("pop from empty second stack")
        value = self._slots[self._top2]
        self._top2 += 1
        return value


class ArrayQueue:
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Add ``x`` at the rear."""
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the front item; raises ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()


def insert_at_bottom(stack: Iterable[int], x: int) -> list[int]:
    """Return the stack, listed bottom first, with ``x`` placed beneath everything."""
    return [x, *stack]


def reverse_first_k(queue: Iterable[int], k: int) -> list[int]:
    """Return the queue, front first, with its first ``k`` items reversed.

    Raises ``ValueError`` when ``k`` is negative or larger than the queue.
    """
    items = list(queue)
    if not 0 <= k <= len(items):
        raise ValueError(f"k={k} outside a queue of {len(items)} items")
    return items[:k][::-1] + items[k:]