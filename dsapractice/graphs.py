"""Undirected graphs: tree checks, cloning, Euler classification and grid routes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Optional, Sequence


def is_tree(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """True when the graph on vertices ``0..n-1`` is connected and has exactly ``n - 1`` edges.

    Raises ``ValueError`` when an edge names a vertex outside ``0..n-1``.
    """
    edge_list = [tuple(edge) for edge in edges]
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) outside a graph of {n} vertices")
        adjacency[u].append(v)
        adjacency[v].append(u)

    seen: set[int] = set()
    components = 0
    for start in range(n):
        if start in seen:
            continue
        components += 1
        seen.add(start)
        stack = [start]
        while stack:
            for neighbour in adjacency[stack.pop()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return components <= 1 and len(edge_list) == n - 1


@dataclass(eq=False)
class GraphNode:
    """A vertex of an undirected graph with a value and its neighbours."""

    val: int = 0
    neighbors: list["GraphNode"] = field(default_factory=list, repr=False)


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep-copy the graph reachable from ``node``, keeping neighbour order."""
    if node is None:
        return None
    copies: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    pending = [node]
    while pending:
        original = pending.pop()
        copy = copies[original]
        for neighbour in original.neighbors:
            if neighbour not in copies:
                copies[neighbour] = GraphNode(neighbour.val)
                pending.append(neighbour)
            copy.neighbors.append(copies[neighbour])
    return copies[node]


class EulerKind(IntEnum):
    """What an undirected graph's vertex degrees allow."""

    NONE = 0
    PATH = 1
    CIRCUIT = 2


def euler_classification(adjacency: Sequence[Sequence[int]]) -> EulerKind:
    """Classify by degree parity: all even is a circuit, exactly two odd is a path."""
    odd = sum(len(neighbours) % 2 for neighbours in adjacency)
    if odd == 0:
        return EulerKind.CIRCUIT
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NONE


_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def shortest_safe_route(matrix: Sequence[Sequence[int]]) -> Optional[int]:
    """Length of the shortest route from the first column to the last.

    Cells holding 1 are open, 0 marks a landmine; open cells next to a mine are
    unsafe too. The length counts cells visited. Returns ``None`` when no safe
    route exists. Raises ``ValueError`` for an empty matrix.
    """
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one cell")
    height, width = len(rows), len(rows[0])

    def neighbours(r: int, c: int) -> Iterator[tuple[int, int]]:
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                yield nr, nc

    unsafe = {
        cell
        for r, row in enumerate(rows)
        for c, value in enumerate(row)
        if value == 0
        for cell in neighbours(r, c)
    }

    def safe(r: int, c: int) -> bool:
        return rows[r][c] == 1 and (r, c) not in unsafe

    starts = [(r, 0) for r in range(height) if safe(r, 0)]
    visited = set(starts)
    queue = deque((r, c, 0) for r, c in starts)
    while queue:
        r, c, distance = queue.popleft()
        if c == width - 1:
            return distance + 1
        for cell in neighbours(r, c):
            if cell not in visited and safe(*cell):
                visited.add(cell)
                queue.append((*cell, distance + 1))
    return None