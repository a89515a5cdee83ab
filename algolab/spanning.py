"""Minimum spanning trees of undirected graphs by Kruskal's and Prim's methods.

Vertices are numbered from 0 and graphs are given as symmetric cost matrices.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Edge", "SpanningTree", "kruskal", "prim"]

_PRIM_NO_EDGE = 999


@dataclass(frozen=True)
class Edge:
    """An edge of a spanning tree, as chosen: from ``u`` to ``v`` at ``cost``."""

    u: int
    v: int
    cost: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree in the order they were chosen."""

    edges: tuple[Edge, ...]

    @property
    def cost(self) -> int:
        """Total cost of all edges."""
        return sum(edge.cost for edge in self.edges)

    def __len__(self) -> int:
        return len(self.edges)


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("cost matrix must be square")
    return n


def _cheapest(
    matrix: list[list[int]], limit: int, rows: Iterable[int]
) -> tuple[int, int, int] | None:
    """First entry strictly cheaper than every earlier one and than ``limit``."""
    best: tuple[int, int, int] | None = None
    for i in rows:
        for j, weight in enumerate(matrix[i]):
            if weight < limit:
                limit = weight
                best = (weight, i, j)
    return best


def _root(parent: list[int | None], vertex: int) -> int:
    while (up := parent[vertex]) is not None:
        vertex = up
    return vertex


def kruskal(cost: Sequence[Sequence[int]], infinity: int = 111) -> SpanningTree:
    """Minimum spanning tree by taking the cheapest edge that closes no cycle.

    Entries equal to or above ``infinity`` are not edges. Raises ``ValueError``
    when the graph is not connected.
    """
    n = _size(cost)
    remaining = [list(row) for row in cost]
    parent: list[int | None] = [None] * n
    edges: list[Edge] = []
    while len(edges) < n - 1:
        best = _cheapest(remaining, infinity, range(n))
        if best is None:
            raise ValueError("graph is not connected")
        weight, a, b = best
        u, v = _root(parent, a), _root(parent, b)
        if u != v:
            edges.append(Edge(a, b, weight))
            parent[v] = u
        remaining[a][b] = remaining[b][a] = infinity
    return SpanningTree(tuple(edges))


def prim(cost: Sequence[Sequence[int]], source: int) -> SpanningTree:
    """Minimum spanning tree grown from ``source`` one cheapest edge at a time.

    A cost of 0 means there is no edge. Raises ``ValueError`` when the graph
    is not connected or ``source`` is out of range.
    """
    n = _size(cost)
    if not 0 <= source < n:
        raise ValueError(f"source vertex {source} is out of range for {n} vertices")
    remaining = [[_PRIM_NO_EDGE if c == 0 else c for c in row] for row in cost]
    visited = [False] * n
    visited[source] = True
    edges: list[Edge] = []
    while len(edges) < n - 1:
        best = _cheapest(
            remaining, _PRIM_NO_EDGE, (i for i in range(n) if visited[i])
        )
        if best is None:
            raise ValueError("graph is not connected")
        weight, a, b = best
        if not visited[b]:
            edges.append(Edge(a, b, weight))
            visited[b] = True
        remaining[a][b] = remaining[b][a] = _PRIM_NO_EDGE
    return SpanningTree(tuple(edges))