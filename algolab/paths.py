"""Shortest paths and transitive closure over matrices.

Vertices are numbered from 0. Each function returns a new result and leaves
its argument unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["dijkstra", "floyd", "warshall"]


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def dijkstra(
    cost: Sequence[Sequence[int]], source: int, infinity: int = 111
) -> list[int]:
    """Shortest distances from ``source`` to every vertex.

    ``infinity`` marks a missing edge; vertices that cannot be reached keep
    their direct cost, which is ``infinity`` when there is no edge.
    """
    n = _size(cost)
    if not 0 <= source < n:
        raise ValueError(f"source vertex {source} is out of range for {n} vertices")
    distance = list(cost[source])
    distance[source] = 0
    visited = [False] * n
    visited[source] = True
    for _ in range(n - 1):
        nearest = None
        best = infinity
        for i, d in enumerate(distance):
            if not visited[i] and d < best:
                best = d
                nearest = i
        if nearest is None:
            break
        visited[nearest] = True
        row = cost[nearest]
        for w, edge in enumerate(row):
            if edge != infinity and not visited[w]:
                through = edge + distance[nearest]
                if distance[w] > through:
                    distance[w] = through
    return distance


def floyd(distances: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances by the Floyd–Warshall recurrence."""
    n = _size(distances)
    result = [list(row) for row in distances]
    for k in range(n):
        row_k = result[k]
        for row in result:
            for j in range(n):
                row[j] = min(row[j], row[k] + row_k[j])
    return result


def warshall(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Transitive closure of a directed graph as a matrix of 0s and 1s."""
    _size(adjacency)
    closure = [[1 if edge else 0 for edge in row] for row in adjacency]
    for k, row_k in enumerate(closure):
        for row in closure:
            if row[k]:
                row[:] = [a | b for a, b in zip(row, row_k)]
    return closure