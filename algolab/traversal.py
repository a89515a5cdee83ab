"""Graph traversals over adjacency matrices: breadth-first and depth-first.

Vertices are numbered from 0 and ``adjacency[u][v]`` describes the edge u -> v.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["bfs_reachable", "dfs_order"]


def _size(adjacency: Sequence[Sequence[int]]) -> int:
    n = len(adjacency)
    if any(len(row) != n for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    return n


def bfs_reachable(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reached by a breadth-first search from ``start``, ascending.

    Any non-zero entry counts as an edge. Only vertices reached along at least
    one edge are reported, so ``start`` itself appears only when it lies on a
    cycle.
    """
    n = _size(adjacency)
    if not 0 <= start < n:
        raise ValueError(f"start vertex {start} is out of range for {n} vertices")
    visited = [False] * n
    queue: deque[int] = deque()
    current = start
    while True:
        queue.extend(
            v for v, edge in enumerate(adjacency[current]) if edge and not visited[v]
        )
        while queue and visited[queue[0]]:
            queue.popleft()
        if not queue:
            break
        current = queue.popleft()
        visited[current] = True
    return [v for v, seen in enumerate(visited) if seen]


def dfs_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order in which a depth-first search visits every vertex.

    The search starts from each unvisited vertex in ascending order and follows
    entries equal to 1, trying neighbours in ascending order.
    """
    n = _size(adjacency)
    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        stack = [(root, iter(range(n)))]
        while stack:
            vertex, candidates = stack[-1]
            for v in candidates:
                if adjacency[vertex][v] == 1 and not visited[v]:
                    visited[v] = True
                    order.append(v)
                    stack.append((v, iter(range(n))))
                    break
            else:
                stack.pop()
    return order