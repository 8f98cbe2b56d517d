"""Undirected graph on vertices 0..n-1 with traversal and structure queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence


class Graph:
    """An undirected graph stored as adjacency lists in insertion order."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, u: int, v: int) -> None:
        """Join ``u`` and ``v`` with an undirected edge."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Return the neighbours of ``vertex`` in the order the edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def bfs(self, source: int) -> list[int]:
        """Return the vertices in breadth-first order from ``source``."""
        self._check(source)
        visited = {source}
        order = [source]
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for v in self._adjacency[current]:
                if v not in visited:
                    visited.add(v)
                    order.append(v)
                    queue.append(v)
        return order

    def dfs(self, source: int) -> list[int]:
        """Return the vertices in recursive depth-first preorder from ``source``."""
        self._check(source)
        visited = {source}
        order = [source]
        stack: list[Iterator[int]] = [iter(self._adjacency[source])]
        while stack:
            for v in stack[-1]:
                if v not in visited:
                    visited.add(v)
                    order.append(v)
                    stack.append(iter(self._adjacency[v]))
                    break
            else:
                stack.pop()
        return order

    def dfs_stack(self, source: int) -> list[int]:
        """Return the order produced by a stack walk that visits vertices as they are pushed."""
        self._check(source)
        visited = {source}
        order = [source]
        stack = [source]
        while stack:
            top = stack.pop()
            for v in self._adjacency[top]:
                if v not in visited:
                    visited.add(v)
                    order.append(v)
                    stack.append(v)
        return order

    def is_connected(self, source: int = 0) -> bool:
        """Tell whether every vertex is reachable from ``source``."""
        return len(self.dfs(source)) == self.vertex_count

    def articulation_points(self, source: int = 0) -> list[int]:
        """Return, in ascending order, the cut vertices of the component holding ``source``."""
        self._check(source)
        discovery = [-1] * self.vertex_count
        low = [-1] * self.vertex_count
        parent = [-1] * self.vertex_count
        points: set[int] = set()
        discovery[source] = low[source] = 0
        timer = 1
        root_children = 0
        stack: list[tuple[int, Iterator[int]]] = [(source, iter(self._adjacency[source]))]
        while stack:
            u, remaining = stack[-1]
            for v in remaining:
                if discovery[v] != -1:
                    low[u] = min(low[u], discovery[v])
                else:
                    parent[v] = u
                    if u == source:
                        root_children += 1
                    discovery[v] = low[v] = timer
                    timer += 1
                    stack.append((v, iter(self._adjacency[v])))
                    break
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if parent[p] != -1 and low[u] >= discovery[p]:
                        points.add(p)
        if root_children > 1:
            points.add(source)
        return sorted(points)

    def hamiltonian_path(self, start: int) -> list[int] | None:
        """Return the first path from ``start`` that visits every vertex once, or None."""
        self._check(start)
        path = [start]
        visited = {start}

        def extend(current: int) -> bool:
            if len(path) == self.vertex_count:
                return True
            for v in self._adjacency[current]:
                if v not in visited:
                    visited.add(v)
                    path.append(v)
                    if extend(v):
                        return True
                    visited.discard(v)
                    path.pop()
            return False

        return path if extend(start) else None

    def closes_cycle(self, path: Sequence[int]) -> bool:
        """Tell whether the last vertex of ``path`` is adjacent to its first."""
        if not path:
            raise ValueError("path is empty")
        self._check(path[0])
        self._check(path[-1])
        return path[-1] in self._adjacency[path[0]]