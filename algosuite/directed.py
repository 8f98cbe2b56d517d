"""Directed graph on vertices 0..n-1: topological order and strong components."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class DiGraph:
    """A directed graph stored as adjacency lists in insertion order."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)

    def transpose(self) -> DiGraph:
        """Return a new graph with every edge reversed."""
        reversed_graph = DiGraph(self.vertex_count)
        for u, targets in enumerate(self._adjacency):
            for v in targets:
                reversed_graph.add_edge(v, u)
        return reversed_graph

    def _walk(self, source: int, visited: set[int]) -> tuple[list[int], list[int]]:
        """Depth-first walk from ``source``; return preorder and postorder."""
        visited.add(source)
        preorder = [source]
        postorder: list[int] = []
        stack: list[tuple[int, Iterator[int]]] = [(source, iter(self._adjacency[source]))]
        while stack:
            u, remaining = stack[-1]
            for v in remaining:
                if v not in visited:
                    visited.add(v)
                    preorder.append(v)
                    stack.append((v, iter(self._adjacency[v])))
                    break
            else:
                stack.pop()
                postorder.append(u)
        return preorder, postorder

    def strongly_connected_components(self) -> list[list[int]]:
        """Return the strongly connected components found by Kosaraju's algorithm."""
        visited: set[int] = set()
        finished: list[int] = []
        for vertex in range(self.vertex_count):
            if vertex not in visited:
                finished.extend(self._walk(vertex, visited)[1])
        reversed_graph = self.transpose()
        visited.clear()
        components: list[list[int]] = []
        for vertex in reversed(finished):
            if vertex not in visited:
                components.append(reversed_graph._walk(vertex, visited)[0])
        return components

    def topological_sort(self) -> list[int]:
        """Return a topological order by Kahn's algorithm, lower indices first on ties."""
        indegree = [0] * self.vertex_count
        for targets in self._adjacency:
            for v in targets:
                indegree[v] += 1
        queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for v in sorted(self._adjacency[current]):
                indegree[v] -= 1
                if indegree[v] == 0:
                    queue.append(v)
        if len(order) != self.vertex_count:
            raise ValueError("graph has a cycle")
        return order