"""Shortest paths and minimum spanning trees on adjacency-matrix graphs."""

from __future__ import annotations

import math
from collections.abc import Sequence

INF = math.inf


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} is not in the graph")


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return shortest distances from ``source``; a zero weight means no edge.

    Vertices that cannot be reached get ``math.inf``.
    """
    rows = _square(matrix)
    size = len(rows)
    _check_vertex(source, size)
    dist: list[float] = [INF] * size
    dist[source] = 0
    done: set[int] = set()
    for _ in range(size - 1):
        u = min((v for v in range(size) if v not in done), key=dist.__getitem__)
        done.add(u)
        if dist[u] == INF:
            continue
        for v, weight in enumerate(rows[u]):
            if v not in done and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the all-pairs shortest distance matrix; ``math.inf`` means no edge."""
    dist = _square(matrix)
    for k, through in enumerate(dist):
        through = list(through)
        for row in dist:
            via = row[k]
            for j, weight in enumerate(through):
                if via + weight < row[j]:
                    row[j] = via + weight
    return dist


def format_distance_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a distance matrix, writing INF for missing paths."""
    return "\n".join(
        "".join(f"{'INF' if value == INF else value}  " for value in row) for row in matrix
    )


def prim(
    matrix: Sequence[Sequence[float]], source: int
) -> tuple[list[int | None], list[float]]:
    """Build a minimum spanning tree from ``source`` with Prim's algorithm.

    A zero weight means no edge. Returns each vertex's parent (None for the
    source) and the weight of the edge joining it to that parent.
    """
    rows = _square(matrix)
    size = len(rows)
    _check_vertex(source, size)
    dist: list[float] = [INF] * size
    parent: list[int | None] = [None] * size
    dist[source] = 0
    visited: set[int] = set()
    for _ in range(size):
        candidates = [v for v in range(size) if v not in visited and dist[v] < INF]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=dist.__getitem__)
        visited.add(u)
        for v, weight in enumerate(rows[u]):
            if weight and v not in visited and weight < dist[v]:
                dist[v] = weight
                parent[v] = u
    return parent, dist


def kruskal(matrix: Sequence[Sequence[float]]) -> list[tuple[int, int, float]]:
    """Return the edges ``(u, v, weight)`` of a minimum spanning tree, cheapest first.

    The upper triangle of the matrix is read; a zero weight means no edge.
    """
    rows = _square(matrix)
    size = len(rows)
    leader = list(range(size))

    def find(vertex: int) -> int:
        while leader[vertex] != vertex:
            leader[vertex] = leader[leader[vertex]]
            vertex = leader[vertex]
        return vertex

    candidates = sorted(
        (weight, u, v)
        for u, row in enumerate(rows)
        for v, weight in enumerate(row)
        if u < v and weight
    )
    tree: list[tuple[int, int, float]] = []
    for weight, u, v in candidates:
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            leader[root_u] = root_v
            tree.append((u, v, weight))
    if size and len(tree) != size - 1:
        raise ValueError("graph is not connected")
    return tree