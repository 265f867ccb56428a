"""Graph algorithms: breadth-first search, Bellman-Ford, bipartite check, topological order."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


class NegativeCycleError(Exception):
    """Raised when a negative-weight cycle is reachable from the source."""


class Graph:
    """Undirected graph on vertices ``0 .. vertices-1`` kept as adjacency lists.

    A new neighbour goes to the front of a vertex's list, so the most
    recently added edge is explored first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} is outside the graph")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def bfs(self, start: int) -> list[int]:
        """Vertices in the order a breadth-first search from ``start`` visits them."""
        self._check(start)
        visited = {start}
        pending = deque([start])
        order = []
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order


def bellman_ford(
    vertices: int, edges: Iterable[tuple[int, int, float]], source: int
) -> list[float]:
    """Shortest distances from ``source`` over directed weighted ``(u, v, w)`` edges.

    Unreachable vertices get ``math.inf``. A negative cycle reachable from the
    source raises NegativeCycleError.
    """
    if not 0 <= source < vertices:
        raise ValueError(f"source {source} is outside the graph")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < vertices and 0 <= v < vertices):
            raise ValueError(f"edge ({u}, {v}) is outside the graph")
    dist: list[float] = [math.inf] * vertices
    dist[source] = 0
    for _ in range(vertices - 1):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    if any(
        dist[u] != math.inf and dist[u] + weight < dist[v] for u, v, weight in edge_list
    ):
        raise NegativeCycleError("graph contains a negative-weight cycle")
    return dist


def is_bipartite(adjacency: Sequence[Iterable[int]]) -> bool:
    """Whether the graph given by neighbour lists can be two-coloured."""
    neighbours = [list(entry) for entry in adjacency]
    colours: list[int | None] = [None] * len(neighbours)
    for start in range(len(neighbours)):
        if colours[start] is not None:
            continue
        colours[start] = 1
        stack = [start]
        while stack:
            node = stack.pop()
            for other in neighbours[node]:
                if colours[other] is None:
                    colours[other] = 1 - colours[node]  # type: ignore[operator]
                    stack.append(other)
                elif colours[other] == colours[node]:
                    return False
    return True


def topological_sort(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Kahn's algorithm over directed neighbour lists.

    Vertices on or behind a cycle never reach in-degree zero, so for a cyclic
    graph the result holds fewer vertices than the graph.
    """
    successors = [list(entry) for entry in adjacency]
    indegree = [0] * len(successors)
    for targets in successors:
        for target in targets:
            indegree[target] += 1
    pending = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order = []
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for target in successors[vertex]:
            indegree[target] -= 1
            if indegree[target] == 0:
                pending.append(target)
    return order