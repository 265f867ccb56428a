"""Minimum spanning trees of graphs given as weighted adjacency matrices."""

from __future__ import annotations

import math
import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: float


def _square(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def kruskal(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Kruskal's algorithm; a zero entry means no edge.

    Edges are read from the lower triangle (so ``u > v``) and the chosen ones
    are returned in order of increasing weight.
    """
    rows = _square(matrix)
    candidates = [
        Edge(i, j, rows[i][j])
        for i in range(1, len(rows))
        for j in range(i)
        if rows[i][j] != 0
    ]
    candidates.sort(key=lambda edge: edge.weight)
    parent = list(range(len(rows)))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    chosen = []
    for edge in candidates:
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            chosen.append(edge)
            parent[root_v] = root_u
    return chosen


def prim(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Prim's algorithm from vertex 0; a zero entry means no edge.

    Returns one edge ``(parent, vertex)`` for each vertex after the first.
    A disconnected graph raises ValueError.
    """
    rows = _square(matrix)
    n = len(rows)
    key = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    if n:
        key[0] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    edges = []
    for vertex in range(1, n):
        source = parent[vertex]
        if source is None:
            raise ValueError("graph is not connected")
        edges.append(Edge(source, vertex, rows[vertex][source]))
    return edges


def format_spanning_tree(edges: Iterable[Edge]) -> str:
    """Report with lettered vertices, one ``X - Y : w`` line per edge, then the cost."""
    names = string.ascii_uppercase
    lines = []
    cost = 0
    for edge in edges:
        if max(edge.u, edge.v) >= len(names) or min(edge.u, edge.v) < 0:
            raise ValueError(f"no letter for an endpoint of {edge}")
        lines.append(f"\n{names[edge.u]} - {names[edge.v]} : {edge.weight}")
        cost += edge.weight
    lines.append(f"\nSpanning tree cost: {cost}")
    return "".join(lines)