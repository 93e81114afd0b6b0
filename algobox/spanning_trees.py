"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Sequence, Union

from algobox.disjoint_set import DisjointSet


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: int


def kruskal_mst(
    num_vertices: int, edges: Iterable[Union[Edge, tuple[int, int, int]]]
) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    edge_list = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    forest = DisjointSet(num_vertices)
    chosen: list[Edge] = []
    for edge in sorted(edge_list, key=attrgetter("weight")):
        if len(chosen) >= num_vertices - 1:
            break
        if forest.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the tree edges ``parent -> v`` for each vertex ``v >= 1``.

    A zero entry in the weight matrix means there is no edge. Raises
    ValueError when the graph is not connected.
    """
    n = len(matrix)
    for row in matrix:
        if len(row) != n:
            raise ValueError("matrix must be square")
    if n == 0:
        return []
    key: list[float] = [math.inf] * n
    parent: list[Union[int, None]] = [None] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    edges = []
    for v in range(1, n):
        p = parent[v]
        if p is None:
            raise ValueError("graph is not connected")
        edges.append(Edge(p, v, matrix[v][p]))
    return edges