"""Single-source and all-pairs shortest path algorithms."""

from __future__ import annotations

import heapq
import math
from typing import Hashable, Iterable, Mapping, Sequence

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _check_square(matrix: Sequence[Sequence[float]]) -> int:
    n = len(matrix)
    for row in matrix:
        if len(row) != n:
            raise ValueError("matrix must be square")
    return n


def dijkstra_matrix(graph: Sequence[Sequence[int]], source: int) -> list[float]:
    """Return distances from ``source`` over an adjacency matrix.

    A zero entry means there is no edge. Unreachable vertices get ``inf``.
    """
    n = _check_square(graph)
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range 0..{n - 1}")
    dist: list[float] = [INF] * n
    done = [False] * n
    dist[source] = 0
    for _ in range(n - 1):
        u = min((v for v in range(n) if not done[v]), key=dist.__getitem__)
        done[u] = True
        if dist[u] == INF:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def build_undirected_adjacency(
    num_nodes: int, edges: Iterable[tuple[int, int, int]]
) -> dict[int, list[tuple[int, int]]]:
    """Build an adjacency mapping for nodes ``1 .. num_nodes`` from weighted edges."""
    if num_nodes < 0:
        raise ValueError(f"number of nodes must be non-negative, got {num_nodes}")
    adjacency: dict[int, list[tuple[int, int]]] = {
        node: [] for node in range(1, num_nodes + 1)
    }
    for u, v, weight in edges:
        for node in (u, v):
            if node not in adjacency:
                raise ValueError(f"node {node} is out of range 1..{num_nodes}")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]], source: Hashable
) -> dict[Hashable, float]:
    """Return distances from ``source`` using a binary heap.

    ``adjacency`` maps each node to ``(neighbour, weight)`` pairs. Weights
    must be non-negative. Unreachable nodes get ``inf``.
    """
    dist: dict[Hashable, float] = {}
    for node, neighbours in adjacency.items():
        dist.setdefault(node, INF)
        for neighbour, weight in neighbours:
            if weight < 0:
                raise ValueError(f"negative edge weight {weight} from {node}")
            dist.setdefault(neighbour, INF)
    if source not in dist:
        raise ValueError(f"source {source!r} is not in the graph")
    dist[source] = 0
    heap: list[tuple[float, int, Hashable]] = [(0, 0, source)]
    counter = 1
    while heap:
        d, _, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in adjacency.get(u, ()):
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, counter, v))
                counter += 1
    return dist


def bellman_ford(
    num_vertices: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[float]:
    """Return distances from ``source`` over directed, possibly negative edges.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    if not 0 <= source < num_vertices:
        raise ValueError(f"source {source} is out of range 0..{num_vertices - 1}")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        for vertex in (u, v):
            if not 0 <= vertex < num_vertices:
                raise ValueError(
                    f"vertex {vertex} is out of range 0..{num_vertices - 1}"
                )
    dist: list[float] = [INF] * num_vertices
    dist[source] = 0
    for _ in range(num_vertices - 1):
        updated = False
        for u, v, weight in edge_list:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                updated = True
        if not updated:
            break
    for u, v, weight in edge_list:
        if dist[u] != INF and dist[u] + weight < dist[v]:
            raise NegativeCycleError(
                f"negative-weight cycle reachable from source {source}"
            )
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances; ``inf`` marks a missing edge."""
    _check_square(matrix)
    dist = [list(row) for row in matrix]
    for k, row_k in enumerate(dist):
        for row in dist:
            via_k = row[k]
            if via_k == INF:
                continue
            for j, k_to_j in enumerate(row_k):
                if k_to_j != INF and via_k + k_to_j < row[j]:
                    row[j] = via_k + k_to_j
    return dist