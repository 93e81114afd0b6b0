"""Graph traversals, directed cycle detection and topological sorting."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Iterator


class UndirectedGraph:
    """An undirected graph on vertices ``0 .. num_vertices-1``.

    Each vertex keeps its neighbours with the most recently added first,
    which fixes the order in which the traversals visit them.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must be non-negative, got {num_vertices}")
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(
                f"vertex {vertex} is out of range 0..{len(self._adjacency) - 1}"
            )

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, newest edge first."""
        self._check(vertex)
        return self._adjacency[vertex][::-1]

    def _iter_neighbours(self, vertex: int) -> Iterator[int]:
        return reversed(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._iter_neighbours(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [self._iter_neighbours(start)]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(self._iter_neighbours(neighbour))
                    break
            else:
                stack.pop()
        return order


def _directed_adjacency(
    num_vertices: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    if num_vertices < 0:
        raise ValueError(f"number of vertices must be non-negative, got {num_vertices}")
    targets: list[set[int]] = [set() for _ in range(num_vertices)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < num_vertices:
                raise ValueError(
                    f"vertex {vertex} is out of range 0..{num_vertices - 1}"
                )
        targets[u].add(v)
    return [sorted(out) for out in targets]


class _State(Enum):
    UNSEEN = 0
    ACTIVE = 1
    DONE = 2


def has_directed_cycle(num_vertices: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the directed graph given by ``edges`` contains a cycle."""
    adjacency = _directed_adjacency(num_vertices, edges)
    state = [_State.UNSEEN] * num_vertices
    for root in range(num_vertices):
        if state[root] is not _State.UNSEEN:
            continue
        state[root] = _State.ACTIVE
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, successors = stack[-1]
            for nxt in successors:
                if state[nxt] is _State.ACTIVE:
                    return True
                if state[nxt] is _State.UNSEEN:
                    state[nxt] = _State.ACTIVE
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                state[vertex] = _State.DONE
                stack.pop()
    return False


def topological_sort(num_vertices: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the vertices so that every edge ``u -> v`` puts ``u`` before ``v``.

    The graph is expected to be acyclic; for a graph with a cycle the result
    is the reversed depth-first finishing order, as for a DAG.
    """
    adjacency = _directed_adjacency(num_vertices, edges)
    visited = [False] * num_vertices
    finished: list[int] = []
    for root in range(num_vertices):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, successors = stack[-1]
            for nxt in successors:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                finished.append(vertex)
                stack.pop()
    finished.reverse()
    return finished