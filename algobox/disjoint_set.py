"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """A partition of the integers ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"number of elements must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self._rank[px] < self._rank[py]:
            px, py = py, px
        self._parent[py] = px
        self._size[px] += self._size[py]
        if self._rank[px] == self._rank[py]:
            self._rank[px] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def size_of(self, x: int) -> int:
        """Return the number of elements in the set holding ``x``."""
        return self._size[self.find(x)]