"""A growable integer vector and a fixed-size stack."""

from __future__ import annotations

from typing import Iterator


class IntVector:
    """A vector that doubles its capacity when it runs out of room."""

    def __init__(self, initial_capacity: int = 4) -> None:
        if initial_capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {initial_capacity}")
        self._items: list[int] = []
        self._capacity = initial_capacity

    def push(self, value: int) -> None:
        """Append ``value``, growing the capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else 4
        self._items.append(value)

    def capacity(self) -> int:
        """Return the number of slots reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IntVector({self._items!r}, capacity={self._capacity})"


class BoundedStack:
    """A stack that holds at most ``size`` elements."""

    def __init__(self, size: int = 50) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Push ``value``; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        """Pop the top value; raise IndexError when the stack is empty."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def __len__(self) -> int:
        return len(self._items)