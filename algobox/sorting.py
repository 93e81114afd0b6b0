"""Heap sort and insertion sort."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def _sift_down(items: list, n: int, i: int) -> None:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted with a binary max-heap."""
    items = list(values)
    n = len(items)
    for i in reversed(range(n // 2)):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted by insertion."""
    items: list[T] = []
    for key in values:
        pos = len(items)
        while pos > 0 and items[pos - 1] > key:
            pos -= 1
        items.insert(pos, key)
    return items