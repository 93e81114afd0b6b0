"""Searching in sorted sequences."""

from __future__ import annotations

from math import isqrt
from typing import Optional, Sequence


def jump_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return an index of ``target`` in sorted ``values`` by jump search, or None."""
    n = len(values)
    if n == 0:
        return None
    jump = isqrt(n)
    prev, step = 0, jump
    while values[min(step, n) - 1] < target:
        prev = step
        step += jump
        if prev >= n:
            return None
    for i in range(prev, min(step, n)):
        if values[i] == target:
            return i
    return None


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return an index of ``target`` in sorted ``values`` by bisection, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None