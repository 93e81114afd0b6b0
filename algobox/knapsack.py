"""The fractional knapsack problem, solved greedily."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"weight must be positive, got {self.weight}")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def fractional_knapsack(
    capacity: float, items: Iterable[Union[Item, tuple[float, float]]]
) -> float:
    """Return the greatest value that fits in ``capacity``, splitting items as needed."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    goods = [item if isinstance(item, Item) else Item(*item) for item in items]
    remaining = capacity
    total = 0.0
    for item in sorted(goods, key=lambda item: item.ratio, reverse=True):
        if remaining == 0:
            break
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            remaining = 0
    return total