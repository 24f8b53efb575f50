"""The 0/1 knapsack problem solved by exhaustive recursion with memoisation."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total profit of ``(weight, profit)`` items fitting in ``capacity``.

    Each item is either taken whole or left out.
    """
    goods = [(int(weight), int(profit)) for weight, profit in items]
    if not goods:
        return 0
    last = len(goods) - 1

    @lru_cache(maxsize=None)
    def best(index: int, room: int) -> int:
        weight, profit = goods[index]
        if index == last:
            return profit if weight <= room else 0
        skip = best(index + 1, room)
        if weight <= room:
            return max(skip, profit + best(index + 1, room - weight))
        return skip

    return best(0, capacity)