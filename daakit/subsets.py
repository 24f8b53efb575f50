"""Enumerating subsets of a sequence whose elements add up to a target."""

from __future__ import annotations

from typing import Iterator, Sequence


def subset_sums_pruned(numbers: Sequence[int], target: int) -> list[list[int]]:
    """Find subsets summing to ``target``, never extending a subset past the target.

    The pruning assumes the numbers are not negative.
    """
    values = list(numbers)

    def search(start: int, chosen: list[int], total: int) -> Iterator[list[int]]:
        if total == target:
            yield list(chosen)
            return
        for index in range(start, len(values)):
            value = values[index]
            if total + value <= target:
                chosen.append(value)
                yield from search(index + 1, chosen, total + value)
                chosen.pop()

    return list(search(0, [], 0))


def subset_sums(numbers: Sequence[int], target: int) -> list[list[int]]:
    """Find subsets summing to ``target`` by deciding, item by item, to take or skip it."""
    values = list(numbers)

    def search(index: int, chosen: list[int], total: int) -> Iterator[list[int]]:
        if total == target:
            yield list(chosen)
            return
        if index >= len(values):
            return
        chosen.append(values[index])
        yield from search(index + 1, chosen, total + values[index])
        chosen.pop()
        yield from search(index + 1, chosen, total)

    return list(search(0, [], 0))