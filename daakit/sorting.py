"""Comparison sorts that return a new sorted list and leave the input untouched."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping the smallest remaining item into place."""
    result = list(values)
    for position in range(len(result) - 1):
        smallest = min(range(position, len(result)), key=result.__getitem__)
        result[position], result[smallest] = result[smallest], result[position]
    return result


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each item behind the last earlier item not greater than it."""
    result = list(values)
    for position in range(1, len(result)):
        item = result[position]
        slot = position
        while slot > 0 and result[slot - 1] > item:
            slot -= 1
        if slot != position:
            result.insert(slot, result.pop(position))
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[T], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i < high and items[i] <= pivot:
            i += 1
        while j > low and items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[j], items[low] = items[low], items[j]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort by partitioning around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items