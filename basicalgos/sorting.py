"""Classic comparison sorts and a merge of two sorted sequences.

Every function returns a new list and leaves its input untouched.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return items sorted ascending by repeated adjacent swaps."""
    result = list(items)
    for limit in range(len(result) - 1, 0, -1):
        for j in range(limit):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return items sorted ascending by sinking each element into place."""
    result = list(items)
    for current in range(1, len(result)):
        d = current
        while d > 0 and result[d - 1] > result[d]:
            result[d - 1], result[d] = result[d], result[d - 1]
            d -= 1
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return items sorted ascending by selecting the minimum of each suffix."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        pos = min(range(i, n), key=result.__getitem__)
        result[i], result[pos] = result[pos], result[i]
    return result


def _partition(values: list[int], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[j], values[boundary] = values[boundary], values[j]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quicksort(items: Iterable[int]) -> list[int]:
    """Return items sorted ascending using quicksort with a last-element pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            index = _partition(result, low, high)
            pending.append((low, index - 1))
            pending.append((index + 1, high))
    return result


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list.

    On equal values the element from first comes before the one from second.
    """
    return list(heapq.merge(first, second))