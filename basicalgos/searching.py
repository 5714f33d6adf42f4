"""Linear and binary search over integer sequences.

Positions are 1-based, matching how the results are reported to a user.
"""

from __future__ import annotations

from collections.abc import Sequence


def linear_search(items: Sequence[int], target: int) -> int | None:
    """Return the 1-based position of the first occurrence of target, or None."""
    for position, value in enumerate(items, start=1):
        if value == target:
            return position
    return None


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Return a 1-based position of target in ascending items, or None.

    The items must already be sorted in ascending order.
    """
    first, last = 0, len(items) - 1
    while first <= last:
        mid = (first + last) // 2
        value = items[mid]
        if value == target:
            return mid + 1
        if target > value:
            first = mid + 1
        else:
            last = mid - 1
    return None