"""Maximum-sum and maximum-product contiguous subarrays."""

from __future__ import annotations

from collections.abc import Iterable


def max_subarray_sum(items: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run of items (Kadane).

    The empty run counts, so the result is never below 0.
    """
    best = 0
    ending_here = 0
    for value in items:
        ending_here = max(ending_here + value, 0)
        best = max(best, ending_here)
    return best


def max_subarray_product(items: Iterable[int]) -> int:
    """Return the largest product of a contiguous run of items.

    Products are tracked with 1 as the neutral floor; when no positive
    element occurs and no product above 1 is reached, the result is 0.
    """
    max_ending_here = 1
    min_ending_here = 1
    best = 1
    seen_positive = False
    for value in items:
        if value > 0:
            max_ending_here *= value
            min_ending_here = min(min_ending_here * value, 1)
            seen_positive = True
        elif value == 0:
            max_ending_here = 1
            min_ending_here = 1
        else:
            previous_max = max_ending_here
            max_ending_here = max(min_ending_here * value, 1)
            min_ending_here = previous_max * value
        best = max(best, max_ending_here)
    if not seen_positive and best == 1:
        return 0
    return best