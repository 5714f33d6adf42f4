"""Rearrangements of integer sequences: shifts, swaps, reversals, edits.

Positions taken by insert_at and delete_at are 1-based. Apart from
reverse_in_place, every function returns a new list.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def rotate_right(items: Iterable[int]) -> list[int]:
    """Shift each element one place right, moving the last to the front."""
    values = list(items)
    return values[-1:] + values[:-1]


def delete_at(items: Iterable[int], position: int) -> list[int]:
    """Return items without the element at the 1-based position."""
    values = list(items)
    if not 1 <= position <= len(values):
        raise IndexError(f"position {position} out of range 1..{len(values)}")
    del values[position - 1]
    return values


def swap_pairs(items: Iterable[int]) -> list[int]:
    """Swap each element at an even index with the one after it.

    With an odd count the last element has no partner and stays put.
    """
    values = list(items)
    even = len(values) - len(values) % 2
    values[0:even:2], values[1:even:2] = values[1:even:2], values[0:even:2]
    return values


def insert_at(items: Iterable[int], position: int, value: int) -> list[int]:
    """Return items with value inserted at the 1-based position."""
    values = list(items)
    if not 1 <= position <= len(values) + 1:
        raise IndexError(f"position {position} out of range 1..{len(values) + 1}")
    values.insert(position - 1, value)
    return values


def min_max(items: Iterable[int]) -> tuple[int, int]:
    """Return (minimum, maximum) of items."""
    values = list(items)
    if not values:
        raise ValueError("min_max() of an empty sequence")
    return min(values), max(values)


def order_by_sign(items: Iterable[int]) -> list[int]:
    """Negatives first, then positives, then zeros, keeping relative order."""
    values = list(items)
    negatives = [v for v in values if v < 0]
    positives = [v for v in values if v > 0]
    zeros = [v for v in values if v == 0]
    return negatives + positives + zeros


def reversed_copy(items: Iterable[int]) -> list[int]:
    """Return a new list holding items in reverse order."""
    return list(items)[::-1]


def reverse_in_place(items: MutableSequence[int]) -> None:
    """Reverse items in place by swapping from both ends."""
    left, right = 0, len(items) - 1
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def reverse_halves(items: Iterable[int]) -> list[int]:
    """Reverse the first half and the second half separately.

    With an odd count the middle element stays where it is.
    """
    values = list(items)
    half = len(values) // 2
    middle = values[half : len(values) - half]
    return values[:half][::-1] + middle + values[len(values) - half :][::-1]


def swap_multiples_of_ten(items: Iterable[int]) -> list[int]:
    """Swap each multiple of ten with its successor, skipping past the swap.

    The last element is never swapped forward.
    """
    values = list(items)
    i = 0
    while i < len(values) - 1:
        if values[i] % 10 == 0:
            values[i], values[i + 1] = values[i + 1], values[i]
            i += 2
        else:
            i += 1
    return values


def swap_halves(items: Iterable[int]) -> list[int]:
    """Exchange the first half with the second half.

    With an odd count the middle element stays where it is.
    """
    values = list(items)
    half = len(values) // 2
    n = len(values)
    return values[n - half :] + values[half : n - half] + values[:half]


def interleave(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Alternate elements: even positions from first, odd positions from second."""
    a, b = list(first), list(second)
    if len(a) != len(b):
        raise ValueError("interleave() needs sequences of equal length")
    return [value for pair in zip(a, b) for value in pair]