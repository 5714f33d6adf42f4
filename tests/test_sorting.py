import pytest

from basicalgos.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sorted,
    quicksort,
    selection_sort,
)

CASES = [
    [],
    [1],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, -1, 3, 0, -7, 12, 3],
    [2, 2, 2, 2],
    [100, -100, 50, -50, 0, 25, -25, 75, -75],
    list(range(300, 0, -1)),
]


@pytest.mark.parametrize("items", CASES)
def test_bubble_sort_matches_builtin(items):
    assert bubble_sort(items) == sorted(items)


@pytest.mark.parametrize("items", CASES)
def test_insertion_sort_matches_builtin(items):
    assert insertion_sort(items) == sorted(items)


@pytest.mark.parametrize("items", CASES)
def test_selection_sort_matches_builtin(items):
    assert selection_sort(items) == sorted(items)


@pytest.mark.parametrize("items", CASES)
def test_quicksort_matches_builtin(items):
    assert quicksort(items) == sorted(items)


def test_bubble_sort_does_not_modify_input():
    items = [9, 1, 8, 2, 7]
    assert bubble_sort(items) == [1, 2, 7, 8, 9]
    assert items == [9, 1, 8, 2, 7]


def test_insertion_sort_does_not_modify_input():
    items = [9, 1, 8, 2, 7]
    assert insertion_sort(items) == [1, 2, 7, 8, 9]
    assert items == [9, 1, 8, 2, 7]


def test_selection_sort_does_not_modify_input():
    items = [9, 1, 8, 2, 7]
    assert selection_sort(items) == [1, 2, 7, 8, 9]
    assert items == [9, 1, 8, 2, 7]


def test_quicksort_does_not_modify_input():
    items = [9, 1, 8, 2, 7]
    assert quicksort(items) == [1, 2, 7, 8, 9]
    assert items == [9, 1, 8, 2, 7]


def test_bubble_sort_accepts_iterables():
    assert bubble_sort(x for x in (4, 2, 6, 0)) == [0, 2, 4, 6]


def test_insertion_sort_accepts_iterables():
    assert insertion_sort(x for x in (4, 2, 6, 0)) == [0, 2, 4, 6]


def test_selection_sort_accepts_iterables():
    assert selection_sort(x for x in (4, 2, 6, 0)) == [0, 2, 4, 6]


def test_quicksort_accepts_iterables():
    assert quicksort(x for x in (4, 2, 6, 0)) == [0, 2, 4, 6]


def test_quicksort_handles_long_sorted_input():
    items = list(range(5000))
    assert quicksort(items) == items


@pytest.mark.parametrize(
    "first, second",
    [
        ([], []),
        ([1, 3, 5], []),
        ([], [2, 4]),
        ([1, 3, 5, 7], [2, 4, 6]),
        ([1, 2, 2, 9], [2, 2, 3]),
        ([-5, 0, 5], [-10, 10]),
    ],
)
def test_merge_sorted(first, second):
    merged = merge_sorted(first, second)
    assert merged == sorted(first + second)
    assert len(merged) == len(first) + len(second)