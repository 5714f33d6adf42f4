"""Operations on matrices held as lists of rows.

Functions that build a result return new lists; only transpose_in_place
changes its argument. Operations tied to diagonals need a square matrix.
"""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _require_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("a square matrix is required")
    return size


def flatten_rows(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in row-major order."""
    return [value for row in matrix for value in row]


def flatten_columns(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in column-major order."""
    return [value for column in zip(*matrix) for value in column]


def flatten_reversed(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in reversed row-major order."""
    return [value for row in reversed(matrix) for value in reversed(row)]


def alternate_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum every other element in row-major order, starting with the first."""
    return sum(flatten_rows(matrix)[::2])


def diagonal_elements(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements on either diagonal, in row-major order."""
    size = _require_square(matrix)
    return [
        value
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if r == c or r + c == size - 1
    ]


def swap_first_last_columns(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy with the first and last columns exchanged."""
    result = [list(row) for row in matrix]
    for row in result:
        if row:
            row[0], row[-1] = row[-1], row[0]
    return result


def exchange_diagonals(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy where, in each row, the two diagonal entries trade places."""
    size = _require_square(matrix)
    result = [list(row) for row in matrix]
    for r, row in enumerate(result):
        anti = size - 1 - r
        row[r], row[anti] = row[anti], row[r]
    return result


def swap_first_last_rows(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a copy with the first and last rows exchanged."""
    result = [list(row) for row in matrix]
    if result:
        result[0], result[-1] = result[-1], result[0]
    return result


def upper_triangle(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return, for each row, the elements strictly above the main diagonal."""
    return [list(row[r + 1 :]) for r, row in enumerate(matrix)]


def lower_triangle(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return, for each row, the elements strictly below the main diagonal."""
    return [list(row[:r]) for r, row in enumerate(matrix)]


def matrices_equal(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> bool:
    """Return True when both matrices have the same shape and elements."""
    if len(first) != len(second):
        return False
    return all(list(a) == list(b) for a, b in zip(first, second))


def staircase_matrix(values: Sequence[int]) -> Matrix:
    """Build a square matrix whose row i keeps the first len(values) - i values.

    Entries past that point are zero, giving a staircase of zeros.
    """
    size = len(values)
    return [
        [value if i + j < size else 0 for j, value in enumerate(values)]
        for i in range(size)
    ]


def row_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the sum of each column."""
    return [sum(column) for column in zip(*matrix)]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return a new matrix with rows and columns exchanged."""
    return [list(column) for column in zip(*matrix)]


def transpose_in_place(matrix: list[list[int]]) -> None:
    """Transpose a square matrix by swapping entries across the diagonal."""
    size = _require_square(matrix)
    for r in range(size):
        for c in range(r):
            matrix[r][c], matrix[c][r] = matrix[c][r], matrix[r][c]