"""Printable number, star and letter patterns."""

from __future__ import annotations

import string


def spiral_numbers(n: int) -> list[list[int]]:
    """Return the (2n-1)-square grid of concentric rings counting down to 1 at the centre."""
    size = 2 * n - 1
    if size <= 0:
        return []
    return [
        [n - min(i, j, size - 1 - i, size - 1 - j) for j in range(size)]
        for i in range(size)
    ]


def star_triangle(rows: int = 3) -> list[str]:
    """Return a left-aligned triangle of stars, one more per row."""
    return ["*" * count for count in range(1, rows + 1)]


def star_pyramid(rows: int = 3) -> list[str]:
    """Return a centred pyramid of stars with odd widths."""
    return [" " * (rows - 1 - i) + "*" * (2 * i + 1) for i in range(rows)]


def letter_triangle(last: str = "D") -> list[str]:
    """Return rows 'A', 'A B', ... up to the row ending with last."""
    if len(last) != 1 or last not in string.ascii_uppercase:
        raise ValueError("last must be a single uppercase letter A-Z")
    end = string.ascii_uppercase.index(last) + 1
    return [" ".join(string.ascii_uppercase[: i + 1]) for i in range(end)]