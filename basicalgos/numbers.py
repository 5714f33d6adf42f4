"""Number exercises: digits, factorials, sequences, roots and series."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class CharacterCounts(NamedTuple):
    alphabets: int
    digits: int
    special: int


class DigitStats(NamedTuple):
    total: int
    largest: int
    smallest: int


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Return True when n equals the sum of the cubes of its digits."""
    if n < 0:
        return False
    return sum(d**3 for d in _digits(n)) == n


def classify_characters(text: str) -> CharacterCounts:
    """Count ASCII letters, digits and other characters, ignoring whitespace."""
    alphabets = digits = special = 0
    for ch in text:
        if ch.isspace():
            continue
        if ch.isascii() and ch.isalpha():
            alphabets += 1
        elif "0" <= ch <= "9":
            digits += 1
        else:
            special += 1
    return CharacterCounts(alphabets, digits, special)


def digit_stats(n: int) -> DigitStats:
    """Return the sum, largest and smallest of the decimal digits of |n|."""
    digits = _digits(n)
    return DigitStats(sum(digits), max(digits), min(digits))


def smallest_largest(numbers: Iterable[int]) -> tuple[int, int]:
    """Return (smallest, largest) of the numbers."""
    values = list(numbers)
    if not values:
        raise ValueError("smallest_largest() needs at least one number")
    return min(values), max(values)


def factorial(n: int) -> int:
    """Return n! computed by repeated multiplication."""
    if n < 0:
        raise ValueError("factorial() is not defined for negative numbers")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def fibonacci(count: int) -> list[int]:
    """Return the first terms of the Fibonacci series, starting 0, 1.

    The two opening terms are always produced, so fewer than two are never returned.
    """
    terms = [0, 1]
    while len(terms) < count:
        terms.append(terms[-1] + terms[-2])
    return terms


def hcf_lcm(first: int, second: int) -> tuple[int, int]:
    """Return (highest common factor, lowest common multiple) of two positive integers."""
    if first <= 0 or second <= 0:
        raise ValueError("hcf_lcm() needs positive integers")
    hcf = max(
        (i for i in range(1, min(first, second) + 1) if first % i == 0 and second % i == 0)
    )
    return hcf, first * second // hcf


def power(base: float, exponent: int) -> float:
    """Return base raised to a non-negative integer exponent by repeated multiplication."""
    if exponent < 0:
        raise ValueError("power() needs a non-negative exponent")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def newton_sqrt(value: float) -> float:
    """Return the square root of value by Newton's iteration until it settles."""
    if value < 0:
        raise ValueError("newton_sqrt() of a negative number")
    if value == 0:
        return 0.0
    guess = value / 2
    seen: set[float] = set()
    while guess not in seen:
        seen.add(guess)
        guess = (value / guess + guess) / 2
    return guess


def is_prime(n: int) -> bool:
    """Return True when n is a prime number."""
    if n < 2:
        return False
    return all(n % i for i in range(2, n // 2 + 1))


def reverse_digits(n: int) -> int:
    """Return n with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def odd_power_series(a: int, x: int, n: int) -> float:
    """Sum x/a + x^3/3a + x^5/5a + ... up to x^n/na, rounding n up to odd."""
    if a == 0:
        raise ValueError("odd_power_series() needs a non-zero a")
    if n % 2 == 0:
        n += 1
    return sum(x**i / (a * i) for i in range(1, n + 1, 2))


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def cosine_series(x: int, n: int) -> int:
    """Sum 1 - x^2/2! + x^4/4! - ... up to x^n/n! in integer arithmetic.

    n is rounded up to even and each term is truncated toward zero.
    """
    if n % 2 == 1:
        n += 1
    total = 1
    sign = -1
    for i in range(2, n + 1, 2):
        total += _truncating_div(sign * x**i, factorial(i))
        sign = -sign
    return total


def triangular_sum(n: int) -> int:
    """Sum (1) + (1+2) + (1+2+3) + ... over n terms."""
    total = 0
    running = 0
    for i in range(1, n + 1):
        running += i
        total += running
    return total


def sum_of_odd_numbers(count: int = 10) -> int:
    """Return the sum of the first count odd numbers."""
    return sum(range(1, 2 * count, 2))