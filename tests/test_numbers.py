import math

import pytest

from basicalgos.numbers import (
    classify_characters,
    cosine_series,
    digit_stats,
    factorial,
    fibonacci,
    hcf_lcm,
    is_armstrong,
    is_prime,
    newton_sqrt,
    odd_power_series,
    power,
    reverse_digits,
    smallest_largest,
    sum_of_odd_numbers,
    triangular_sum,
)


def test_armstrong_numbers_below_thousand():
    assert [n for n in range(1000) if is_armstrong(n)] == [0, 1, 153, 370, 371, 407]


def test_negative_is_not_armstrong():
    assert is_armstrong(-153) is False


def test_classify_letters_only():
    text = "HelloWorld"
    assert classify_characters(text) == (len(text), 0, 0)


def test_classify_ignores_whitespace_and_totals():
    text = "a1 #B 9 ?\t"
    counts = classify_characters(text)
    assert sum(counts) == len("".join(text.split()))
    assert counts.digits == 2


def test_classify_mixed():
    assert classify_characters("aZ9#") == (2, 1, 1)


@pytest.mark.parametrize("n", [0, 7, 1230, 98765, -4021])
def test_digit_stats_invariants(n):
    digits = [int(ch) for ch in str(abs(n))]
    stats = digit_stats(n)
    assert stats.total == sum(digits)
    assert stats.largest == max(digits)
    assert stats.smallest == min(digits)


def test_smallest_largest_matches_builtins():
    values = [5, -3, 12, 0, 7]
    assert smallest_largest(values) == (min(values), max(values))


def test_smallest_largest_empty():
    with pytest.raises(ValueError):
        smallest_largest([])


@pytest.mark.parametrize("n", [0, 1, 5, 12, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_recurrence():
    terms = fibonacci(15)
    assert len(terms) == 15
    assert terms[:2] == [0, 1]
    assert all(terms[i] == terms[i - 1] + terms[i - 2] for i in range(2, len(terms)))


def test_fibonacci_always_two_terms():
    assert fibonacci(1) == [0, 1]


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (1, 9)])
def test_hcf_lcm_matches_math(a, b):
    assert hcf_lcm(a, b) == (math.gcd(a, b), math.lcm(a, b))


def test_hcf_lcm_rejects_zero():
    with pytest.raises(ValueError):
        hcf_lcm(0, 5)


@pytest.mark.parametrize("base,exponent", [(2, 10), (3.5, 3), (7, 0), (-2, 5)])
def test_power_matches_operator(base, exponent):
    assert power(base, exponent) == pytest.approx(base**exponent)


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("value", [0.0, 1.0, 2.0, 49.0, 1e6, 0.25])
def test_newton_sqrt_close_to_math(value):
    assert newton_sqrt(value) == pytest.approx(math.sqrt(value))


def test_newton_sqrt_negative():
    with pytest.raises(ValueError):
        newton_sqrt(-4)


def test_composites_are_not_prime():
    assert not any(is_prime(p * q) for p in range(2, 12) for q in range(2, 12))


def test_below_two_not_prime():
    assert not any(is_prime(n) for n in (-7, 0, 1))


def test_reverse_digits_round_trip():
    for n in (12345, -908, 7, 1001):
        assert reverse_digits(reverse_digits(n)) == n


def test_reverse_digits_drops_trailing_zeros():
    assert reverse_digits(1200) == 21


def test_odd_power_series_rounds_even_n_up():
    assert odd_power_series(3, 2, 4) == pytest.approx(odd_power_series(3, 2, 5))


def test_odd_power_series_scales_with_a():
    assert odd_power_series(4, 3, 7) == pytest.approx(odd_power_series(2, 3, 7) / 2)


def test_odd_power_series_rejects_zero_a():
    with pytest.raises(ValueError):
        odd_power_series(0, 1, 3)


def test_cosine_series_zero_x_and_odd_n():
    assert cosine_series(0, 10) == 1
    assert cosine_series(3, 5) == cosine_series(3, 6)


@pytest.mark.parametrize("n", [0, 1, 4, 10, 25])
def test_triangular_sum_closed_form(n):
    assert triangular_sum(n) == n * (n + 1) * (n + 2) // 6


@pytest.mark.parametrize("count", [0, 1, 10, 33])
def test_sum_of_odd_numbers_is_square(count):
    assert sum_of_odd_numbers(count) == count * count


def test_sum_of_odd_numbers_default():
    assert sum_of_odd_numbers() == sum_of_odd_numbers(10)