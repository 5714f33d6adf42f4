# basicalgos

A collection of small, classic algorithms written as plain Python functions.
Each function takes ordinary Python values (ints, lists, lists of lists,
strings) and returns a result. Nothing reads from the keyboard or prints.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `basicalgos.searching`

- `linear_search(items, target)`: 1-based position of the first match, or `None`.
- `binary_search(items, target)`: 1-based position of a match in an ascending
  sequence, or `None`.

### `basicalgos.sorting`

Every function returns a new ascending list and leaves its input alone.

- `bubble_sort(items)`
- `insertion_sort(items)`
- `selection_sort(items)`
- `quicksort(items)`: last-element pivot.
- `merge_sorted(first, second)`: merges two ascending sequences; on ties the
  element from `first` comes first.

### `basicalgos.subarrays`

- `max_subarray_sum(items)`: Kadane's algorithm. The empty run counts, so the
  result is never below 0.
- `max_subarray_product(items)`: largest product of a contiguous run. When no
  positive element occurs and no product above 1 is reached, returns 0.

### `basicalgos.rearrange`

All functions return new lists, except `reverse_in_place`, which changes its
argument and returns `None`.

- `rotate_right(items)`: last element moves to the front.
- `delete_at(items, position)` and `insert_at(items, position, value)`:
  1-based positions; an out-of-range position raises `IndexError`.
- `swap_pairs(items)`: swaps elements 0↔1, 2↔3, …; an odd last element stays.
- `min_max(items)`: `(minimum, maximum)`; raises `ValueError` when empty.
- `order_by_sign(items)`: negatives, then positives, then zeros, keeping order.
- `reversed_copy(items)`, `reverse_in_place(items)`
- `reverse_halves(items)`: reverses each half separately; an odd middle stays.
- `swap_multiples_of_ten(items)`: swaps each multiple of ten with its successor.
- `swap_halves(items)`: exchanges the two halves; an odd middle stays.
- `interleave(first, second)`: alternates elements; raises `ValueError` if the
  lengths differ.

### `basicalgos.matrix`

Matrices are lists of rows. Results are new lists, except
`transpose_in_place`. Diagonal operations and `transpose_in_place` raise
`ValueError` for a non-square matrix.

- Flattening: `flatten_rows`, `flatten_columns`, `flatten_reversed`
- Sums: `alternate_sum`, `row_sums`, `column_sums`
- Diagonals: `diagonal_elements`, `exchange_diagonals`
- Row and column swaps: `swap_first_last_rows`, `swap_first_last_columns`
- Triangles: `upper_triangle`, `lower_triangle` (elements strictly above or
  below the main diagonal, per row)
- Transposition: `transpose`, `transpose_in_place`
- Comparison: `matrices_equal(first, second)`
- Generation: `staircase_matrix(values)`: row `i` keeps the first
  `len(values) - i` values, zeros after.

### `basicalgos.numbers`

- `factorial(n)`, `fibonacci(count)` (always at least `[0, 1]`),
  `is_prime(n)`, `is_armstrong(n)` (sum of cubes of the digits),
  `reverse_digits(n)`, `triangular_sum(n)`, `sum_of_odd_numbers(count=10)`
- `hcf_lcm(first, second)`: `(hcf, lcm)` of two positive integers.
- `digit_stats(n)`: a `DigitStats(total, largest, smallest)` named tuple.
- `smallest_largest(numbers)`: `(smallest, largest)`.
- `classify_characters(text)`: a `CharacterCounts(alphabets, digits, special)`
  named tuple; whitespace is ignored.
- `power(base, exponent)`: repeated multiplication, non-negative exponent.
- `newton_sqrt(value)`: Newton's iteration until the estimate settles.
- `odd_power_series(a, x, n)`: `x/a + x^3/3a + … + x^n/na`, `n` rounded up to odd.
- `cosine_series(x, n)`: `1 - x^2/2! + x^4/4! - …` in integer arithmetic, each
  term truncated toward zero, `n` rounded up to even.

### `basicalgos.patterns`

Patterns are returned as data, not printed.

- `spiral_numbers(n)`: a `(2n-1)`-square grid of rings counting down to 1.
- `star_triangle(rows=3)`, `star_pyramid(rows=3)`: lists of strings.
- `letter_triangle(last="D")`: rows `"A"`, `"A B"`, … up to `last`.

## Example

```python
from basicalgos.subarrays import max_subarray_product
from basicalgos.sorting import merge_sorted
from basicalgos.numbers import fibonacci

max_subarray_product([6, -3, -10, 0, 2])   # 180
merge_sorted([1, 4, 9], [2, 3, 10])        # [1, 2, 3, 4, 9, 10]
fibonacci(6)                               # [0, 1, 1, 2, 3, 5]
```

## What it does not do

There is no command-line program and no interactive prompting: the package is
a library of functions to call from Python code.