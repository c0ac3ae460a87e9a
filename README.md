# contestkit

A small collection of solutions to well-known competitive-programming
problems. Each solution is a plain Python function. It takes ordinary
Python values and returns its answer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `contestkit.cses`

- `bit_strings(n)` returns the number of bit strings of length `n`, which is `2**n`.
- `coin_piles(a, b)` tells whether two piles can be emptied by repeatedly
  taking one coin from one pile and two from the other.
- `count_rooms(grid)` counts the connected regions of non-`#` cells in a
  rectangular map given as a list of strings.
- `distinct_count(values)` returns the number of distinct values.
- `number_spiral(row, col)` returns the number at a cell of the infinite
  number spiral. Rows and columns are numbered from 1.
- `is_palindrome(text)` tells whether `text` reads the same backwards.
- `trailing_zeros(n)` returns the number of trailing zeros of `n!`.
- `two_knights(n)` returns a list with one entry for each board size from
  1 to `n`. Each entry is the number of ways to place two knights so that
  neither attacks the other.
- `missing_number(n, numbers)` returns the number from 1 to `n` that is
  absent from the `n - 1` numbers given.
- `weird_algorithm(n)` returns an iterator over the Collatz sequence that
  starts at `n` and ends at 1.

### `contestkit.codeforces`

- `max_points(values)` adds the even values and then the odd values to a
  running sum. It counts a point each time the sum turns even, and after
  each point it halves the sum until the sum is odd.
- `next_above_max(n, m)` returns `max(n, m) + 1`.
- `min_distinct_after_changes(values, k)` returns the fewest distinct
  values that can remain after changing at most `k` elements. At least one
  value always remains.
- `digit_sum(x)` returns the sum of the decimal digits of `x`. It returns
  0 when `x` is not positive.
- `next_gcd_sum(x)` returns the smallest `y >= x` such that `gcd(y, digit_sum(y)) > 1`.

### `contestkit.icpc`

- `has_unbalanced_value(values)` tells whether some value occurs a number
  of times that is not a multiple of 3.
- `duplicate_count(text)` returns `len(text)` minus the number of distinct
  characters in `text`.
- `umbrella_plan(at_home, at_work, days)` decides for each day whether an
  umbrella is carried to work and whether one is carried back home. `days`
  holds one `(morning_rain, evening_rain)` pair per day. The result holds
  one `(morning, evening)` pair per day.
- `arrange_pieces(k, n)` lays out `k` pieces `X` on a strip of `n` cells
  and returns the layout as a string. It returns `None` when this is impossible.
- `shadow_length(angle, buildings)` returns the total length of ground
  covered by the shadows of buildings, given as `(position, height)` pairs,
  when the sun stands `angle` degrees above the horizon.
- `alternating_cost(text)` returns the fewest bit flips that make `text`
  alternate, together with the resulting string.
- `break_runs(k, text)` flips bits so that no run of equal bits reaches
  length `k`. It returns the number of flips and the resulting string.

### `contestkit.leetcode`

- `max_area(heights)` returns the most water two of the lines can hold.
- `last_occurrence(haystack, needle)` returns the index of the last
  occurrence of `needle` in `haystack`, or -1.
- `search_insert(nums, target)` returns the index of the first value that
  is not below `target`. If there is none, it returns the length of `nums`.
- `longest_unique_substring(text)` returns the length of the longest
  substring that has no repeated characters.
- `merge_sorted(first, second)` merges two sorted sequences into one sorted list.
- `longest_palindrome(text)` returns the longest block of one repeated
  character. If several blocks of two or more characters are equally long,
  it returns the last of them. If no character repeats, it returns the
  first character.

Invalid input raises `ValueError`.

```python
from contestkit.cses import trailing_zeros, number_spiral
from contestkit.leetcode import max_area

trailing_zeros(20)                        # 4
number_spiral(2, 3)                       # 8
max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])     # 49
```

## Command line

The `contestkit` command reads whitespace-separated integers from standard
input. It runs one of three solvers and prints one answer per line:

- `contestkit spiral` reads a count `t`, then `t` pairs `row col`. It
  prints the spiral number of each cell.
- `contestkit pieces` reads `k n`. It prints the layout, or `*` when no
  layout exists.
- `contestkit points` reads a count `t`. Then, for each case, it reads a
  size followed by that many values, and prints `max_points` for the case.

```
echo "3 2 3 1 1 4 2" | contestkit spiral
contestkit --help
```

When the input ends early or holds invalid values, the command reports an
error and exits with status 2.

## What it does not do

The command line covers only the three solvers listed above. All the
other solutions can be used only from Python.