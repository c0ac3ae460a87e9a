"""Solutions to assorted Codeforces problems."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from itertools import count


def max_points(values: Iterable[int]) -> int:
    """Return the points earned by adding evens first, then odds, to a running sum.

    A point is earned each time the sum turns even; the sum is then halved
    until it is odd.
    """
    items = list(values)
    if any(value < 1 for value in items):
        raise ValueError("values must be positive")
    ordered = [v for v in items if v % 2 == 0] + [v for v in items if v % 2]
    points = 0
    total = 0
    for value in ordered:
        total += value
        if total % 2 == 0:
            points += 1
            while total % 2 == 0:
                total //= 2
    return points


def next_above_max(n: int, m: int) -> int:
    """Return one more than the larger of ``n`` and ``m``."""
    return max(n, m) + 1


def min_distinct_after_changes(values: Iterable[int], k: int) -> int:
    """Return the fewest distinct values left after changing at most ``k`` elements.

    The rarest values are rewritten first; at least one value always remains.
    """
    frequencies = sorted(Counter(values).values())
    removed = 0
    for frequency in frequencies:
        if frequency > k:
            break
        removed += 1
        k -= frequency
    return max(1, len(frequencies) - removed)


def digit_sum(x: int) -> int:
    """Return the sum of the decimal digits of ``x``; zero for non-positive ``x``."""
    total = 0
    while x > 0:
        x, digit = divmod(x, 10)
        total += digit
    return total


def next_gcd_sum(x: int) -> int:
    """Return the smallest y >= x whose gcd with its digit sum exceeds 1."""
    return next(y for y in count(x) if math.gcd(digit_sum(y), y) > 1)