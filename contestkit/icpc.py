"""Solutions to problems from a Brazilian ICPC final and its warm-up."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from itertools import groupby


def has_unbalanced_value(values: Iterable[int]) -> bool:
    """Tell whether some value occurs a number of times that is not a multiple of 3."""
    return any(count % 3 for count in Counter(values).values())


def duplicate_count(text: str) -> int:
    """Return how many characters of ``text`` repeat one seen before."""
    return len(text) - len(set(text))


def umbrella_plan(
    at_home: int, at_work: int, days: Iterable[tuple[bool, bool]]
) -> list[tuple[bool, bool]]:
    """Decide, day by day, whether to carry an umbrella to work and back home.

    ``days`` holds, for each day, whether it rains in the morning and in the
    evening. An umbrella is carried when it rains or when none is left at the
    destination. The result holds one (morning, evening) pair per day.
    """
    plan = []
    for morning_rain, evening_rain in days:
        morning = morning_rain or at_work == 0
        if morning:
            at_home -= 1
            at_work += 1
        evening = evening_rain or at_home == 0
        if evening:
            at_work -= 1
            at_home += 1
        plan.append((morning, evening))
    return plan


def arrange_pieces(k: int, n: int) -> str | None:
    """Lay ``k`` pieces ``X`` on a strip of ``n`` cells, or return None if impossible."""
    if n < 2 * k - 1 or 3 * k < n:
        return None
    if n == 2 * k - 1:
        return "-".join("X" * k)
    return "X-" * (3 * k - n) + "-X-" * (n - 2 * k)


def shadow_length(angle: float, buildings: Iterable[tuple[float, float]]) -> float:
    """Return the total ground length covered by the shadows of the buildings.

    The sun stands ``angle`` degrees above the horizon; each building is given
    as (position, height) and casts its shadow towards increasing positions.
    """
    theta = math.radians(angle)
    sine = math.sin(theta)
    if sine == 0:
        raise ValueError("the sun must stand above the horizon")
    cotangent = math.cos(theta) / sine
    intervals = sorted((x, x + h * cotangent) for x, h in buildings)

    total = 0.0
    covered_until = 0.0
    for start, end in intervals:
        if end > covered_until:
            total += end - max(covered_until, start)
            covered_until = end
    return total


def alternating_cost(text: str) -> tuple[int, str]:
    """Return the fewest flips making ``text`` alternate, and the resulting string.

    On a tie the pattern starting with ``1`` is chosen.
    """
    length = len(text)
    best: tuple[int, str] | None = None
    for pattern in (("01" * length)[:length], ("10" * length)[:length]):
        cost = sum(a != b for a, b in zip(text, pattern))
        if best is None or cost <= best[0]:
            best = (cost, pattern)
    assert best is not None
    return best


_FLIPPED = {"0": "1", "1": "0"}


def break_runs(k: int, text: str) -> tuple[int, str]:
    """Flip the fewest bits so no run of equal bits reaches length ``k``.

    Returns the number of flips and the resulting string.
    """
    if k < 2:
        raise ValueError("k must be at least 2")
    if k == 2:
        return alternating_cost(text)

    chars = list(text)
    operations = 0
    start = 0
    for _, group in groupby(text):
        length = sum(1 for _ in group)
        flips = length // k
        for step in range(1, flips + 1):
            position = start + step * k - 1
            if step == flips and length % k == 0:
                position -= 1
            chars[position] = _FLIPPED.get(chars[position], "0")
        operations += flips
        start += length
    return operations, "".join(chars)