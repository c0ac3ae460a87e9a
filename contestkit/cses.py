"""Solutions to introductory CSES problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

WALL = "#"


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n``."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return 1 << n


def coin_piles(a: int, b: int) -> bool:
    """Tell whether two piles can both be emptied by taking 1+2 or 2+1 coins."""
    return (a + b) % 3 == 0 and 2 * a >= b and 2 * b >= a


def count_rooms(grid: Iterable[str]) -> int:
    """Count connected regions of non-wall cells in a rectangular map.

    Cells holding ``#`` are walls; every other character is floor.
    """
    rows = list(grid)
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of the map must have the same length")

    floor = {
        (r, c)
        for r, row in enumerate(rows)
        for c, cell in enumerate(row)
        if cell != WALL
    }
    rooms = 0
    while floor:
        stack = [floor.pop()]
        while stack:
            r, c = stack.pop()
            for neighbour in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                if neighbour in floor:
                    floor.remove(neighbour)
                    stack.append(neighbour)
        rooms += 1
    return rooms


def distinct_count(values: Iterable[int]) -> int:
    """Return how many distinct values occur."""
    return len(set(values))


def number_spiral(row: int, col: int) -> int:
    """Return the number at (``row``, ``col``) of the infinite number spiral."""
    if row < 1 or col < 1:
        raise ValueError("row and column are numbered from 1")
    layer = max(row, col) - 1
    square = layer * layer
    if layer % 2:
        if row < col:
            return square + row
        return square + 2 * layer - col + 2
    if row < col:
        return square + 2 * layer - row + 2
    return square + col


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def two_knights(n: int) -> list[int]:
    """Return, for each board size k = 1..n, the ways to place two non-attacking knights."""
    results = []
    for k in range(1, n + 1):
        ways = 1 + (k - 1) * (k - 2) // 2
        results.append(ways * (k - 1) * (k + 4))
    return results


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the number of 1..n absent from ``numbers`` (which holds n - 1 of them)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    given = list(numbers)
    if len(given) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(given)}")
    return n * (n + 1) // 2 - sum(given)


def weird_algorithm(n: int) -> Iterator[int]:
    """Yield the Collatz sequence starting at ``n`` and ending at 1."""
    if n < 1:
        raise ValueError("the sequence is only defined for positive integers")
    return _collatz(n)


def _collatz(n: int) -> Iterator[int]:
    while n != 1:
        yield n
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    yield n