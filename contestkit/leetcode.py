"""Solutions to classic array and string interview problems."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import groupby


def max_area(heights: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    start, end = 0, len(heights) - 1
    best = 0
    while start < end:
        best = max(best, min(heights[start], heights[end]) * (end - start))
        if heights[start] < heights[end]:
            start += 1
        else:
            end -= 1
    return best


def last_occurrence(haystack: str, needle: str) -> int:
    """Return the index of the last occurrence of ``needle``, or -1."""
    return haystack.rfind(needle)


def search_insert(nums: Iterable[int], target: int) -> int:
    """Return the index of the first value not below ``target``, or the length."""
    values = list(nums)
    return next((i for i, value in enumerate(values) if value >= target), len(values))


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    window_start = 0
    best = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= window_start:
            window_start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - window_start + 1)
    return best


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    return list(heapq.merge(first, second))


def longest_palindrome(text: str) -> str:
    """Return the longest block of one repeated character in ``text``.

    Such a block is always a palindrome. Among equally long blocks of two or
    more characters the last wins; when no character repeats, the first
    character is returned.
    """
    if not text:
        return ""
    best = text[0]
    for _, group in groupby(text):
        block = "".join(group)
        if len(block) >= 2 and len(block) >= len(best):
            best = block
    return best