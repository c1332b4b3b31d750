"""Helpers for sequences of integers."""

from __future__ import annotations

import bisect
import heapq
from collections.abc import Iterable, Sequence


def index(n: int, xs: Sequence[int]) -> int:
    """Return the position of the first occurrence of n in xs.

    Raises ValueError if n does not appear.
    """
    for i, x in enumerate(xs):
        if x == n:
            return i
    raise ValueError(f"{n} is not in sequence")


def contains_sorted(n: int, xs: Sequence[int]) -> bool:
    """Report whether n is in the sorted sequence xs."""
    i = bisect.bisect_left(xs, n)
    return i < len(xs) and xs[i] == n


def unique(xs: Iterable[int]) -> list[int]:
    """Remove consecutive duplicates."""
    result: list[int] = []
    for x in xs:
        if not result or result[-1] != x:
            result.append(x)
    return result


def insert_sorted_unique(xs: Sequence[int], x: int) -> list[int]:
    """Insert x into a sorted sequence of distinct integers."""
    return merge_unique([x], xs)


def merge_unique(xs: Sequence[int], ys: Sequence[int]) -> list[int]:
    """Merge two sorted sequences of distinct integers, deduplicating."""
    return unique(heapq.merge(xs, ys))