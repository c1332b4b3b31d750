"""Operations on immutable vectors of integers."""

from __future__ import annotations

from collections.abc import Sequence


def zeros(n: int) -> tuple[int, ...]:
    """Return the n-dimensional zero vector."""
    return (0,) * n


def basis(n: int, i: int) -> tuple[int, ...]:
    """Return the n-dimensional basis vector with a 1 in position i."""
    return tuple(1 if j == i else 0 for j in range(n))


def add(u: Sequence[int], v: Sequence[int]) -> tuple[int, ...]:
    """Add two vectors of the same length."""
    if len(u) != len(v):
        raise ValueError("vector length mismatch")
    return tuple(a + b for a, b in zip(u, v))


def lsh(v: Sequence[int], s: int) -> tuple[int, ...]:
    """Left shift every element of v by s bits."""
    return tuple(x << s for x in v)