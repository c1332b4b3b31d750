"""Arithmetic in the field of integers modulo 2^255 - 19."""

from __future__ import annotations

from dataclasses import dataclass

P = 57896044618658097711785492504343953926634992332820282019728792003956564819949
"""The field prime modulus."""


@dataclass(frozen=True)
class Elt:
    """An element of the field modulo P, held reduced to [0, P)."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % P)

    def __int__(self) -> int:
        return self.value

    def __mul__(self, other: Elt) -> Elt:
        return Elt(self.value * other.value)

    def square(self) -> Elt:
        """Return the square of this element."""
        return self * self

    def _square_n(self, n: int) -> Elt:
        z = self
        for _ in range(n):
            z = z.square()
        return z

    def inverse(self) -> Elt:
        """Return the multiplicative inverse, computed by an addition chain.

        The chain, in which each value is an exponent of x:

            _10       = 2*1
            _11       = 1 + _10
            _1100     = _11 << 2
            _1111     = _11 + _1100
            _11110000 = _1111 << 4
            _11111111 = _1111 + _11110000
            x10       = _11111111 << 2 + _11
            x20       = x10 << 10 + x10
            x30       = x20 << 10 + x10
            x60       = x30 << 30 + x30
            x120      = x60 << 60 + x60
            x240      = x120 << 120 + x120
            x250      = x240 << 10 + x10
            return      (x250 << 2 + 1) << 3 + _11

        254 squares and 12 multiplies. The inverse of zero is zero.
        """
        x = self
        t0 = x.square() * x  # _11
        t1 = t0._square_n(2) * t0  # _1111
        t1 = t1._square_n(4) * t1  # _11111111
        t1 = t1._square_n(2) * t0  # x10
        t2 = t1._square_n(10) * t1  # x20
        t2 = t2._square_n(10) * t1  # x30
        t2 = t2._square_n(30) * t2  # x60
        t2 = t2._square_n(60) * t2  # x120
        t2 = t2._square_n(120) * t2  # x240
        t1 = t2._square_n(10) * t1  # x250
        t4 = t1._square_n(2) * x
        return t4._square_n(3) * t0