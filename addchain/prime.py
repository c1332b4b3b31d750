"""Representations of classes of prime numbers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .bigint import parse_hex, pow2
from .polynomial import Polynomial, Term


class Prime(ABC):
    """A prime number with a known structure."""

    @abstractmethod
    def bits(self) -> int:
        """Return the number of bits required to represent the prime."""

    @abstractmethod
    def to_int(self) -> int:
        """Return the prime as an integer."""

    def __int__(self) -> int:
        return self.to_int()


@dataclass(frozen=True)
class Crandall(Prime):
    """A prime of the form 2^n - c."""

    n: int
    c: int

    def bits(self) -> int:
        return self.n

    def to_int(self) -> int:
        return pow2(self.n) - self.c

    def __str__(self) -> str:
        return f"2^{self.n}{-self.c:+d}"


@dataclass(frozen=True)
class Solinas(Prime):
    """A generalized Mersenne prime f(2^k) for a low-degree polynomial f."""

    f: Polynomial
    k: int

    def bits(self) -> int:
        return self.f.degree() * self.k

    def to_int(self) -> int:
        return self.f.evaluate(pow2(self.k))

    def __str__(self) -> str:
        scaled = Polynomial(Term(t.a, t.n * self.k) for t in self.f)
        return scaled.format("2")


@dataclass(frozen=True)
class Other(Prime):
    """A prime with no more specific structure."""

    p: int

    def bits(self) -> int:
        return self.p.bit_length()

    def to_int(self) -> int:
        return self.p

    def __str__(self) -> str:
        return f"{self.p:x}"


def from_hex(p: str) -> Other:
    """Build a prime from a hex literal; raises ValueError if malformed."""
    return Other(parse_hex(p))