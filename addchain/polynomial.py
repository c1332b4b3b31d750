"""Single-variable polynomials with integer coefficients."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Term:
    """The term a*x^n of a polynomial."""

    a: int
    n: int

    def __str__(self) -> str:
        return str(Polynomial([self]))

    def evaluate(self, x: int) -> int:
        """Evaluate the term at x."""
        return self.a * x**self.n


@dataclass(frozen=True)
class Polynomial:
    """A polynomial; terms are expected in increasing order of exponent."""

    terms: tuple[Term, ...] = field(default_factory=tuple)

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        object.__setattr__(self, "terms", tuple(terms))

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __str__(self) -> str:
        return self.format("x")

    def format(self, v: str) -> str:
        """Format the polynomial using v as the variable name."""
        parts = []
        for t in reversed(self.terms):
            if t.n == 0:
                parts.append(f"{t.a:+d}")
                continue
            if t.a == 1:
                parts.append("+")
            elif t.a == -1:
                parts.append("-")
            else:
                parts.append(f"{t.a:+d}")
            parts.append(v)
            if t.n > 1:
                parts.append(f"^{t.n}")
        return "".join(parts).removeprefix("+")

    def degree(self) -> int:
        """Return the highest exponent."""
        return max((t.n for t in self.terms), default=0)

    def evaluate(self, x: int) -> int:
        """Evaluate the polynomial at x."""
        return sum(t.evaluate(x) for t in self.terms)