"""Addition chains and the programs that compute them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations_with_replacement, pairwise


class ChainError(ValueError):
    """Raised when a sequence is not a valid addition chain."""


@dataclass(frozen=True)
class Op:
    """An instruction to add positions i and j of a chain."""

    i: int
    j: int

    def is_double(self) -> bool:
        """Report whether this operation is a doubling."""
        return self.i == self.j

    def operands(self) -> list[int]:
        """Return the indices read by this operation (one for a doubling)."""
        return [self.i] if self.is_double() else [self.i, self.j]

    def uses(self, i: int) -> bool:
        """Report whether index i is one of the operands."""
        return i in (self.i, self.j)


class Program(list[Op]):
    """A sequence of operations producing an addition chain."""

    def shift(self, i: int, s: int) -> int:
        """Append s doublings of index i; return the index of the result."""
        for _ in range(s):
            i = self.double(i)
        return i

    def double(self, i: int) -> int:
        """Append a doubling of index i; return the index of the result."""
        return self.add(i, i)

    def add(self, i: int, j: int) -> int:
        """Append an addition of indices i and j; return the index of the result."""
        self._boundscheck(i)
        self._boundscheck(j)
        self.append(Op(i, j))
        return len(self)

    def _boundscheck(self, i: int) -> None:
        # The chain produced is one longer than the program.
        if i < 0:
            raise IndexError(f"negative index {i}")
        if i > len(self):
            raise IndexError(f"index {i} out of bounds")

    def doubles(self) -> int:
        """Return the number of doublings."""
        return self.count()[0]

    def adds(self) -> int:
        """Return the number of non-doubling additions."""
        return self.count()[1]

    def count(self) -> tuple[int, int]:  # type: ignore[override]
        """Return the number of doublings and additions."""
        doubles = sum(1 for op in self if op.is_double())
        return doubles, len(self) - doubles

    def evaluate(self) -> Chain:
        """Execute the program and return the resulting chain."""
        chain = Chain.minimal()
        for op in self:
            chain.append(chain[op.i] + chain[op.j])
        return chain

    def read_counts(self) -> list[int]:
        """Return how many times each index is read."""
        reads = [0] * (len(self) + 1)
        for op in self:
            for i in op.operands():
                reads[i] += 1
        return reads

    def dependencies(self) -> list[int]:
        """Return, for each position, a bitset of the positions it depends on."""
        bitsets = [1]
        for k, op in enumerate(self, start=1):
            bitsets.append(bitsets[op.i] | bitsets[op.j] | (1 << k))
        return bitsets


def _is_ascending(xs: Sequence[int]) -> bool:
    return bool(xs) and xs[0] == 1 and all(a < b for a, b in pairwise(xs))


class Chain(list[int]):
    """An addition chain."""

    @classmethod
    def minimal(cls) -> Chain:
        """Return the minimal chain [1]."""
        return cls([1])

    def end(self) -> int:
        """Return the last element."""
        return self[-1]

    def ops(self, k: int) -> list[Op]:
        """Return every operation producing position k; may be empty."""
        target = self[k]
        prefix = self[:k]
        if _is_ascending(prefix):
            found = []
            left, right = 0, k - 1
            while left <= right:
                s = prefix[left] + prefix[right]
                if s == target:
                    found.append(Op(left, right))
                if s <= target:
                    left += 1
                else:
                    right -= 1
            return found
        return [
            Op(i, j)
            for (i, a), (j, b) in combinations_with_replacement(enumerate(prefix), 2)
            if a + b == target
        ]

    def op(self, k: int) -> Op:
        """Return an operation producing position k."""
        found = self.ops(k)
        if not found:
            raise ChainError(f"position {k} is not the sum of previous entries")
        return found[0]

    def program(self) -> Program:
        """Return a program generating this chain."""
        if not self:
            raise ChainError("chain empty")
        if self[0] != 1:
            raise ChainError("chain must start with 1")
        if 0 in self:
            raise ChainError("chain contains zero")
        positions: dict[int, list[int]] = {}
        for k, x in enumerate(self):
            positions.setdefault(x, []).append(k)
        for x in self:
            found = positions[x]
            if len(found) > 1:
                raise ChainError(
                    f"chain contains duplicate: {x} at positions {found[0]} and {found[1]}"
                )
        return Program(self.op(k) for k in range(1, len(self)))

    def validate(self) -> None:
        """Raise ChainError unless this is an addition chain."""
        self.program()

    def produces(self, target: int) -> None:
        """Raise ChainError unless this is a valid chain ending with target."""
        self.validate()
        if self.end() != target:
            raise ChainError("chain does not end with target")

    def superset(self, targets: Iterable[int]) -> None:
        """Raise ChainError unless this is a valid chain containing all targets."""
        self.validate()
        for target in targets:
            if target not in self:
                raise ChainError(f"chain does not contain {target}")

    def is_ascending(self) -> bool:
        """Report whether the chain starts with 1 and strictly increases."""
        return _is_ascending(self)


def product(a: Sequence[int], b: Sequence[int]) -> Chain:
    """Return the product of two addition chains."""
    chain = Chain(a)
    last = chain.end()
    chain.extend(last * x for x in b[1:])
    return chain


def plus(a: Sequence[int], x: int) -> Chain:
    """Return the chain a extended by its last element plus x."""
    chain = Chain(a)
    chain.append(chain.end() + x)
    return chain