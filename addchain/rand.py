"""Random addition chain generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from .bigint import rand_bits
from .bigints import insert_sorted_unique
from .chain import Chain


class ChainAlgorithm(Protocol):
    """An algorithm that builds a chain for a target."""

    def find_chain(self, target: int) -> Chain: ...


class Generator(ABC):
    """Generates random addition chains."""

    @abstractmethod
    def generate_chain(self) -> Chain:
        """Return a random addition chain."""


@dataclass
class AddsGenerator(Generator):
    """Builds a random chain of n elements by adding random earlier elements."""

    n: int
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def __str__(self) -> str:
        return f"random_adds({self.n})"

    def generate_chain(self) -> Chain:
        values = [1]
        while len(values) < self.n:
            i = self.rng.randrange(len(values))
            j = self.rng.randrange(len(values))
            values = insert_sorted_unique(values, values[i] + values[j])
        return Chain(values)


@dataclass
class SolverGenerator(Generator):
    """Solves random n-bit targets with a chain algorithm."""

    n: int
    algorithm: ChainAlgorithm
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def __str__(self) -> str:
        return f"random_solver({self.n},{self.algorithm})"

    def generate_chain(self) -> Chain:
        target = rand_bits(self.rng, self.n)
        return self.algorithm.find_chain(target)