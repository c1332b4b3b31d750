import random

from hypothesis import given
from hypothesis import strategies as st

from addchain.chain import Chain
from addchain.rand import AddsGenerator, SolverGenerator


class RecordingAlgorithm:
    def __init__(self):
        self.targets = []

    def __str__(self):
        return "fake"

    def find_chain(self, target):
        self.targets.append(target)
        return Chain([1, 2])


@given(st.integers(min_value=1, max_value=40), st.integers(min_value=0, max_value=2**32))
def test_adds_generator_produces_valid_chain(n, seed):
    chain = AddsGenerator(n, rng=random.Random(seed)).generate_chain()
    assert len(chain) == n
    assert chain.is_ascending()
    assert chain.program().evaluate() == chain


def test_adds_generator_name():
    assert str(AddsGenerator(10)) == "random_adds(10)"


def test_adds_generator_small():
    assert AddsGenerator(0).generate_chain() == [1]


def test_solver_generator_uses_algorithm():
    algorithm = RecordingAlgorithm()
    gen = SolverGenerator(8, algorithm, rng=random.Random(1))
    assert str(gen) == "random_solver(8,fake)"
    results = [gen.generate_chain() for _ in range(50)]
    assert all(r == [1, 2] for r in results)
    assert len(algorithm.targets) == 50
    assert all(0 <= t < 2**8 for t in algorithm.targets)


def test_solver_generator_deterministic_with_seed():
    a, b, c = RecordingAlgorithm(), RecordingAlgorithm(), RecordingAlgorithm()
    chains = []
    for alg, seed in ((a, 7), (b, 7), (c, 8)):
        gen = SolverGenerator(64, alg, rng=random.Random(seed))
        chains.append([gen.generate_chain() for _ in range(5)])
    assert chains[0] == [[1, 2]] * 5
    assert chains[1] == chains[0]
    assert len(a.targets) == 5
    assert all(0 <= t < 2**64 for t in a.targets)
    assert a.targets == b.targets
    assert a.targets != c.targets