import random

from hypothesis import given
from hypothesis import strategies as st

from addchain.fp25519 import P, Elt

TRIALS = 1 << 6


def rand_elt(rng):
    return Elt(rng.randrange(1, P))


def test_modulus():
    assert P == 2**255 - 19
    assert int(Elt(P)) == 0
    assert Elt(2**255) == Elt(19)


def test_reduction():
    assert int(Elt(P + 5)) == 5
    assert int(Elt(-1)) == P - 1


def test_inv():
    rng = random.Random(1)
    for _ in range(TRIALS):
        x = rand_elt(rng)
        assert int(x.inverse()) == pow(int(x), -1, P)


def test_inv_twice_is_identity():
    rng = random.Random(2)
    for _ in range(TRIALS):
        x = rand_elt(rng)
        assert x.inverse().inverse() == x


@given(st.integers(min_value=1, max_value=P - 1))
def test_inverse_times_self_is_one(n):
    x = Elt(n)
    assert x * x.inverse() == Elt(1)


def test_inverse_of_zero_is_zero():
    assert Elt(0).inverse() == Elt(0)


def test_square():
    x = Elt(P - 3)
    assert x.square() == Elt(9)