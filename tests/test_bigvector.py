import pytest
from hypothesis import given
from hypothesis import strategies as st

from addchain.bigvector import add, basis, lsh, zeros

vectors = st.lists(st.integers(), max_size=8).map(tuple)


def test_zeros():
    assert zeros(4) == (0, 0, 0, 0)


def test_basis():
    assert basis(3, 1) == (0, 1, 0)


def test_add_basis_vectors():
    assert add(basis(3, 0), basis(3, 2)) == (1, 0, 1)


@given(vectors)
def test_add_zero_identity(v):
    assert add(zeros(len(v)), v) == v


@given(st.data())
def test_add_commutative(data):
    n = data.draw(st.integers(min_value=0, max_value=8))
    u = data.draw(st.lists(st.integers(), min_size=n, max_size=n))
    v = data.draw(st.lists(st.integers(), min_size=n, max_size=n))
    assert add(u, v) == add(v, u)


@given(vectors)
def test_double_is_shift(v):
    assert add(v, v) == lsh(v, 1)


@given(vectors, st.integers(min_value=0, max_value=64), st.integers(min_value=0, max_value=64))
def test_lsh_composes(v, a, b):
    assert lsh(lsh(v, a), b) == lsh(v, a + b)


def test_add_length_mismatch():
    with pytest.raises(ValueError):
        add(zeros(2), zeros(3))


@given(st.integers(min_value=1, max_value=16), st.data())
def test_basis_has_single_one(n, data):
    i = data.draw(st.integers(min_value=0, max_value=n - 1))
    v = basis(n, i)
    assert len(v) == n
    assert v[i] == 1
    assert sum(v) == 1