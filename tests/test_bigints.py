import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from addchain.bigints import (
    contains_sorted,
    index,
    insert_sorted_unique,
    merge_unique,
    unique,
)


def test_contains_sorted_random():
    rng = random.Random(42)
    xs = sorted(rng.getrandbits(256) for _ in range(256))
    for x in xs:
        assert contains_sorted(x, xs)


def test_contains_sorted_missing():
    xs = [1, 3, 5, 9]
    assert not contains_sorted(4, xs)
    assert not contains_sorted(10, xs)
    assert not contains_sorted(0, [])


def test_index():
    assert index(5, [1, 5, 7, 5]) == 1


def test_index_missing():
    with pytest.raises(ValueError):
        index(4, [1, 2, 3])


def test_unique():
    assert unique([1, 1, 2, 3, 3, 3, 1]) == [1, 2, 3, 1]
    assert unique([]) == []


def test_merge_unique():
    assert merge_unique([1, 3, 5], [2, 3, 6]) == [1, 2, 3, 5, 6]


def test_insert_sorted_unique():
    assert insert_sorted_unique([1, 2, 4], 3) == [1, 2, 3, 4]
    assert insert_sorted_unique([1, 2, 4], 2) == [1, 2, 4]


sorted_sets = st.sets(st.integers()).map(sorted)


@given(sorted_sets, sorted_sets)
def test_merge_unique_is_sorted_union(xs, ys):
    assert merge_unique(xs, ys) == sorted(set(xs) | set(ys))


@given(sorted_sets, st.integers())
def test_insert_then_contains(xs, x):
    result = insert_sorted_unique(xs, x)
    assert contains_sorted(x, result)
    assert result == sorted(set(result))