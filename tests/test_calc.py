import pytest
from hypothesis import given
from hypothesis import strategies as st

from addchain.calc import CalcError, evaluate


@pytest.mark.parametrize(
    "expr, expect",
    [
        ("2", 2),
        ("34534", 34534),
        ("-42", -42),
        ("-0xab", -0xAB),
        ("0b1011", 11),
        ("15-2", 15 - 2),
        ("15+2", 15 + 2),
        ("15/2", 15 // 2),
        ("15*2", 15 * 2),
        ("2^10", 1 << 10),
        (" 2   ^ 10   ", 1 << 10),
        ("15+2-9", 15 + 2 - 9),
        ("15+2*9", 15 + 2 * 9),
        ("15+9/2", 15 + 9 // 2),
        ("15+2^9", 15 + (1 << 9)),
        ("15*2+9", 15 * 2 + 9),
        ("15/2+9", 15 // 2 + 9),
        ("15^2+9", 15 * 15 + 9),
        ("15^2*9+40/2^2", 15 * 15 * 9 + 10),
    ],
)
def test_evaluate(expr, expect):
    assert evaluate(expr) == expect


@pytest.mark.parametrize(
    "expr",
    ["", "10 +", "1 + +", " + ", " + abc", "10 20 +", "10 20 3 + -"],
)
def test_evaluate_errors(expr):
    with pytest.raises(CalcError):
        evaluate(expr)


def test_euclidean_division():
    assert evaluate("7/-2") == -3
    assert evaluate("-7/2") == -4


def test_division_by_zero():
    with pytest.raises(CalcError, match="division by zero"):
        evaluate("1/0")


def test_non_positive_exponent():
    assert evaluate("2^-1") == 1


def test_octal_literal():
    assert evaluate("010") == 8
    with pytest.raises(CalcError):
        evaluate("09")


@given(st.integers(min_value=0, max_value=10**30), st.integers(min_value=0, max_value=10**30))
def test_addition_matches(a, b):
    assert evaluate(f"{a} + {b}") == a + b
    assert evaluate(f"{a}*{b}-{b}") == a * b - b