import pytest

from addchain.polynomial import Polynomial, Term
from addchain.prime import Crandall, Other, Solinas, from_hex


def test_solinas_goldilocks():
    p = Solinas(Polynomial([Term(-1, 0), Term(-1, 1), Term(1, 2)]), 224)
    assert p.bits() == 448
    assert str(p.to_int()) == (
        "726838724295606890549323807888004534353641360687318060281490199180612328166"
        "730772686396383698676545930088884461843637361053498018365439"
    )
    assert str(p) == "2^448-2^224-1"


def test_crandall():
    p = Crandall(255, 19)
    assert p.bits() == 255
    assert p.to_int() == 2**255 - 19
    assert str(p) == "2^255-19"
    assert int(p) == p.to_int()


def test_other_from_hex():
    p = from_hex("FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_FFFFEE37")
    assert p.bits() == 192
    assert str(p) == "fffffffffffffffffffffffffffffffffffffffeffffee37"
    assert p == Other(p.to_int())


def test_from_hex_invalid():
    with pytest.raises(ValueError):
        from_hex("not hex")