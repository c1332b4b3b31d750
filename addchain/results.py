"""Best results of this library on popular cryptographic exponents."""

from __future__ import annotations

from dataclasses import dataclass

from .distinguished import (
    GOLDILOCKS,
    NISTP192,
    NISTP224,
    NISTP256,
    NISTP384,
    P2213,
    P2519,
    P25519,
    P41417,
    P222117,
    P382105,
    P383187,
    P511187,
    SECP192K1,
    SECP224K1,
    SECP256K1,
)
from .prime import Prime, from_hex


@dataclass(frozen=True)
class Result:
    """The best chain this library found for the target n - d."""

    name: str
    slug: str
    n: Prime
    d: int
    length: int
    """Length of the most efficient chain produced by this library."""
    algorithm_name: str
    """Name of the algorithm that found the most efficient chain."""
    best_known: int = 0
    """Length of the most efficient chain known by any method, or 0."""

    def target(self) -> int:
        """Return the addition chain target n - d."""
        return self.n.to_int() - self.d

    def delta(self) -> int:
        """Return the length relative to the best known chain."""
        return self.length - self.best_known


RESULTS: tuple[Result, ...] = (
    Result(
        name="Curve25519 Field Inversion",
        slug="curve25519_field",
        n=P25519,
        d=2,
        length=266,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
        best_known=265,
    ),
    Result(
        name="NIST P-256 Field Inversion",
        slug="p256_field",
        n=NISTP256,
        d=3,
        length=266,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
        best_known=266,
    ),
    Result(
        name="NIST P-384 Field Inversion",
        slug="p384_field",
        n=NISTP384,
        d=3,
        length=397,
        algorithm_name="opt(runs(heuristic(use_first(halving,approximation))))",
        best_known=396,
    ),
    Result(
        name="secp256k1 (Bitcoin) Field Inversion",
        slug="secp256k1_field",
        n=SECP256K1,
        d=3,
        length=269,
        algorithm_name="opt(runs(heuristic(use_first(halving,delta_largest))))",
        best_known=269,
    ),
    Result(
        name="Curve25519 Scalar Inversion",
        slug="curve25519_scalar",
        n=from_hex("1000000000000000000000000000000014def9dea2f79cd65812631a5cf5d3ed"),
        d=2,
        length=283,
        algorithm_name="opt(dictionary(hybrid(4,0),continued_fractions(binary)))",
        best_known=284,
    ),
    Result(
        name="NIST P-256 Scalar Inversion",
        slug="p256_scalar",
        n=from_hex("ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551"),
        d=2,
        length=294,
        algorithm_name=(
            "opt(dictionary(hybrid(8,16),heuristic(use_first(halving,delta_largest))))"
        ),
        best_known=292,
    ),
    Result(
        name="NIST P-384 Scalar Inversion",
        slug="p384_scalar",
        n=from_hex(
            "ffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf"
            "581a0db248b0a77aecec196accc52973"
        ),
        d=2,
        length=434,
        algorithm_name="opt(dictionary(hybrid(4,0),continued_fractions(dichotomic)))",
        best_known=433,
    ),
    Result(
        name="secp256k1 (Bitcoin) Scalar Inversion",
        slug="secp256k1_scalar",
        n=from_hex("fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141"),
        d=2,
        length=293,
        algorithm_name="opt(dictionary(hybrid(4,0),continued_fractions(dichotomic)))",
        best_known=290,
    ),
    Result(
        name="M-221 Field Inversion",
        slug="p2213_field",
        n=P2213,
        d=2,
        length=231,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
    ),
    Result(
        name="E-222 Field Inversion",
        slug="p222117_field",
        n=P222117,
        d=2,
        length=233,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
    ),
    Result(
        name="Curve1174 Field Inversion",
        slug="p2519_field",
        n=P2519,
        d=2,
        length=263,
        algorithm_name="opt(dictionary(hybrid(3,64),continued_fractions(dichotomic)))",
    ),
    Result(
        name="E-382 Field Inversion",
        slug="p382105_field",
        n=P382105,
        d=2,
        length=395,
        algorithm_name="opt(dictionary(hybrid(5,0),continued_fractions(dichotomic)))",
    ),
    Result(
        name="M-383/Curve383187 Field Inversion",
        slug="p383187_field",
        n=P383187,
        d=2,
        length=396,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
    ),
    Result(
        name="Curve41417 Field Inversion",
        slug="p41417_field",
        n=P41417,
        d=2,
        length=426,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
    ),
    Result(
        name="M-511 Field Inversion",
        slug="p511187_field",
        n=P511187,
        d=2,
        length=525,
        algorithm_name="opt(runs(continued_fractions(dichotomic)))",
    ),
    Result(
        name="NIST P-192 Field Inversion",
        slug="p192_field",
        n=NISTP192,
        d=2,
        length=203,
        algorithm_name="opt(dictionary(hybrid(2,0),continued_fractions(dichotomic)))",
    ),
    Result(
        name="NIST P-224 Field Inversion",
        slug="p224_field",
        n=NISTP224,
        d=2,
        length=234,
        algorithm_name="opt(runs(heuristic(use_first(halving,approximation))))",
    ),
    Result(
        name="Goldilocks Field Inversion",
        slug="goldilocks_field",
        n=GOLDILOCKS,
        d=2,
        length=460,
        algorithm_name="opt(runs(heuristic(use_first(halving,approximation))))",
    ),
    Result(
        name="secp192k1 Field Inversion",
        slug="secp192k1_field",
        n=SECP192K1,
        d=2,
        length=205,
        algorithm_name="opt(dictionary(hybrid(3,0),continued_fractions(dichotomic)))",
    ),
    Result(
        name="secp224k1 Field Inversion",
        slug="secp224k1_field",
        n=SECP224K1,
        d=2,
        length=238,
        algorithm_name="opt(dictionary(hybrid(5,0),continued_fractions(dichotomic)))",
    ),
)
"""Results on inversion exponents for popular fields."""