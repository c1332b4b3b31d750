"""Well-known primes used in elliptic curve cryptography."""

from __future__ import annotations

from .polynomial import Polynomial, Term
from .prime import Crandall, Prime, Solinas, from_hex

P2213 = Crandall(221, 3)
"""2^221 - 3, used in curve M-221."""

P222117 = Crandall(222, 117)
"""2^222 - 117, used in curve E-222."""

P2519 = Crandall(251, 9)
"""2^251 - 9, used in Curve1174."""

P25519 = Crandall(255, 19)
"""2^255 - 19, used in Curve25519."""

P382105 = Crandall(382, 105)
"""2^382 - 105, used in curve E-382."""

P383187 = Crandall(383, 187)
"""2^383 - 187, used in curves M-383 and Curve383187."""

P41417 = Crandall(414, 17)
"""2^414 - 17, used in Curve41417."""

P511187 = Crandall(511, 187)
"""2^511 - 187, used in M-511."""

NISTP192 = Solinas(Polynomial([Term(-1, 0), Term(-1, 1), Term(1, 3)]), 64)
"""The P-192 prime 2^192 - 2^64 - 1."""

NISTP224 = Solinas(Polynomial([Term(1, 0), Term(-1, 3), Term(1, 7)]), 32)
"""The P-224 prime 2^224 - 2^96 + 1."""

NISTP256 = Solinas(
    Polynomial([Term(-1, 0), Term(1, 3), Term(1, 6), Term(-1, 7), Term(1, 8)]), 32
)
"""The P-256 prime 2^256 - 2^224 + 2^192 + 2^96 - 1."""

NISTP384 = Solinas(
    Polynomial([Term(-1, 0), Term(1, 1), Term(-1, 3), Term(-1, 4), Term(1, 12)]), 32
)
"""The P-384 prime 2^384 - 2^128 - 2^96 + 2^32 - 1."""

GOLDILOCKS = Solinas(Polynomial([Term(-1, 0), Term(-1, 1), Term(1, 2)]), 224)
"""The Goldilocks prime 2^448 - 2^224 - 1."""

SECP192K1 = from_hex("FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_FFFFEE37")
"""Prime for the 192-bit Koblitz curve of SEC 2."""

SECP192R1 = NISTP192

SECP224K1 = from_hex("FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_FFFFE56D")
"""Prime for the 224-bit Koblitz curve of SEC 2."""

SECP224R1 = NISTP224

SECP256K1 = from_hex(
    "FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_FFFFFC2F"
)
"""Prime for the 256-bit Koblitz curve of SEC 2."""

SECP256R1 = NISTP256

SECP384R1 = NISTP384

DISTINGUISHED: tuple[Prime, ...] = (
    P2213,
    P222117,
    P2519,
    P25519,
    P382105,
    P383187,
    P41417,
    P511187,
    NISTP192,
    NISTP224,
    NISTP256,
    NISTP384,
    GOLDILOCKS,
    SECP192K1,
    SECP224K1,
    SECP256K1,
)
"""Well-known primes."""