"""Helpers for manipulating arbitrary-precision integers."""

from __future__ import annotations

import random
import re

_HEX_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_BINARY_RE = re.compile(r"[+-]?[01]+")


def _strip_literal(s: str) -> str:
    """Remove underscore spacers from a numeric literal."""
    return s.replace("_", "")


def _parse(s: str, pattern: re.Pattern[str], base: int, kind: str) -> int:
    digits = _strip_literal(s)
    if not pattern.fullmatch(digits):
        raise ValueError(f"failed to parse {kind} integer: {s!r}")
    return int(digits, base)


def parse_hex(s: str) -> int:
    """Parse a hex string; underscores may be used as separators."""
    return _parse(s, _HEX_RE, 16, "hex")


def parse_binary(s: str) -> int:
    """Parse a binary string; underscores may be used as separators."""
    return _parse(s, _BINARY_RE, 2, "binary")


def pow2(e: int) -> int:
    """Return 2**e."""
    return 1 << e


def is_pow2(x: int) -> bool:
    """Report whether x is a power of two."""
    return x > 0 and x & (x - 1) == 0


def pow2_up_to(x: int) -> list[int]:
    """Return all powers of two less than or equal to x."""
    powers = []
    p = 1
    while p <= x:
        powers.append(p)
        p <<= 1
    return powers


def mask(l: int, h: int) -> int:
    """Return the integer with ones in bit positions [l, h)."""
    return pow2(h) - pow2(l)


def ones(n: int) -> int:
    """Return 2**n - 1, the integer with n ones in the low bits."""
    return mask(0, n)


def bits_set(x: int) -> list[int]:
    """Return the positions of the set bits in x."""
    return [i for i in range(x.bit_length()) if (x >> i) & 1]


def min_max(x: int, y: int) -> tuple[int, int]:
    """Return the minimum and maximum of x and y."""
    return (x, y) if x < y else (y, x)


def extract(x: int, l: int, h: int) -> int:
    """Extract bits [l, h) of x and shift them to the low bits."""
    return (x & mask(l, h)) >> l


def rand_bits(rng: random.Random, n: int) -> int:
    """Return a random integer less than 2**n."""
    return rng.getrandbits(n) if n > 0 else 0


def uint64s(x: int) -> list[int]:
    """Represent x as a list of 64-bit limbs, least significant first."""
    limb_mask = ones(64)
    words = []
    while x != 0:
        words.append(x & limb_mask)
        x >>= 64
    return words


def bytes_little_endian(x: int) -> bytes:
    """Return the absolute value of x as little-endian bytes."""
    x = abs(x)
    return x.to_bytes((x.bit_length() + 7) // 8, "little")