"""Addition chains, the programs that compute them, and integer helpers for cryptographic exponents."""

__version__ = "0.4.0"