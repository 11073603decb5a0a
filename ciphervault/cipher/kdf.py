"""Password -> key derivation.

This is a 32-bit string hash feeding a linear congruential shuffle. It is
NOT a key-derivation function: there are at most 233280 distinct derived
keys. It is kept unchanged so that passwords keep producing the same keys.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from .alphabet import DEFAULT_ALPHABET
from .permutation import seeded_permutation

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & _SIGN32 else value


def password_hash(password: str) -> int:
    """Signed 32-bit ``hash * 31 + codepoint`` fold over the password."""
    h = 0
    for ch in password:
        h = _to_int32((h << 5) - h + ord(ch))
    return h


def password_seed(password: str) -> int:
    return abs(password_hash(password))


def derive_key_from_password(password: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    return seeded_permutation(alphabet, password_seed(password))
