from __future__ import annotations

from collections import Counter
from typing import List, Tuple

from .alphabet import DEFAULT_ALPHABET


def validate_key(key: str) -> Tuple[bool, List[str]]:
    errs: List[str] = []

    if len(key) != len(DEFAULT_ALPHABET):
        errs.append(f"Key length is {len(key)}, expected {len(DEFAULT_ALPHABET)}")

    dupes = sorted(ch for ch, n in Counter(key).items() if n > 1)
    if dupes:
        errs.append("Duplicated characters: " + "".join(dupes))

    return (len(errs) == 0), errs


def is_valid_key(key: str, alphabet: str = DEFAULT_ALPHABET) -> bool:
    """True iff ``key`` has ``alphabet``'s length and no repeated characters.

    encrypt/decrypt never call this; a key with duplicates is accepted there
    but cannot be decrypted exactly.
    """
    return len(key) == len(alphabet) and len(set(key)) == len(key)
