"""Fisher-Yates permutations of character sequences.

Two sources of randomness are supported: the process-wide system RNG for
fresh keys, and a tiny linear congruential generator for keys that must be
reproducible from a seed (password-derived keys).

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Protocol, Sequence

from .alphabet import DEFAULT_ALPHABET

logger = logging.getLogger(__name__)

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

_system_rng = random.SystemRandom()


class UniformSource(Protocol):
    def random(self) -> float: ...


class SeededRandom:
    """Deterministic generator: state = (state * 9301 + 49297) mod 233280.

    The recurrence and modulus are kept bit-for-bit so that keys derived
    from a password match those produced by other implementations. The
    period is at most 233280, far too small for anything but key shuffling.
    """

    def __init__(self, seed: int):
        if seed < 0:
            raise ValueError("seed must be non-negative")
        self.state = seed

    def random(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS


def fisher_yates(chars: Sequence[str], rng: UniformSource) -> List[str]:
    """Return a shuffled copy of ``chars``.

    ``j`` is drawn as ``floor(u * (i + 1))`` from a single uniform draw per
    position, walking ``i`` from the end down to 1.
    """
    out = list(chars)
    for i in range(len(out) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def generate_key(alphabet: Sequence[str] = DEFAULT_ALPHABET, *, rng: Optional[UniformSource] = None) -> str:
    """Generate a random substitution key (a permutation of ``alphabet``)."""
    key = "".join(fisher_yates(alphabet, rng or _system_rng))
    logger.debug("Generated key of length %d", len(key))
    return key


def seeded_permutation(alphabet: Sequence[str], seed: int) -> str:
    return "".join(fisher_yates(alphabet, SeededRandom(seed)))
