"""Roundtrip verification T = D(E(T, K), K).

Generates randomized texts and keys (or passwords) and verifies that
decryption perfectly inverts encryption for every vector. Texts mix
alphabet characters with spaces, accents and emoji, which must pass through
untouched.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from ciphervault.cipher.alphabet import DEFAULT_ALPHABET
from ciphervault.cipher.engine import decrypt, decrypt_with_password, encrypt, encrypt_with_password
from ciphervault.cipher.permutation import generate_key
from ciphervault.config import load_settings
from ciphervault.utils.repro import utc_timestamp

logger = logging.getLogger(__name__)

PASSTHROUGH_SAMPLES = " \n\té€ß🚀🔒"
TEXT_POOL = DEFAULT_ALPHABET + PASSTHROUGH_SAMPLES


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    text: str
    secret: str              # key, or password when use_passwords=True
    encrypted: str
    decrypted: str           # What decrypt returned (should equal text)
    error: Optional[str]     # Exception message if decrypt/encrypt threw


@dataclass
class RoundtripResult:
    """Aggregate result of one roundtrip run."""
    mode: str                # "key" or "password"
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337
    started_at: str = field(default_factory=utc_timestamp)

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] roundtrip ({self.mode}): "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _rand_text(rng: random.Random, max_len: int) -> str:
    return "".join(rng.choice(TEXT_POOL) for _ in range(rng.randint(1, max_len)))


def _rand_password(rng: random.Random) -> str:
    return "".join(rng.choice(DEFAULT_ALPHABET) for _ in range(rng.randint(1, 24)))


def run_roundtrip_tests(
    *,
    num_vectors: Optional[int] = None,
    seed: Optional[int] = None,
    max_text_length: Optional[int] = None,
    use_passwords: Optional[bool] = None,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification across many random vectors.

    Args:
        num_vectors: Number of random (text, key) pairs to test.
        seed: Random seed for deterministic reproducibility.
        max_text_length: Upper bound on generated text length (code points).
        use_passwords: Derive keys from random passwords instead of shuffling.
        max_failures_recorded: Maximum number of failure details to keep.

    Unset arguments fall back to ``load_settings()``.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    settings = load_settings()
    num_vectors = settings.roundtrip_vectors if num_vectors is None else num_vectors
    seed = settings.global_seed if seed is None else seed
    max_text_length = settings.roundtrip_max_text_length if max_text_length is None else max_text_length
    use_passwords = settings.roundtrip_use_passwords if use_passwords is None else use_passwords

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        text = _rand_text(rng, max_text_length)
        secret = _rand_password(rng) if use_passwords else generate_key(rng=rng)
        encrypted = ""

        try:
            if use_passwords:
                encrypted = encrypt_with_password(text, secret).encrypted
                decrypted = decrypt_with_password(encrypted, secret)
            else:
                encrypted = encrypt(text, key=secret).encrypted
                decrypted = decrypt(encrypted, secret)

            if decrypted == text:
                passed += 1
            else:
                failed += 1
                if len(failures) < max_failures_recorded:
                    failures.append(RoundtripFailure(
                        vector_index=i,
                        text=text,
                        secret=secret,
                        encrypted=encrypted,
                        decrypted=decrypted,
                        error=None,
                    ))
        except ValueError as exc:
            failed += 1
            logger.warning("Vector %d raised %s: %s", i, type(exc).__name__, exc)
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    text=text,
                    secret=secret,
                    encrypted=encrypted or "<error>",
                    decrypted="<error>",
                    error=str(exc),
                ))

    elapsed = time.perf_counter() - start

    result = RoundtripResult(
        mode="password" if use_passwords else "key",
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
    logger.info(result.summary())
    return result


def run_password_consistency(text: str, password: str) -> bool:
    """Encrypt twice with the same password; keys and ciphertexts must agree."""
    first = encrypt_with_password(text, password)
    second = encrypt_with_password(text, password)
    consistent = first.key == second.key and first.encrypted == second.encrypted
    if not consistent:
        logger.error("Password-derived encryption is not deterministic")
    return consistent
