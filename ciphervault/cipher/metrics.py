"""Key diagnostics and character-frequency profiles.

A monoalphabetic substitution only relabels characters, so the sorted
frequency profile of a ciphertext equals that of its plaintext. These
helpers make that weakness measurable.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

import numpy as np

from .alphabet import DEFAULT_ALPHABET
from .validator import is_valid_key


def frequency_profile(text: str, alphabet: str = DEFAULT_ALPHABET) -> np.ndarray:
    """Count occurrences of each alphabet character; others are ignored."""
    index = {ch: i for i, ch in enumerate(alphabet)}
    counts = np.zeros(len(alphabet), dtype=np.int64)
    for ch in text:
        i = index.get(ch)
        if i is not None:
            counts[i] += 1
    return counts


def _sorted_normalized(counts: np.ndarray) -> np.ndarray:
    total = counts.sum()
    if total == 0:
        return np.zeros(len(counts), dtype=np.float64)
    return np.sort(counts / total)[::-1]


def sorted_profile_distance(a: str, b: str, alphabet: str = DEFAULT_ALPHABET) -> float:
    """L1 distance between the rank-ordered frequency profiles of two texts.

    0.0 means the texts are indistinguishable to frequency analysis.
    """
    pa = _sorted_normalized(frequency_profile(a, alphabet))
    pb = _sorted_normalized(frequency_profile(b, alphabet))
    return float(np.abs(pa - pb).sum())


@dataclass
class KeyAnalysis:
    length: int
    expected_length: int
    is_valid: bool
    duplicates: List[str] = field(default_factory=list)
    fixed_points: List[str] = field(default_factory=list)   # chars the key leaves in place
    foreign_characters: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def analyze_key(key: str, alphabet: str = DEFAULT_ALPHABET) -> KeyAnalysis:
    """Diagnose ``key`` against ``alphabet``; validity uses the same predicate as ``is_valid_key``."""
    known = set(alphabet)
    return KeyAnalysis(
        length=len(key),
        expected_length=len(alphabet),
        is_valid=is_valid_key(key, alphabet),
        duplicates=sorted(ch for ch, n in Counter(key).items() if n > 1),
        fixed_points=[a for a, k in zip(alphabet, key) if a == k],
        foreign_characters=sorted({ch for ch in key if ch not in known}),
    )


def heuristic_issues(analysis: KeyAnalysis) -> List[str]:
    issues: List[str] = []
    if analysis.length != analysis.expected_length:
        issues.append(
            f"Key length {analysis.length} != alphabet length {analysis.expected_length}; "
            "encrypt/decrypt will reject it."
        )
    if analysis.duplicates:
        issues.append(
            "Key repeats characters " + "".join(analysis.duplicates)
            + "; ciphertext cannot be decrypted exactly."
        )
    if analysis.foreign_characters:
        issues.append(
            "Key contains characters outside the alphabet: " + "".join(analysis.foreign_characters)
        )
    if analysis.fixed_points:
        issues.append(f"Key leaves {len(analysis.fixed_points)} character(s) unchanged.")
    return issues
