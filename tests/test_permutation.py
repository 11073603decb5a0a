import random

from ciphervault import DEFAULT_ALPHABET, generate_key, is_valid_key
from ciphervault.cipher.permutation import fisher_yates, seeded_permutation


class _Constant:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_alphabet_layout():
    assert len(DEFAULT_ALPHABET) == 88
    assert len(set(DEFAULT_ALPHABET)) == len(DEFAULT_ALPHABET)
    assert DEFAULT_ALPHABET.startswith("ABC")
    assert DEFAULT_ALPHABET.endswith("0123456789!@#$%^&*()_+-=[]{}|;:,.<>?")


def test_generate_key_is_permutation():
    for _ in range(20):
        key = generate_key()
        assert sorted(key) == sorted(DEFAULT_ALPHABET)
        assert is_valid_key(key)


def test_generate_key_custom_alphabet():
    key = generate_key("abcdef")
    assert sorted(key) == list("abcdef")


def test_generate_key_trivial_inputs():
    assert generate_key("") == ""
    assert generate_key("x") == "x"


def test_generate_key_with_injected_rng():
    assert generate_key(rng=random.Random(5)) == generate_key(rng=random.Random(5))


def test_fisher_yates_always_first():
    # j == 0 at every step
    assert fisher_yates("abcd", _Constant(0.0)) == list("bcda")


def test_fisher_yates_always_self():
    assert fisher_yates("abcd", _Constant(0.999)) == list("abcd")


def test_seeded_permutation_is_deterministic():
    assert seeded_permutation(DEFAULT_ALPHABET, 42) == seeded_permutation(DEFAULT_ALPHABET, 42)
    assert seeded_permutation(DEFAULT_ALPHABET, 42) != seeded_permutation(DEFAULT_ALPHABET, 43)
