from ciphervault import DEFAULT_ALPHABET, derive_key_from_password, encrypt, is_valid_key
from ciphervault.cipher.metrics import (
    analyze_key,
    frequency_profile,
    heuristic_issues,
    sorted_profile_distance,
)


def test_frequency_profile_counts():
    counts = frequency_profile("AAB 🚀")
    assert counts[0] == 2
    assert counts[1] == 1
    assert counts.sum() == 3
    assert len(counts) == len(DEFAULT_ALPHABET)


def test_substitution_preserves_sorted_profile():
    text = "Attack at dawn! Meet me by the old mill at 10:30."
    key = derive_key_from_password("profile")
    encrypted = encrypt(text, key=key).encrypted
    assert encrypted != text
    assert sorted_profile_distance(text, encrypted) == 0.0


def test_sorted_profile_distance_detects_difference():
    assert sorted_profile_distance("aaaa", "abcd") > 0.0
    assert sorted_profile_distance("", "") == 0.0


def test_analyze_identity_key():
    analysis = analyze_key(DEFAULT_ALPHABET)
    assert analysis.is_valid
    assert len(analysis.fixed_points) == len(DEFAULT_ALPHABET)
    issues = heuristic_issues(analysis)
    assert issues == [f"Key leaves {len(DEFAULT_ALPHABET)} character(s) unchanged."]


def test_analyze_broken_key():
    analysis = analyze_key("AAB" + "C" * 91)
    assert not analysis.is_valid
    assert analysis.length == 94
    assert analysis.duplicates == ["A", "C"]
    assert analysis.to_dict()["expected_length"] == len(DEFAULT_ALPHABET)
    issues = heuristic_issues(analysis)
    assert any("length" in i for i in issues)
    assert any("repeats" in i for i in issues)


def test_analyze_foreign_characters():
    key = " " + DEFAULT_ALPHABET[1:]
    analysis = analyze_key(key)
    assert analysis.is_valid
    assert analysis.foreign_characters == [" "]


def test_analyze_key_custom_alphabet_matches_validator():
    assert analyze_key("cba", "abc").is_valid
    assert is_valid_key("cba", "abc")
    assert not analyze_key("cca", "abc").is_valid
    assert not analyze_key(DEFAULT_ALPHABET, "abc").is_valid
