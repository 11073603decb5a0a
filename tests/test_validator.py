from ciphervault import DEFAULT_ALPHABET, generate_key, is_valid_key, validate_key


def test_generated_keys_valid():
    for _ in range(20):
        assert is_valid_key(generate_key())


def test_duplicate_characters_invalid():
    assert not is_valid_key("AAB" + "C" * 91)
    assert not is_valid_key("AA" + DEFAULT_ALPHABET[2:])


def test_wrong_length_invalid():
    assert not is_valid_key("")
    assert not is_valid_key(DEFAULT_ALPHABET[:-1])


def test_identity_key_valid():
    assert is_valid_key(DEFAULT_ALPHABET)


def test_validate_key_reasons():
    ok, errs = validate_key("AA" + DEFAULT_ALPHABET[2:])
    assert not ok
    assert errs == ["Duplicated characters: A"]

    ok, errs = validate_key("abc")
    assert not ok
    assert len(errs) == 1 and "length" in errs[0]

    assert validate_key(DEFAULT_ALPHABET) == (True, [])
