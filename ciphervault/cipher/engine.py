"""Encrypt / decrypt with a monoalphabetic substitution key.

A substitution cipher is broken by frequency analysis in seconds; use it
for obfuscation and teaching, never for confidentiality.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .alphabet import DEFAULT_ALPHABET
from .errors import EmptyInputError, KeyLengthError, MissingInputError, MissingPasswordError
from .kdf import derive_key_from_password
from .permutation import generate_key
from .spec import CipherOptions, EncryptionResult
from .substitution import build_substitution_map, substitute
from .validator import is_valid_key

logger = logging.getLogger(__name__)


OptionsLike = Union[CipherOptions, Mapping[str, Any]]


def _coerce_options(options: Optional[OptionsLike]) -> Optional[CipherOptions]:
    if options is None or isinstance(options, CipherOptions):
        return options
    return CipherOptions.model_validate(options)


def _resolve_case(options: Optional[CipherOptions], case_sensitive: Optional[bool]) -> bool:
    if case_sensitive is not None:
        return case_sensitive
    if options is not None:
        return options.case_sensitive
    return True


def encrypt(
    text: str,
    options: Optional[OptionsLike] = None,
    *,
    key: Optional[str] = None,
    case_sensitive: Optional[bool] = None,
) -> EncryptionResult:
    """Encrypt ``text``; a random key is generated when none is given.

    Keyword arguments take precedence over ``options``. The returned
    result always carries the key, generated or not.
    """
    if not text:
        raise EmptyInputError()
    options = _coerce_options(options)

    alphabet = DEFAULT_ALPHABET
    key = key or (options.key if options is not None else None)
    generated = not key
    if generated:
        key = generate_key(alphabet)

    if len(key) != len(alphabet):
        raise KeyLengthError(
            len(alphabet), len(key), "Key must be the same length as the alphabet"
        )

    ci = _resolve_case(options, case_sensitive)
    cipher_map = build_substitution_map(alphabet, key)
    encrypted = substitute(text, cipher_map, case_sensitive=ci)

    logger.debug(
        "Encrypted %d chars (key %s, case_sensitive=%s)",
        len(text), "generated" if generated else "supplied", ci,
    )
    return EncryptionResult(encrypted=encrypted, key=key)


def decrypt(
    encrypted_text: str,
    key: str,
    options: Optional[OptionsLike] = None,
    *,
    case_sensitive: Optional[bool] = None,
) -> str:
    """Reverse ``encrypt`` by substituting through the Key -> Alphabet map.

    Exact only when ``key`` is a true permutation: duplicated key characters
    collide during encryption and cannot be told apart here.
    """
    if not encrypted_text or not key:
        raise MissingInputError()
    options = _coerce_options(options)

    alphabet = DEFAULT_ALPHABET
    if len(key) != len(alphabet):
        raise KeyLengthError(len(alphabet), len(key), "Invalid key length")

    ci = _resolve_case(options, case_sensitive)
    reverse_map = build_substitution_map(key, alphabet)
    decrypted = substitute(encrypted_text, reverse_map, case_sensitive=ci)

    logger.debug("Decrypted %d chars (case_sensitive=%s)", len(encrypted_text), ci)
    return decrypted


def encrypt_with_password(text: str, password: str) -> EncryptionResult:
    """Encrypt with a key derived deterministically from ``password``."""
    if not password:
        raise MissingPasswordError()
    return encrypt(text, key=derive_key_from_password(password))


def decrypt_with_password(encrypted_text: str, password: str) -> str:
    if not password:
        raise MissingPasswordError()
    return decrypt(encrypted_text, derive_key_from_password(password))


class CipherVault:
    """Namespace bundling the cipher operations, for callers that prefer
    ``CipherVault.encrypt(...)`` over module-level functions."""

    DEFAULT_ALPHABET = DEFAULT_ALPHABET

    generate_key = staticmethod(generate_key)
    encrypt = staticmethod(encrypt)
    decrypt = staticmethod(decrypt)
    encrypt_with_password = staticmethod(encrypt_with_password)
    decrypt_with_password = staticmethod(decrypt_with_password)
    derive_key_from_password = staticmethod(derive_key_from_password)
    is_valid_key = staticmethod(is_valid_key)
