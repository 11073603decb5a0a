"""Reversible text substitution cipher with random or password-derived keys.

Research / education only. Do NOT use in production: a monoalphabetic
substitution falls to frequency analysis, and password-derived keys come
from a 32-bit hash, not a real key-derivation function.
"""

from .cipher.alphabet import DEFAULT_ALPHABET
from .cipher.engine import (
    CipherVault,
    decrypt,
    decrypt_with_password,
    encrypt,
    encrypt_with_password,
)
from .cipher.errors import (
    CipherVaultError,
    EmptyInputError,
    KeyLengthError,
    MissingInputError,
    MissingPasswordError,
)
from .cipher.kdf import derive_key_from_password
from .cipher.permutation import generate_key
from .cipher.spec import CipherOptions, EncryptionResult
from .cipher.validator import is_valid_key, validate_key

__all__ = [
    "DEFAULT_ALPHABET",
    "CipherVault",
    "generate_key",
    "encrypt",
    "decrypt",
    "encrypt_with_password",
    "decrypt_with_password",
    "derive_key_from_password",
    "is_valid_key",
    "validate_key",
    "CipherOptions",
    "EncryptionResult",
    "CipherVaultError",
    "EmptyInputError",
    "MissingInputError",
    "KeyLengthError",
    "MissingPasswordError",
]
