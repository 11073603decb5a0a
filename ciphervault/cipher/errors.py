"""Exception taxonomy for the cipher engine.

Every error is raised before any transformation starts, so a caller never
sees partial output followed by an exception.
"""
from __future__ import annotations


class CipherVaultError(ValueError):
    """Base class for all invalid-input errors raised by ciphervault."""


class EmptyInputError(CipherVaultError):
    def __init__(self, message: str = "Text cannot be empty"):
        super().__init__(message)


class MissingInputError(CipherVaultError):
    def __init__(self, message: str = "Encrypted text and key are required"):
        super().__init__(message)


class KeyLengthError(CipherVaultError):
    def __init__(self, expected: int, actual: int, message: str | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"Key must be {expected} characters long, got {actual}")


class MissingPasswordError(CipherVaultError):
    def __init__(self, message: str = "Password is required"):
        super().__init__(message)
