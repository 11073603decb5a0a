from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CipherOptions(BaseModel):
    """Options accepted by ``encrypt`` / ``decrypt``.

    ``key`` is ignored by ``decrypt``, which takes the key positionally.
    A plain mapping such as ``{"key": ..., "caseSensitive": False}`` is
    accepted wherever options are, and validated into this model.
    """

    model_config = ConfigDict(frozen=True)

    key: Optional[str] = Field(default=None, description="Substitution key; generated when missing")
    case_sensitive: bool = Field(
        default=True,
        validation_alias=AliasChoices("case_sensitive", "caseSensitive"),
    )


class EncryptionResult(BaseModel):
    """Ciphertext together with the key needed to decrypt it.

    The key is not embedded in the ciphertext, so it must be stored or
    transmitted alongside it.
    """

    model_config = ConfigDict(frozen=True)

    encrypted: str
    key: str
