from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Reproducibility
    global_seed: int = Field(default=1337)

    # Roundtrip evaluation
    roundtrip_vectors: int = Field(default=200, ge=1, description="Random texts per roundtrip run")
    roundtrip_max_text_length: int = Field(default=64, ge=1)
    roundtrip_use_passwords: bool = Field(default=False, description="Derive keys from random passwords")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    def _bool(name: str, default: bool) -> bool:
        v = os.getenv(name)
        if v is None:
            return default
        return v.strip().lower() in {"1", "true", "yes", "y", "on"}

    return Settings(
        global_seed=int(os.getenv("CIPHERVAULT_GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("CIPHERVAULT_ROUNDTRIP_VECTORS", "200")),
        roundtrip_max_text_length=int(os.getenv("CIPHERVAULT_ROUNDTRIP_MAX_TEXT_LENGTH", "64")),
        roundtrip_use_passwords=_bool("CIPHERVAULT_ROUNDTRIP_USE_PASSWORDS", False),
    )
