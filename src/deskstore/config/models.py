"""Pydantic model for the settings store configuration."""

from __future__ import annotations

import string
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_SECRET_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*()-_=+[]{}<>?"


class StoreConfig(BaseModel):
    """Where the store lives and how it provisions secrets."""

    app_name: str = Field(
        default="deskstore",
        min_length=1,
        description="Application name for the data directory and keyring service.",
    )
    filename: str = Field(
        default="storage.json",
        min_length=1,
        description="Name of the settings document inside the data directory.",
    )
    data_dir: Optional[Path] = Field(
        default=None,
        description="Override for the per-user data directory.",
    )
    secret_length: int = Field(
        default=64,
        ge=8,
        le=512,
        description="Length of generated secrets.",
    )
    secret_alphabet: str = Field(
        default=DEFAULT_SECRET_ALPHABET,
        description="Characters generated secrets are drawn from.",
    )
    keyring_entry: str = Field(
        default="storage-key",
        min_length=1,
        description="Keyring username holding the encryption key.",
    )

    @field_validator("filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if Path(value).name != value:
            raise ValueError("filename must not contain directory components")
        return value

    @field_validator("secret_alphabet")
    @classmethod
    def _broad_alphabet(cls, value: str) -> str:
        if len(set(value)) < 10:
            raise ValueError("secret_alphabet needs at least 10 distinct characters")
        return value
