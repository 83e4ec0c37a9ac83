"""Shared fixtures and fakes for the platform ports."""

from __future__ import annotations

from pathlib import Path

import pytest

from deskstore.application.handlers import HandlerRegistry
from deskstore.application.secure_codec import SecureValueCodec
from deskstore.application.settings_store import SettingsStore
from deskstore.config.models import StoreConfig
from deskstore.domain.errors import SecureValueDecodeError
from deskstore.domain.ports.encryption_port import EncryptionPort
from deskstore.domain.ports.path_resolver import PathResolverPort
from deskstore.domain.ports.random_port import RandomStringPort
from deskstore.infrastructure.persistence.json_document_store import JsonDocumentStore


# ── Fakes ─────────────────────────────────────────────────────────────────


class FakeEncryption(EncryptionPort):
    """Reversible, recognisable stand-in for the OS encryption facility."""

    PREFIX = b"fake:"

    def __init__(self, available: bool = True) -> None:
        self.available = available

    def is_available(self) -> bool:
        return self.available

    def encrypt(self, plaintext: str) -> bytes:
        return self.PREFIX + plaintext[::-1].encode("utf-8")

    def decrypt(self, ciphertext: bytes) -> str:
        if not ciphertext.startswith(self.PREFIX):
            raise SecureValueDecodeError("not fake ciphertext")
        return ciphertext[len(self.PREFIX):].decode("utf-8")[::-1]


class FixedPathResolver(PathResolverPort):
    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def user_data_dir(self) -> Path:
        return self.directory


class FakeRandom(RandomStringPort):
    """Deterministic generator that counts how often it is asked."""

    def __init__(self) -> None:
        self.calls = 0

    def generate(self, length: int, alphabet: str) -> str:
        self.calls += 1
        start = self.calls % len(alphabet)
        cycled = (alphabet[start:] + alphabet[:start]) * (length // len(alphabet) + 1)
        return cycled[:length]


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    """Per-test user data directory (not created up front)."""
    return tmp_path / "userData"


@pytest.fixture()
def documents(data_dir: Path) -> JsonDocumentStore:
    return JsonDocumentStore(FixedPathResolver(data_dir))


@pytest.fixture()
def encryption() -> FakeEncryption:
    return FakeEncryption()


@pytest.fixture()
def fake_random() -> FakeRandom:
    return FakeRandom()


@pytest.fixture()
def handlers() -> HandlerRegistry:
    return HandlerRegistry()


@pytest.fixture()
def store(
    documents: JsonDocumentStore,
    encryption: FakeEncryption,
    handlers: HandlerRegistry,
    fake_random: FakeRandom,
) -> SettingsStore:
    return SettingsStore(
        documents=documents,
        codec=SecureValueCodec(encryption),
        handlers=handlers,
        random=fake_random,
        config=StoreConfig(),
    )
