"""Keyring encryption — implements EncryptionPort.

A Fernet key is generated on first use and kept in the OS keychain
(Secret Service, macOS Keychain, Windows Credential Locker) through
``keyring``. Values are encrypted with that key via ``cryptography``.
When no usable keychain backend exists the adapter reports itself
unavailable instead of raising.
"""

from __future__ import annotations

import logging
from typing import Optional

import keyring
from cryptography.fernet import Fernet, InvalidToken
from keyring.backend import KeyringBackend
from keyring.backends import fail
from keyring.errors import KeyringError

from deskstore.domain.errors import SecureValueDecodeError
from deskstore.domain.ports.encryption_port import EncryptionPort

logger = logging.getLogger(__name__)


class KeyringEncryption(EncryptionPort):
    """Fernet encryption with the key held in the OS keychain.

    Parameters
    ----------
    service : str
        Keyring service name (normally the application name).
    entry : str
        Keyring username under which the key is stored.
    backend : KeyringBackend | None
        Explicit backend; defaults to ``keyring.get_keyring()``.
    """

    def __init__(
        self,
        service: str,
        entry: str = "storage-key",
        backend: Optional[KeyringBackend] = None,
    ) -> None:
        self._service = service
        self._entry = entry
        self._backend = backend
        self._fernet: Optional[Fernet] = None

    def is_available(self) -> bool:
        try:
            self._get_fernet()
        except (KeyringError, ValueError) as exc:
            logger.debug("Keyring encryption unavailable: %s", exc)
            return False
        return True

    def encrypt(self, plaintext: str) -> bytes:
        return self._get_fernet().encrypt(plaintext.encode("utf-8"))

    def decrypt(self, ciphertext: bytes) -> str:
        try:
            return self._get_fernet().decrypt(ciphertext).decode("utf-8")
        except (InvalidToken, UnicodeDecodeError) as exc:
            raise SecureValueDecodeError("Value is not valid ciphertext for the current key") from exc

    # -- Helpers -------------------------------------------------------------

    def _keyring(self) -> KeyringBackend:
        backend = self._backend or keyring.get_keyring()
        if isinstance(backend, fail.Keyring) or backend.priority <= 0:
            raise KeyringError(f"No usable keyring backend ({type(backend).__name__})")
        return backend

    def _get_fernet(self) -> Fernet:
        if self._fernet is not None:
            return self._fernet

        backend = self._keyring()
        key = backend.get_password(self._service, self._entry)
        if not key:
            key = Fernet.generate_key().decode("ascii")
            backend.set_password(self._service, self._entry, key)
            logger.info("Generated new storage encryption key in %s", type(backend).__name__)

        # ValueError here means the keychain entry is not a Fernet key
        self._fernet = Fernet(key.encode("ascii"))
        return self._fernet
