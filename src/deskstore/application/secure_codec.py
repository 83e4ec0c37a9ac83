"""Secure value codec.

Turns plaintext into the hex-encoded ciphertext embedded in the settings
document and back, through an injected EncryptionPort. When encryption is
unavailable the codec passes values through unchanged and logs a warning.
"""

from __future__ import annotations

import logging

from deskstore.domain.errors import SecureValueDecodeError
from deskstore.domain.models.document import StoredValue
from deskstore.domain.ports.encryption_port import EncryptionPort

logger = logging.getLogger(__name__)


class SecureValueCodec:
    """Encode/decode secure values with graceful degradation."""

    def __init__(self, encryption: EncryptionPort) -> None:
        self._encryption = encryption

    def encode(self, value: object) -> StoredValue:
        """Return the on-disk representation of *value*.

        The value is stringified before encryption, so a secure ``True``
        reads back as ``"True"``.
        """
        if not self._encryption.is_available():
            logger.warning("Encryption is not available, storing value as is.")
            return value
        return self._encryption.encrypt(str(value)).hex()

    def decode(self, stored: StoredValue) -> StoredValue:
        """Reverse :meth:`encode`.

        Raises:
            SecureValueDecodeError: *stored* is not hex-encoded ciphertext.
        """
        if not self._encryption.is_available():
            logger.warning("Encryption is not available, returning value as is.")
            return stored

        if not isinstance(stored, str):
            raise SecureValueDecodeError(
                f"Secure value must be a hex string, got {type(stored).__name__}"
            )
        try:
            ciphertext = bytes.fromhex(stored)
        except ValueError as exc:
            raise SecureValueDecodeError("Secure value is not valid hex") from exc
        return self._encryption.decrypt(ciphertext)
