"""Port: Encryption — platform secret-encryption facility."""

from abc import ABC, abstractmethod


class EncryptionPort(ABC):
    """Contract for encrypting strings at rest.

    Implementations may be unavailable at runtime (no OS keychain, headless
    session). Callers must check :meth:`is_available` first.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if :meth:`encrypt` and :meth:`decrypt` can be used."""
        ...

    @abstractmethod
    def encrypt(self, plaintext: str) -> bytes:
        """Encrypt *plaintext* and return the ciphertext bytes."""
        ...

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> str:
        """Decrypt *ciphertext* back into the original string.

        Raises:
            SecureValueDecodeError: If *ciphertext* is not valid under the
                current key.
        """
        ...
