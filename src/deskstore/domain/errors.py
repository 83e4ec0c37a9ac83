"""Domain errors — custom exceptions for deskstore.

These exceptions are raised by the settings store and its adapters and
caught by the presentation layer. They carry no infrastructure dependencies.
"""


class DeskStoreError(Exception):
    """Base exception for all deskstore errors."""


class StorageIOError(DeskStoreError):
    """Raised when the backing document cannot be read, created or written."""


class SecureValueDecodeError(DeskStoreError):
    """Raised when a secure value is not valid hex or ciphertext."""


class SettingHandlerError(DeskStoreError):
    """Raised when a post-write handler fails.

    The value has already been persisted when this is raised.
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class ConfigurationError(DeskStoreError):
    """Raised when the store configuration is invalid."""
