"""Port (ABC) for whole-document persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from deskstore.domain.models.document import SettingsDocument


class DocumentStorePort(ABC):
    """Abstract interface for reading / writing the settings document."""

    @abstractmethod
    def read(self) -> SettingsDocument:
        """Load the full document, creating it as ``{}`` if missing.

        Raises:
            StorageIOError: If the file cannot be created or read.
        """

    @abstractmethod
    def write(self, document: SettingsDocument) -> None:
        """Replace the persisted document with *document*.

        Raises:
            StorageIOError: If the file cannot be written.
        """

    @property
    @abstractmethod
    def path(self) -> Path:
        """Location of the backing file."""
