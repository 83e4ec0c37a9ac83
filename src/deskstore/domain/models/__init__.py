"""Domain models for deskstore."""

from deskstore.domain.models.document import SettingsDocument, StoredValue

__all__ = ["SettingsDocument", "StoredValue"]
