"""Ports (ABCs) consumed by the settings store."""

from deskstore.domain.ports.document_store import DocumentStorePort
from deskstore.domain.ports.encryption_port import EncryptionPort
from deskstore.domain.ports.path_resolver import PathResolverPort
from deskstore.domain.ports.random_port import RandomStringPort

__all__ = [
    "DocumentStorePort",
    "EncryptionPort",
    "PathResolverPort",
    "RandomStringPort",
]
