"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from deskstore.application.handlers import HandlerRegistry, SettingHandler
from deskstore.application.secure_codec import SecureValueCodec
from deskstore.application.settings_store import SettingsStore
from deskstore.config.loader import get_config
from deskstore.config.models import StoreConfig
from deskstore.domain.ports.document_store import DocumentStorePort
from deskstore.domain.ports.encryption_port import EncryptionPort
from deskstore.domain.ports.path_resolver import PathResolverPort
from deskstore.domain.ports.random_port import RandomStringPort

from deskstore.infrastructure.crypto.keyring_encryption import KeyringEncryption
from deskstore.infrastructure.persistence.json_document_store import JsonDocumentStore
from deskstore.infrastructure.platform.paths import PlatformPathResolver
from deskstore.infrastructure.platform.random_generator import SecretsRandomGenerator

LAUNCH_ON_STARTUP_KEY = "launchOnStartup"
CLOCK_FORMAT_KEYS = ("timeFormat", "dateFormat")


def build_handlers(
    on_launch_on_startup: Optional[SettingHandler] = None,
    on_clock_format_changed: Optional[SettingHandler] = None,
) -> HandlerRegistry:
    """Map the watched settings to the desktop collaborators' callbacks."""
    registry = HandlerRegistry()
    if on_launch_on_startup is not None:
        registry.register(LAUNCH_ON_STARTUP_KEY, on_launch_on_startup)
    if on_clock_format_changed is not None:
        for key in CLOCK_FORMAT_KEYS:
            registry.register(key, on_clock_format_changed)
    return registry


class Container:
    """Simple dependency injection container.

    Wires the platform adapters to the store's ports. Any adapter can be
    replaced by passing it in, which is how tests substitute fakes.

    Usage::

        container = Container(on_launch_on_startup=autostart.apply)
        container.store.set_value("launchOnStartup", True)
        password = container.store.get_socket_password()
    """

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        *,
        on_launch_on_startup: Optional[SettingHandler] = None,
        on_clock_format_changed: Optional[SettingHandler] = None,
        encryption: Optional[EncryptionPort] = None,
        paths: Optional[PathResolverPort] = None,
        random: Optional[RandomStringPort] = None,
    ) -> None:
        self._config = config or get_config()

        # -- Infrastructure singletons ---------------------------------------
        self._paths = paths or PlatformPathResolver(
            self._config.app_name, self._config.data_dir
        )
        self._encryption = encryption or KeyringEncryption(
            self._config.app_name, self._config.keyring_entry
        )
        self._random = random or SecretsRandomGenerator()
        self._documents = JsonDocumentStore(self._paths, self._config.filename)

        # -- Application -----------------------------------------------------
        self._codec = SecureValueCodec(self._encryption)
        self._handlers = build_handlers(on_launch_on_startup, on_clock_format_changed)
        self._store = SettingsStore(
            documents=self._documents,
            codec=self._codec,
            handlers=self._handlers,
            random=self._random,
            config=self._config,
        )

    # -- Accessors -----------------------------------------------------------

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def store(self) -> SettingsStore:
        return self._store

    @property
    def document_store(self) -> DocumentStorePort:
        return self._documents

    @property
    def encryption(self) -> EncryptionPort:
        return self._encryption

    @property
    def codec(self) -> SecureValueCodec:
        return self._codec

    @property
    def handlers(self) -> HandlerRegistry:
        return self._handlers

    @property
    def storage_path(self) -> Path:
        """Absolute path to the settings document."""
        return self._documents.path
