"""Settings store — generic get/set plus derived secret helpers.

Every call re-reads the document from the injected DocumentStorePort;
mutations are serialized through a per-store lock so concurrent sets on
different keys cannot drop each other's update.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from deskstore.application.handlers import HandlerRegistry
from deskstore.application.secure_codec import SecureValueCodec
from deskstore.config.models import StoreConfig
from deskstore.domain.errors import SettingHandlerError
from deskstore.domain.ports.document_store import DocumentStorePort
from deskstore.domain.ports.random_port import RandomStringPort

logger = logging.getLogger(__name__)

SOCKET_PASSWORD_KEY = "socketPassword"
SPOTIFY_DC_KEY = "sp_dc"


class SettingsStore:
    """Key/value settings persisted to a single JSON document.

    Parameters
    ----------
    documents : DocumentStorePort
        Backing document.
    codec : SecureValueCodec
        Encoder for values written with ``secure=True``.
    handlers : HandlerRegistry
        Side effects run after a key is written.
    random : RandomStringPort
        Source for provisioned secrets.
    config : StoreConfig | None
        Secret length and alphabet; defaults when omitted.
    """

    def __init__(
        self,
        documents: DocumentStorePort,
        codec: SecureValueCodec,
        handlers: HandlerRegistry,
        random: RandomStringPort,
        config: Optional[StoreConfig] = None,
    ) -> None:
        self._documents = documents
        self._codec = codec
        self._handlers = handlers
        self._random = random
        self._config = config or StoreConfig()
        self._lock = threading.RLock()

    # -- Generic get/set -----------------------------------------------------

    def get_value(self, key: str, secure: bool = False) -> Any:
        """Return the value stored under *key*, or None if absent.

        Raises:
            StorageIOError: The document cannot be read.
            SecureValueDecodeError: ``secure`` was requested for a value that
                was not stored securely.
        """
        logger.debug("Getting value for key: %s", key)
        document = self._documents.read()
        if key not in document:
            return None

        value = document[key]
        if secure:
            return self._codec.decode(value)
        return value

    def set_value(self, key: str, value: Any, secure: bool = False) -> None:
        """Persist *value* under *key*, then run the key's handler.

        Raises:
            StorageIOError: The document cannot be read or written.
            SettingHandlerError: The value was stored but its handler failed.
        """
        logger.debug("Setting value for key: %s", key)
        representation = self._codec.encode(value) if secure else value
        self._put(key, representation)
        self._dispatch(key, value)

    # -- Derived helpers -----------------------------------------------------

    def get_or_create_secret(self, key: str, length: Optional[int] = None) -> str:
        """Return the secure value for *key*, generating and storing one if unset."""
        created = False
        with self._lock:
            secret = self.get_value(key, secure=True)
            if not secret:
                secret = self._random.generate(
                    length or self._config.secret_length,
                    self._config.secret_alphabet,
                )
                logger.info("Provisioned new secret for key: %s", key)
                self._put(key, self._codec.encode(secret))
                created = True

        if created:
            self._dispatch(key, secret)
        return str(secret)

    def get_socket_password(self) -> str:
        """Password clients must present to the local socket server."""
        return self.get_or_create_secret(SOCKET_PASSWORD_KEY)

    def get_spotify_dc(self) -> Optional[str]:
        """Spotify ``sp_dc`` session cookie, decrypted."""
        return self.get_value(SPOTIFY_DC_KEY, secure=True)

    def set_spotify_dc(self, value: str) -> None:
        self.set_value(SPOTIFY_DC_KEY, value, secure=True)

    # -- Helpers -------------------------------------------------------------

    def _put(self, key: str, representation: Any) -> None:
        with self._lock:
            document = self._documents.read()
            document[key] = representation
            self._documents.write(document)

    def _dispatch(self, key: str, value: Any) -> None:
        handler = self._handlers.get(key)
        if handler is None:
            return

        logger.debug("Running handler for key: %s", key)
        try:
            handler(value)
        except Exception as exc:
            logger.error("Handler for key %s failed: %s", key, exc)
            raise SettingHandlerError(key, f"Handler for {key!r} failed: {exc}") from exc
