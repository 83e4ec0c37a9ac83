"""JSON document store — implements DocumentStorePort.

Persists the whole settings namespace as one pretty-printed JSON object
inside the per-user data directory. Every read goes to disk; there is no
in-memory cache.
"""

from __future__ import annotations

import json
import logging
import shutil
import tempfile
from pathlib import Path

from deskstore.domain.errors import StorageIOError
from deskstore.domain.models.document import SettingsDocument, empty_document
from deskstore.domain.ports.document_store import DocumentStorePort
from deskstore.domain.ports.path_resolver import PathResolverPort

logger = logging.getLogger(__name__)

_DEFAULT_FILENAME = "storage.json"


class JsonDocumentStore(DocumentStorePort):
    """Concrete implementation of :class:`DocumentStorePort`.

    Parameters
    ----------
    paths : PathResolverPort
        Resolves the data directory; consulted on every access.
    filename : str
        Name of the document inside that directory.
    """

    def __init__(self, paths: PathResolverPort, filename: str = _DEFAULT_FILENAME) -> None:
        self._paths = paths
        self._filename = filename

    @property
    def path(self) -> Path:
        """Absolute path to the settings JSON file."""
        return self._paths.user_data_dir() / self._filename

    # -- Public API ----------------------------------------------------------

    def read(self) -> SettingsDocument:
        """Load the document, creating ``{}`` on first access.

        Unreadable content (bad UTF-8, malformed JSON, a non-object root)
        is backed up and read as empty.
        """
        path = self._ensure_exists()
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Settings file %s is not valid UTF-8 (%s); using empty document", path, exc)
            self._backup(path)
            return empty_document()
        except OSError as exc:
            raise StorageIOError(f"Cannot read settings from {path}: {exc}") from exc

        if not raw.strip():
            return empty_document()

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as exc:
            logger.warning("Settings file %s is not valid JSON (%s); using empty document", path, exc)
            self._backup(path)
            return empty_document()

        if not isinstance(data, dict):
            logger.warning("Settings file %s root is not an object; using empty document", path)
            self._backup(path)
            return empty_document()
        return data

    def write(self, document: SettingsDocument) -> None:
        """Persist *document* atomically (write to temp, then rename)."""
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        except OSError as exc:
            raise StorageIOError(f"Cannot write settings to {path}: {exc}") from exc

        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(path)
        except OSError as exc:
            Path(tmp_path).unlink(missing_ok=True)
            raise StorageIOError(f"Cannot write settings to {path}: {exc}") from exc
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    # -- Helpers -------------------------------------------------------------

    def _ensure_exists(self) -> Path:
        path = self.path
        if path.exists():
            return path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("{}", encoding="utf-8")
        except OSError as exc:
            raise StorageIOError(f"Cannot create settings file {path}: {exc}") from exc
        logger.debug("Created settings file %s", path)
        return path

    @staticmethod
    def _backup(path: Path) -> None:
        bak = path.with_name(path.name + ".bak")
        try:
            shutil.copyfile(path, bak)
        except OSError as exc:
            logger.warning("Could not back up unreadable settings file: %s", exc)
