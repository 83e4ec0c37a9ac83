"""Platform paths — implements PathResolverPort via ``platformdirs``."""

from __future__ import annotations

from pathlib import Path

import platformdirs

from deskstore.domain.ports.path_resolver import PathResolverPort


class PlatformPathResolver(PathResolverPort):
    """Resolve the OS-appropriate per-user data directory.

    ``~/.local/share/<app>`` on Linux, ``~/Library/Application Support/<app>``
    on macOS, ``%LOCALAPPDATA%\\<app>`` on Windows.

    Parameters
    ----------
    app_name : str
        Application directory name.
    data_dir : Path | None
        Fixed directory to use instead (useful for testing).
    """

    def __init__(self, app_name: str, data_dir: Path | None = None) -> None:
        self._app_name = app_name
        self._data_dir = Path(data_dir) if data_dir else None

    def user_data_dir(self) -> Path:
        if self._data_dir is not None:
            return self._data_dir
        return Path(platformdirs.user_data_dir(self._app_name, appauthor=False))
