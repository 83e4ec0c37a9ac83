"""Port: Path resolver — locate the per-user application data directory."""

from abc import ABC, abstractmethod
from pathlib import Path


class PathResolverPort(ABC):
    """Contract for resolving where application data lives."""

    @abstractmethod
    def user_data_dir(self) -> Path:
        """Return the per-user data directory (may not exist yet)."""
        ...
