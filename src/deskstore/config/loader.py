"""Configuration loader for deskstore.

Loads an optional JSON configuration file and returns a validated
StoreConfig instance. Uses module-level caching so each file is only
parsed once per process.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from deskstore.config.models import StoreConfig
from deskstore.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, StoreConfig] = {}

DATA_DIR_ENV = "DESKSTORE_DATA_DIR"


def load_config(path: Optional[Path] = None) -> StoreConfig:
    """Load and validate store config.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file. If ``None``, built-in defaults are used.

    Returns
    -------
    StoreConfig
        Validated configuration, with ``DESKSTORE_DATA_DIR`` applied on top.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON or does not match the schema.
    """
    cache_key = str(Path(path).resolve()) if path else "<defaults>"

    if cache_key in _config_cache:
        return _apply_env(_config_cache[cache_key])

    if path is None:
        config = StoreConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        try:
            raw = json.loads(config_path.read_text(encoding="utf-8"))
            config = StoreConfig.model_validate(raw)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid config in {config_path}: {exc}") from exc

    _config_cache[cache_key] = config
    return _apply_env(config)


def get_config() -> StoreConfig:
    """Get the default configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()


def _apply_env(config: StoreConfig) -> StoreConfig:
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return config.model_copy(update={"data_dir": Path(override)})
    return config
