"""deskstore configuration package."""

from deskstore.config.loader import clear_cache, get_config, load_config
from deskstore.config.models import StoreConfig

__all__ = ["StoreConfig", "clear_cache", "get_config", "load_config"]
