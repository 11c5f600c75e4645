"""
Name-based lookup of cache stores.

Only the CLI layer resolves names; the runner receives a ready store.
"""

from typing import Callable, Optional

from ..config import LabConfig, StoreConfig
from ..errors import ConfigurationError
from .base import BaseStore
from .disk import FileStore
from .memory import ArrayStore
from .null import NullStore

StoreFactory = Callable[[StoreConfig], BaseStore]

DRIVERS: dict[str, StoreFactory] = {
    "array": lambda cfg: ArrayStore(),
    "file": lambda cfg: FileStore(cfg.options["path"]),
    "null": lambda cfg: NullStore(),
}


def validate_store_name(name: Optional[str], config: LabConfig) -> StoreConfig:
    """Return the configuration for ``name`` or raise ConfigurationError."""
    if not name or name not in config.stores:
        raise ConfigurationError(f"Missing / unsupported cache store '{name or ''}'.")
    return config.stores[name]


def resolve_store(
    name: Optional[str],
    config: LabConfig,
    drivers: Optional[dict[str, StoreFactory]] = None,
) -> BaseStore:
    """Validate ``name`` against the configured stores and build the store.

    No store is constructed, and so no store call is made, for an unknown name.
    """
    store_config = validate_store_name(name, config)
    factories = DRIVERS if drivers is None else drivers
    return factories[store_config.driver](store_config)


def list_stores(config: LabConfig) -> list[str]:
    """List configured store names."""
    return list(config.stores.keys())
