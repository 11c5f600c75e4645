"""
Cache stores that can be benchmarked.
"""

from .base import BaseStore, CachePort
from .disk import FileStore
from .memory import ArrayStore
from .null import NullStore
from .registry import DRIVERS, list_stores, resolve_store, validate_store_name

__all__ = [
    "ArrayStore",
    "BaseStore",
    "CachePort",
    "DRIVERS",
    "FileStore",
    "NullStore",
    "list_stores",
    "resolve_store",
    "validate_store_name",
]
