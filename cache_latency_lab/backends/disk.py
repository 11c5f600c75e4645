"""
On-disk store backed by diskcache.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from diskcache import Cache

from .base import BaseStore

logger = logging.getLogger(__name__)


class FileStore(BaseStore):
    """Stores entries in a SQLite-indexed directory via ``diskcache.Cache``."""

    name = "file"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)
        self._cache = Cache(str(self.path))
        logger.debug("Opened file store at %s", self.path)

    def flush(self) -> None:
        self._cache.clear()

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self._cache.set(key, value, expire=ttl_seconds)

    def get(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    def close(self) -> None:
        self._cache.close()
        logger.debug("Closed file store at %s", self.path)
