"""
In-process dictionary store with per-key expiry.
"""

import time
from typing import Callable, Optional

from .base import BaseStore


class ArrayStore(BaseStore):
    """Keeps entries in a dict for the lifetime of the process.

    Expired entries are dropped lazily when read.
    """

    name = "array"

    def __init__(self, now: Callable[[], float] = time.monotonic):
        self._now = now
        self._entries: dict[str, tuple[str, float]] = {}

    def flush(self) -> None:
        self._entries.clear()

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self._entries[key] = (value, self._now() + ttl_seconds)

    def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._now() >= expires_at:
            del self._entries[key]
            return None
        return value

    def __len__(self) -> int:
        return len(self._entries)
