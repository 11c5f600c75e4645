"""
Store that discards everything; measures harness overhead alone.
"""

from typing import Optional

from .base import BaseStore


class NullStore(BaseStore):
    name = "null"

    def flush(self) -> None:
        pass

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        pass

    def get(self, key: str) -> Optional[str]:
        return None
