"""
Cache Port: the capability interface the benchmark harness drives.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CachePort(Protocol):
    """Minimal interface required from any cache store under test."""

    def flush(self) -> None:
        """Remove every entry. Must be callable repeatedly."""
        ...

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store value under key for ttl_seconds, overwriting any existing entry."""
        ...

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None when absent."""
        ...


class BaseStore:
    """Shared behaviour for the bundled stores.

    Stores are context managers so that file handles and connections are
    released once a run has finished.
    """

    name = "base"

    def close(self) -> None:
        """Release any resources held by the store."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
