"""
Error types raised by the cache latency lab.

Every error is fatal to a benchmark run: nothing is retried, since a retry
would change the latency being measured.
"""

from pathlib import Path
from typing import Optional


class CacheLabError(Exception):
    """Base class for all cache latency lab errors."""


class ConfigurationError(CacheLabError):
    """Missing or invalid configuration (unknown store, bad run count, ...)."""


class FixtureLoadError(CacheLabError):
    """A static fixture file could not be read."""

    def __init__(self, path: Path, reason: str = "file not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to load fixture '{path}': {reason}")


class BackendOperationError(CacheLabError):
    """A flush/put/get call against the store under test failed."""

    def __init__(
        self,
        operation: str,
        store: str,
        workload: Optional[str] = None,
        key: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.operation = operation
        self.store = store
        self.workload = workload
        self.key = key

        message = f"Cache store '{store}' failed during {operation}"
        if workload:
            message += f" ({workload} test)"
        if key:
            message += f" for key '{key}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
