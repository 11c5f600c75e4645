"""
Cache Latency Lab - write/read latency benchmarks for cache stores.

Measures how long a cache store takes to write and read payloads of
representative sizes, from a single integer up to a full HTML page.

Key modules:
- backends: The cache port and the bundled stores
- workloads: Payload generation and fixtures
- instrumentation: Clocks, timers and timing series
- harness: Benchmark orchestration, aggregation and reporting
"""

__version__ = "0.1.0"

from . import backends
from . import harness
from . import instrumentation
from . import workloads
from .config import LabConfig
from .errors import (
    BackendOperationError,
    CacheLabError,
    ConfigurationError,
    FixtureLoadError,
)

__all__ = [
    "backends",
    "harness",
    "instrumentation",
    "workloads",
    "LabConfig",
    "BackendOperationError",
    "CacheLabError",
    "ConfigurationError",
    "FixtureLoadError",
]
