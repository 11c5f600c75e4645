"""
Benchmark harness for cache latency experiments.

Provides orchestration, aggregation and reporting.
"""

from .aggregator import (
    BenchmarkReport,
    ReportRow,
    aggregate,
)

from .runner import (
    BenchmarkConfig,
    BenchmarkRunner,
    WorkloadTimings,
)

from .reporter import (
    ChartReporter,
    ConsoleReporter,
    JSONReporter,
)

__all__ = [
    # Aggregator
    "BenchmarkReport",
    "ReportRow",
    "aggregate",
    # Runner
    "BenchmarkConfig",
    "BenchmarkRunner",
    "WorkloadTimings",
    # Reporter
    "ChartReporter",
    "ConsoleReporter",
    "JSONReporter",
]
