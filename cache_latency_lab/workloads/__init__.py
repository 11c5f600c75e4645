"""
Workload definitions for cache latency benchmarking.
"""

from .fixtures import WEBPAGE_FIXTURE, FixtureStore
from .generator import (
    ARTICLE_WORDS,
    PARAGRAPH_WORDS,
    STATS_SAMPLE_SIZE,
    Payload,
    PayloadGenerator,
    WordSource,
    WorkloadName,
    list_workloads,
    select_workloads,
)

__all__ = [
    "ARTICLE_WORDS",
    "PARAGRAPH_WORDS",
    "STATS_SAMPLE_SIZE",
    "WEBPAGE_FIXTURE",
    "FixtureStore",
    "Payload",
    "PayloadGenerator",
    "WordSource",
    "WorkloadName",
    "list_workloads",
    "select_workloads",
]
