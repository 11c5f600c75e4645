"""
Instrumentation module for cache latency benchmarking.

Provides clocks, timers and timing series.
"""

from .timing import (
    Clock,
    MonotonicClock,
    Timer,
    TimingSeries,
    timed,
)

__all__ = [
    "Clock",
    "MonotonicClock",
    "Timer",
    "TimingSeries",
    "timed",
]
