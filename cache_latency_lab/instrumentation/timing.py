"""
Timing utilities for cache latency benchmarking.

Provides:
- Clocks reporting monotonic time in whole microseconds
- A Timer for manual start/stop timing of a single operation
- TimingSeries, an ordered collection of per-trial latencies
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol


class Clock(Protocol):
    """Source of monotonic time in microseconds."""

    def now_us(self) -> int:
        ...


class MonotonicClock:
    """Monotonic time from ``time.perf_counter_ns`` at microsecond resolution."""

    def now_us(self) -> int:
        return time.perf_counter_ns() // 1000


_default_clock = MonotonicClock()


class Timer:
    """Simple timer for manual timing control."""

    def __init__(self, name: str = "timer", clock: Optional[Clock] = None):
        self.name = name
        self.clock = clock or _default_clock
        self.start_us: int = 0
        self.end_us: int = 0
        self._running = False

    def start(self) -> "Timer":
        """Start the timer."""
        self.start_us = self.clock.now_us()
        self._running = True
        return self

    def stop(self) -> "Timer":
        """Stop the timer."""
        self.end_us = self.clock.now_us()
        self._running = False
        return self

    @property
    def elapsed_us(self) -> int:
        """Elapsed time in microseconds."""
        end = self.end_us if not self._running else self.clock.now_us()
        return end - self.start_us


@contextmanager
def timed(name: str = "operation", clock: Optional[Clock] = None) -> Iterator[Timer]:
    """Context manager for timing synchronous operations.

    Usage:
        with timed("put") as timer:
            store.put(key, value, 600)
        print(f"Elapsed: {timer.elapsed_us}us")
    """
    timer = Timer(name, clock).start()
    try:
        yield timer
    finally:
        timer.stop()


@dataclass
class TimingSeries:
    """Ordered per-trial latencies, in microseconds, for one operation."""

    operation: str
    samples: list[int] = field(default_factory=list)

    def add(self, elapsed_us: int) -> None:
        """Add a trial latency."""
        self.samples.append(elapsed_us)

    @property
    def count(self) -> int:
        """Number of recorded trials."""
        return len(self.samples)

    @property
    def total_us(self) -> int:
        return sum(self.samples)

    def mean(self) -> float:
        """Arithmetic mean of the recorded latencies."""
        if not self.samples:
            raise ValueError(f"Cannot average an empty {self.operation} series")
        return self.total_us / self.count

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[int]:
        return iter(self.samples)
