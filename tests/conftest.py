"""
PyTest configuration for Cache Latency Lab tests.

Provides fake clocks and call-recording stores.
"""
from typing import Optional

import pytest

from cache_latency_lab.workloads import FixtureStore, PayloadGenerator, WordSource


class FakeClock:
    """Clock that only moves when advanced."""

    def __init__(self, start_us: int = 1_000_000):
        self.current_us = start_us

    def now_us(self) -> int:
        return self.current_us

    def advance(self, us: int) -> None:
        self.current_us += us


class RecordingStore:
    """In-memory store that records every call made to it."""

    def __init__(self, clock: Optional[FakeClock] = None, latency_us: int = 0):
        self.clock = clock
        self.latency_us = latency_us
        self.calls: list[tuple] = []
        self.data: dict[str, str] = {}

    def _tick(self) -> None:
        if self.clock is not None:
            self.clock.advance(self.latency_us)

    def flush(self) -> None:
        self.calls.append(("flush",))
        self.data.clear()

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self.calls.append(("put", key, ttl_seconds))
        self._tick()
        self.data[key] = value

    def get(self, key: str) -> Optional[str]:
        self.calls.append(("get", key))
        self._tick()
        return self.data.get(key)

    def calls_for(self, operation: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == operation]


class FailingFlushStore(RecordingStore):
    """Store whose flush raises on the Nth call."""

    def __init__(self, fail_on: int = 2):
        super().__init__()
        self.fail_on = fail_on
        self.flush_count = 0

    def flush(self) -> None:
        self.flush_count += 1
        if self.flush_count == self.fail_on:
            raise ConnectionError("store went away")
        super().flush()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def generator() -> PayloadGenerator:
    """Deterministic payload generator using the bundled fixtures."""
    return PayloadGenerator(source=WordSource(seed=1234), fixtures=FixtureStore())


@pytest.fixture
def missing_fixture_generator(tmp_path) -> PayloadGenerator:
    """Generator pointed at an empty fixtures directory."""
    return PayloadGenerator(source=WordSource(seed=1234), fixtures=FixtureStore(tmp_path))


@pytest.fixture
def slow_store(fake_clock: FakeClock) -> RecordingStore:
    """Store whose put/get each take 100us on the fake clock."""
    return RecordingStore(clock=fake_clock, latency_us=100)


@pytest.fixture
def failing_flush_store() -> FailingFlushStore:
    return FailingFlushStore(fail_on=2)
