"""
Benchmark orchestrator for cache latency experiments.

Runs every workload against a single cache store: a write test with a fresh
key per trial, then a read test against one resident key.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterator, Optional

from ..backends.base import CachePort
from ..config import DEFAULT_RUNS, DEFAULT_TTL_SECONDS
from ..errors import BackendOperationError, CacheLabError, ConfigurationError
from ..instrumentation.timing import Clock, Timer, TimingSeries
from ..workloads.generator import Payload, PayloadGenerator, WorkloadName
from .aggregator import BenchmarkReport, aggregate

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""

    store: str
    runs: int = DEFAULT_RUNS
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    workloads: list[WorkloadName] = field(default_factory=lambda: list(WorkloadName))

    def __post_init__(self):
        if self.runs < 1:
            raise ConfigurationError(f"Run count must be at least 1, got {self.runs}.")
        if not self.workloads:
            raise ConfigurationError("At least one workload must be selected.")
        # Report rows always follow declaration order.
        selected = set(self.workloads)
        self.workloads = [w for w in WorkloadName if w in selected]

    def write_key(self, iteration: int) -> str:
        return f"{self.store}-write-{iteration}"

    @property
    def read_key(self) -> str:
        return f"{self.store}-read"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "store": self.store,
            "runs": self.runs,
            "ttl_seconds": self.ttl_seconds,
            "workloads": [w.value for w in self.workloads],
        }


@dataclass
class WorkloadTimings:
    """Write and read series collected for one workload."""

    workload: WorkloadName
    write: TimingSeries
    read: TimingSeries
    payload_bytes: int = 0


WorkloadCallback = Callable[[WorkloadTimings], None]


class BenchmarkRunner:
    """Orchestrates benchmark execution against one store."""

    def __init__(
        self,
        store: CachePort,
        config: BenchmarkConfig,
        generator: Optional[PayloadGenerator] = None,
        clock: Optional[Clock] = None,
        on_workload_complete: Optional[WorkloadCallback] = None,
    ):
        self.store = store
        self.config = config
        self.generator = generator or PayloadGenerator()
        self.clock = clock
        self.on_workload_complete = on_workload_complete
        self.timings: dict[WorkloadName, WorkloadTimings] = {}

    def run(self) -> BenchmarkReport:
        """Run every configured workload and build the report.

        Any store failure aborts the run; no report is built from partial data.
        """
        self.timings = {}
        start_time = datetime.now()

        logger.info(
            "Benchmarking cache store '%s' (%d runs per test)",
            self.config.store,
            self.config.runs,
        )

        for name in self.config.workloads:
            payload = self.generator.generate(name)
            result = self.run_workload(payload)
            self.timings[name] = result
            if self.on_workload_complete:
                self.on_workload_complete(result)

        end_time = datetime.now()

        return aggregate(
            store=self.config.store,
            runs=self.config.runs,
            timings=self.timings.values(),
            started_at=start_time,
            finished_at=end_time,
        )

    def run_workload(self, payload: Payload) -> WorkloadTimings:
        """Run the write test then the read test for one payload."""
        logger.info("Running %s test (%d bytes)", payload.name.value, payload.size_bytes)

        write = self.run_write_test(payload)
        read = self.run_read_test(payload)

        logger.debug(
            "%s: write mean %.2fus, read mean %.2fus",
            payload.name.value,
            write.mean(),
            read.mean(),
        )
        return WorkloadTimings(
            workload=payload.name,
            write=write,
            read=read,
            payload_bytes=payload.size_bytes,
        )

    def run_write_test(self, payload: Payload) -> TimingSeries:
        """Time one put per trial, each under a distinct key."""
        self._flush(payload.name)

        series = TimingSeries("write")
        timer = Timer("write", self.clock)
        ttl = self.config.ttl_seconds

        for i in range(1, self.config.runs + 1):
            key = self.config.write_key(i)
            with self._backend_call("put", payload.name, key):
                timer.start()
                self.store.put(key, payload.data, ttl)
                timer.stop()
            series.add(timer.elapsed_us)

        return series

    def run_read_test(self, payload: Payload) -> TimingSeries:
        """Time repeated gets of a single resident key."""
        self._flush(payload.name)

        key = self.config.read_key
        with self._backend_call("put", payload.name, key):
            self.store.put(key, payload.data, self.config.ttl_seconds)

        series = TimingSeries("read")
        timer = Timer("read", self.clock)

        for _ in range(self.config.runs):
            with self._backend_call("get", payload.name, key):
                timer.start()
                self.store.get(key)
                timer.stop()
            series.add(timer.elapsed_us)

        return series

    def _flush(self, workload: WorkloadName) -> None:
        with self._backend_call("flush", workload):
            self.store.flush()

    @contextmanager
    def _backend_call(
        self,
        operation: str,
        workload: WorkloadName,
        key: Optional[str] = None,
    ) -> Iterator[None]:
        try:
            yield
        except CacheLabError:
            raise
        except Exception as e:
            raise BackendOperationError(
                operation,
                self.config.store,
                workload=workload.value,
                key=key,
                cause=e,
            ) from e
