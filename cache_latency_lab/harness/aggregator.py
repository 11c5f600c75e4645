"""
Reduction of raw timing series into the benchmark report.

Each series is reduced to its arithmetic mean; no trimming or percentiles.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Optional

from ..workloads.generator import WorkloadName

if TYPE_CHECKING:
    from .runner import WorkloadTimings


@dataclass(frozen=True)
class ReportRow:
    """Mean write/read latency for one workload, in microseconds."""

    workload: WorkloadName
    write_mean_us: float
    read_mean_us: float
    payload_bytes: int = 0

    @property
    def test(self) -> str:
        return self.workload.title

    def to_dict(self) -> dict:
        return {
            "test": self.workload.value,
            "write_mean_us": self.write_mean_us,
            "read_mean_us": self.read_mean_us,
            "payload_bytes": self.payload_bytes,
        }


@dataclass(frozen=True)
class BenchmarkReport:
    """Summary of a complete run against one store."""

    store: str
    runs: int
    rows: tuple[ReportRow, ...]
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def workloads(self) -> list[WorkloadName]:
        return [row.workload for row in self.rows]

    def row(self, workload: WorkloadName) -> ReportRow:
        for row in self.rows:
            if row.workload is workload:
                return row
        raise KeyError(workload.value)

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.started_at is None or self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()

    def to_dict(self) -> dict:
        """Convert report to dictionary for serialization."""
        return {
            "store": self.store,
            "runs": self.runs,
            "unit": "microseconds",
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
            "duration_seconds": self.duration_seconds,
            "results": [row.to_dict() for row in self.rows],
        }


def aggregate(
    store: str,
    runs: int,
    timings: Iterable[WorkloadTimings],
    started_at: Optional[datetime] = None,
    finished_at: Optional[datetime] = None,
) -> BenchmarkReport:
    """Build a report from collected timings, keeping their order."""
    rows = tuple(
        ReportRow(
            workload=t.workload,
            write_mean_us=t.write.mean(),
            read_mean_us=t.read.mean(),
            payload_bytes=t.payload_bytes,
        )
        for t in timings
    )
    return BenchmarkReport(
        store=store,
        runs=runs,
        rows=rows,
        started_at=started_at,
        finished_at=finished_at,
    )
