"""Tests for report aggregation."""
from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from cache_latency_lab.harness import BenchmarkReport, ReportRow, WorkloadTimings, aggregate
from cache_latency_lab.instrumentation import TimingSeries
from cache_latency_lab.workloads import WorkloadName


def make_timings(workload: WorkloadName, write: list[int], read: list[int]) -> WorkloadTimings:
    return WorkloadTimings(
        workload=workload,
        write=TimingSeries("write", write),
        read=TimingSeries("read", read),
        payload_bytes=len(workload.value),
    )


class TestAggregate:
    """Test reduction of series to means."""

    @pytest.fixture
    def report(self) -> BenchmarkReport:
        return aggregate(
            store="array",
            runs=3,
            timings=[
                make_timings(WorkloadName.INTEGER, [1, 2, 3], [4, 4, 4]),
                make_timings(WorkloadName.STATS, [10, 10, 40], [2, 3, 4]),
            ],
            started_at=datetime(2024, 1, 1, 12, 0, 0),
            finished_at=datetime(2024, 1, 1, 12, 0, 5),
        )

    def test_means(self, report: BenchmarkReport) -> None:
        integer = report.row(WorkloadName.INTEGER)
        stats = report.row(WorkloadName.STATS)

        assert integer.write_mean_us == pytest.approx(2.0)
        assert integer.read_mean_us == pytest.approx(4.0)
        assert stats.write_mean_us == pytest.approx(20.0)
        assert stats.read_mean_us == pytest.approx(3.0)

    def test_order_preserved(self, report: BenchmarkReport) -> None:
        assert report.workloads == [WorkloadName.INTEGER, WorkloadName.STATS]

    def test_missing_row(self, report: BenchmarkReport) -> None:
        with pytest.raises(KeyError):
            report.row(WorkloadName.WEBPAGE)

    def test_report_is_immutable(self, report: BenchmarkReport) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.store = "file"
        assert isinstance(report.rows, tuple)

    def test_duration(self, report: BenchmarkReport) -> None:
        assert report.duration_seconds == pytest.approx(5.0)

    def test_to_dict(self, report: BenchmarkReport) -> None:
        data = report.to_dict()

        assert data["store"] == "array"
        assert data["runs"] == 3
        assert data["unit"] == "microseconds"
        assert data["started_at"] == "2024-01-01T12:00:00"
        assert [r["test"] for r in data["results"]] == ["integer", "stats"]
        assert data["results"][0]["write_mean_us"] == pytest.approx(2.0)

    def test_empty_series_is_an_error(self) -> None:
        with pytest.raises(ValueError):
            aggregate(
                store="array",
                runs=1,
                timings=[make_timings(WorkloadName.INTEGER, [], [1])],
            )


class TestReportRow:
    def test_test_name_capitalised(self) -> None:
        row = ReportRow(WorkloadName.PARAGRAPH, 1.0, 2.0)

        assert row.test == "Paragraph"

    def test_no_timestamps(self) -> None:
        report = BenchmarkReport(store="null", runs=1, rows=())

        assert report.duration_seconds is None
        assert report.to_dict()["started_at"] is None
