"""
Output for benchmark reports.

Provides CLI tables, JSON export and charts.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .aggregator import BenchmarkReport

if TYPE_CHECKING:
    from .runner import BenchmarkConfig

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """Generates console/CLI reports."""

    headers = ("Test", "Write", "Read")

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def _color(self, text: str, color: str) -> str:
        """Apply ANSI color if enabled."""
        if not self.use_color:
            return text

        colors = {
            "green": "\033[92m",
            "blue": "\033[94m",
            "bold": "\033[1m",
            "reset": "\033[0m",
        }

        return f"{colors.get(color, '')}{text}{colors['reset']}"

    def format_micros(self, us: float) -> str:
        """Format a mean latency for display."""
        return f"{us:.2f}"

    def rows(self, report: BenchmarkReport) -> list[tuple[str, str, str]]:
        """Table cells, one row per workload in report order."""
        return [
            (row.test, self.format_micros(row.write_mean_us), self.format_micros(row.read_mean_us))
            for row in report.rows
        ]

    def table(self, report: BenchmarkReport) -> str:
        """Render the results table with box borders."""
        cells = self.rows(report)
        widths = [
            max(len(self.headers[i]), *(len(row[i]) for row in cells)) if cells else len(self.headers[i])
            for i in range(len(self.headers))
        ]

        border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

        def line(values, align_right=False) -> str:
            parts = []
            for i, value in enumerate(values):
                # Numbers right-aligned, test names left-aligned
                if align_right and i > 0:
                    parts.append(f" {value:>{widths[i]}} ")
                else:
                    parts.append(f" {value:<{widths[i]}} ")
            return "|" + "|".join(parts) + "|"

        lines = [border, self._color(line(self.headers), "bold"), border]
        for row in cells:
            lines.append(line(row, align_right=True))
        lines.append(border)
        return "\n".join(lines)

    def single_result(self, report: BenchmarkReport) -> str:
        """Generate the full report for one store."""
        lines = []
        lines.append(self._color(f"Cache Store: {report.store}", "green"))
        lines.append(self.table(report))
        lines.append(f"Timings given in microseconds (mean of {report.runs} runs per test).")
        if report.duration_seconds is not None:
            lines.append(f"Total duration: {report.duration_seconds:.1f}s")
        return "\n".join(lines)


class JSONReporter:
    """Exports reports as JSON for further analysis."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results")

    def save_report(self, report: BenchmarkReport, config: Optional["BenchmarkConfig"] = None) -> Path:
        """Save a report to a timestamped JSON file, with the run config if given."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stamp = report.started_at.strftime("%Y%m%d_%H%M%S") if report.started_at else "report"
        filepath = self.output_dir / f"{report.store}_{stamp}.json"

        data = report.to_dict()
        if config is not None:
            data["config"] = config.to_dict()

        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)

        logger.info("Saved JSON report to %s", filepath)
        return filepath

    def load_report(self, filepath: Path) -> dict:
        """Load a report from JSON."""
        with open(filepath) as f:
            return json.load(f)


class ChartReporter:
    """Generates visual charts using matplotlib."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results/charts")
        self._matplotlib_available = False
        self._check_matplotlib()

    def _check_matplotlib(self):
        """Check if matplotlib is available."""
        try:
            import matplotlib
            matplotlib.use("Agg")  # Non-interactive backend
            self._matplotlib_available = True
        except ImportError:
            self._matplotlib_available = False

    @property
    def available(self) -> bool:
        return self._matplotlib_available

    def latency_bar_chart(
        self,
        report: BenchmarkReport,
        filename: Optional[str] = None,
    ) -> Optional[Path]:
        """Generate a grouped bar chart of mean write/read latency per workload."""
        if not self._matplotlib_available:
            logger.warning("matplotlib not available for charts")
            return None

        if not report.rows:
            return None

        import matplotlib.pyplot as plt
        import numpy as np

        names = [row.test for row in report.rows]
        writes = [row.write_mean_us for row in report.rows]
        reads = [row.read_mean_us for row in report.rows]

        x = np.arange(len(names))
        width = 0.35

        fig, ax = plt.subplots(figsize=(10, 6))
        ax.bar(x - width / 2, writes, width, label="Write", color="steelblue")
        ax.bar(x + width / 2, reads, width, label="Read", color="coral")

        ax.set_xlabel("Test")
        ax.set_ylabel("Mean latency (µs)")
        ax.set_title(f"Cache Store: {report.store} ({report.runs} runs per test)")
        ax.set_xticks(x)
        ax.set_xticklabels(names)
        ax.legend()

        fig.tight_layout()

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filename = filename or f"{report.store}_latency.png"
        filepath = self.output_dir / filename
        fig.savefig(filepath, dpi=150, bbox_inches="tight")
        plt.close(fig)

        logger.info("Saved chart to %s", filepath)
        return filepath
