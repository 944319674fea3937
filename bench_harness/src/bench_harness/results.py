"""Measurement records, report rendering, and CSV export."""

import csv
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from .formatting import format_bytes, format_duration
from .metrics import MemorySnapshot


@dataclass
class MeasurementRun:
    """One complete execution of an operation for a label/iteration-count pair.

    Attributes:
        label: Display name of the run
        iterations: Number of times the operation was invoked
        duration_ms: Total wall-clock duration of all iterations in milliseconds
        memory_before: Memory snapshot taken before the first iteration
        memory_after: Memory snapshot taken after the last iteration
        group: Optional key used to compare related runs in the summary
        timestamp: Timestamp when the run finished (auto-set if not provided)
    """

    label: str
    iterations: int
    duration_ms: float
    memory_before: MemorySnapshot
    memory_after: MemorySnapshot
    group: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = datetime.now()

    @property
    def mean_duration_ms(self) -> float:
        return self.duration_ms / self.iterations

    @property
    def memory_delta(self) -> MemorySnapshot:
        return self.memory_after - self.memory_before

    def render_report(self) -> str:
        """Render the human-readable report printed after the run."""
        delta = self.memory_delta
        lines = [
            "",
            f"Benchmarking: {self.label}",
            f"Iterations: {self.iterations}",
            "",
            "Results:",
            f"Total Time: {format_duration(self.duration_ms)}",
            f"Average Time per Operation: {format_duration(self.mean_duration_ms)}",
            "",
            "Memory Usage:",
            f"Heap Used: {format_bytes(delta.heap_used)}",
            f"Heap Total: {format_bytes(delta.heap_total)}",
            f"RSS: {format_bytes(delta.rss)}",
        ]
        return "\n".join(lines)


class ResultCollector:
    """Collects the runs of one benchmark session, prints a comparison, exports to CSV."""

    FIELDNAMES = [
        "run_number",
        "timestamp",
        "group",
        "label",
        "iterations",
        "duration_ms",
        "mean_duration_ms",
        "heap_used_delta",
        "heap_total_delta",
        "rss_delta",
    ]

    def __init__(self, output_dir: Optional[str] = None, output_filename: str = "results.csv"):
        """Initialize result collector.

        Args:
            output_dir: Directory for CSV output, or None to disable export
            output_filename: Filename for CSV output
        """
        self.output_dir = Path(output_dir) if output_dir else None
        self.output_filename = output_filename
        self.results: List[MeasurementRun] = []

    def add_result(self, result: MeasurementRun) -> None:
        self.results.append(result)

    def fastest_by_group(self) -> Dict[str, MeasurementRun]:
        """Return the run with the lowest mean duration for each group.

        Runs without a group are compared only against themselves, keyed by label.
        """
        fastest: Dict[str, MeasurementRun] = {}
        for result in self.results:
            key = result.group or result.label
            current = fastest.get(key)
            if current is None or result.mean_duration_ms < current.mean_duration_ms:
                fastest[key] = result
        return fastest

    def export_to_csv(self) -> Optional[str]:
        """Export results to CSV file.

        Returns:
            Path to the created CSV file, or None when no output directory is set
        """
        if self.output_dir is None:
            return None
        self.output_dir.mkdir(parents=True, exist_ok=True)
        csv_path = self.output_dir / self.output_filename

        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()

            for i, result in enumerate(self.results, start=1):
                delta = result.memory_delta
                writer.writerow({
                    "run_number": i,
                    "timestamp": result.timestamp.isoformat() if result.timestamp else "",
                    "group": result.group or "",
                    "label": result.label,
                    "iterations": result.iterations,
                    "duration_ms": result.duration_ms,
                    "mean_duration_ms": result.mean_duration_ms,
                    "heap_used_delta": delta.heap_used,
                    "heap_total_delta": delta.heap_total,
                    "rss_delta": delta.rss,
                })

        return str(csv_path)

    def print_summary(self) -> None:
        """Print a comparison of all collected runs to console."""
        if not self.results:
            print("No results collected.")
            return

        fastest = self.fastest_by_group()

        print("\nBenchmark Summary:")
        print(f"  Total runs: {len(self.results)}")
        current_group = object()
        for result in self.results:
            key = result.group or result.label
            if result.group != current_group:
                current_group = result.group
                if result.group:
                    print(f"\n  {result.group}:")
            baseline = fastest[key].mean_duration_ms
            relative = result.mean_duration_ms / baseline if baseline > 0 else 1.0
            print(
                f"    {result.label}: "
                f"total={format_duration(result.duration_ms)}, "
                f"mean={result.mean_duration_ms:.6f}ms, "
                f"x{relative:.2f} vs fastest"
            )
