"""Result storage utilities for benchmark outputs."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path

import polars as pl


@dataclass
class BenchmarkResult:
    """Container for one kernel benchmark result."""

    function: str
    method: str
    n_elements: int
    n_workers: int
    inplace: bool

    mean_time: float
    std_time: float
    min_time: float
    max_time: float
    peak_bytes: int
    success: bool
    error: str | None

    throughput: float
    timestamp: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


def results_to_frame(results: list[BenchmarkResult]) -> pl.DataFrame:
    """Collect results into a DataFrame."""
    if not results:
        return pl.DataFrame()
    return pl.DataFrame([r.to_dict() for r in results])


def thread_speedup(results: list[BenchmarkResult]) -> pl.DataFrame:
    """Speedup of each run relative to the single-worker run of the same kernel.

    Runs are matched on function, method, size and variant. Groups without a
    successful single-worker run get a null speedup.
    """
    frame = results_to_frame(results)
    if frame.is_empty():
        return frame

    keys = ["function", "method", "n_elements", "inplace"]
    ok = frame.filter(pl.col("success"))
    baseline = ok.filter(pl.col("n_workers") == 1).group_by(keys).agg(pl.col("mean_time").min().alias("serial_time"))
    return (
        ok.join(baseline, on=keys, how="left")
        .with_columns((pl.col("serial_time") / pl.col("mean_time")).alias("speedup"))
        .with_columns((pl.col("speedup") / pl.col("n_workers")).alias("efficiency"))
        .select([*keys, "n_workers", "mean_time", "speedup", "efficiency"])
        .sort([*keys, "n_workers"])
    )


class ResultStorage:
    """Handles saving and loading benchmark results."""

    def __init__(self, output_dir: str | Path = "benchmark/output"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def save_csv(self, results: list[BenchmarkResult], filename: str) -> Path:
        """Save results to CSV file."""
        filepath = self.output_dir / filename
        if not results:
            return filepath

        fieldnames = list(results[0].to_dict().keys())

        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for result in results:
                writer.writerow(result.to_dict())

        return filepath

    def save_json(self, results: list[BenchmarkResult], filename: str) -> Path:
        """Save results to JSON file."""
        filepath = self.output_dir / filename

        data = {
            "timestamp": datetime.now().isoformat(),
            "n_results": len(results),
            "results": [r.to_dict() for r in results],
        }

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        return filepath

    def load_csv(self, filename: str) -> list[dict]:
        """Load results from CSV file."""
        filepath = self.output_dir / filename

        with open(filepath, encoding="utf-8") as f:
            return list(csv.DictReader(f))

    def load_json(self, filename: str) -> dict:
        """Load results from JSON file."""
        filepath = self.output_dir / filename

        with open(filepath, encoding="utf-8") as f:
            return json.load(f)

    def generate_filename(self, suite_name: str | None = None, extension: str = "csv") -> str:
        """Generate a timestamped filename."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        if suite_name:
            return f"benchmark_{suite_name}_{timestamp}.{extension}"
        return f"benchmark_{timestamp}.{extension}"
