"""Benchmark result storage."""

from benchmark.results.storage import BenchmarkResult, ResultStorage, results_to_frame, thread_speedup

__all__ = ["BenchmarkResult", "ResultStorage", "results_to_frame", "thread_speedup"]
