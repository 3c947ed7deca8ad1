"""Benchmark suite for comparing logistic/logit evaluation strategies."""

from benchmark.config import BENCHMARK_SUITES, BenchmarkConfig
from benchmark.results.storage import BenchmarkResult, ResultStorage, results_to_frame, thread_speedup
from benchmark.runners.kernel_runner import KernelBenchmarkRunner

__all__ = [
    "BENCHMARK_SUITES",
    "BenchmarkConfig",
    "BenchmarkResult",
    "KernelBenchmarkRunner",
    "ResultStorage",
    "results_to_frame",
    "thread_speedup",
]
