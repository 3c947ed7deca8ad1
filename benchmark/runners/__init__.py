"""Benchmark runners for timing the kernels."""

from benchmark.runners.kernel_runner import KernelBenchmarkRunner

__all__ = ["KernelBenchmarkRunner"]
