"""Base benchmark runner with common utilities."""

from __future__ import annotations

import gc
import time
import tracemalloc
from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class TimingResult:
    """Container for timing results from a benchmark run."""

    mean_time: float
    std_time: float
    min_time: float
    max_time: float
    times: list[float]
    peak_bytes: int
    success: bool
    error: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


class BaseBenchmarkRunner:
    """Shared timing and allocation helpers for benchmark runners."""

    @staticmethod
    def gc_collect() -> None:
        """Force garbage collection before timing."""
        gc.collect()

    @staticmethod
    def time_execution(func, *args, **kwargs) -> tuple[float, Any]:
        """Time a single function execution."""
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        return elapsed, result

    @staticmethod
    def measure_peak_bytes(func, *args, **kwargs) -> int:
        """Return the peak traced allocation of a single call.

        NumPy reports its data buffers to :mod:`tracemalloc`, so temporaries
        created by vectorized expressions show up here.
        """
        tracemalloc.start()
        try:
            tracemalloc.reset_peak()
            func(*args, **kwargs)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        return peak
