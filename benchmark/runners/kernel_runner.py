"""Benchmark runner for the logistic and logit kernels."""

from __future__ import annotations

import numpy as np

from benchmark.config import BenchmarkConfig
from benchmark.runners.base import BaseBenchmarkRunner, TimingResult
from logitkit import (
    logistic_inplace,
    logistic_vector,
    logit_inplace,
    logit_vector,
    sample_log_odds,
    sample_probabilities,
)

_INPLACE = {"logistic": logistic_inplace, "logit": logit_inplace}
_ALLOCATING = {"logistic": logistic_vector, "logit": logit_vector}


class KernelBenchmarkRunner(BaseBenchmarkRunner):
    """Times one transform under a given method, worker count and variant."""

    @staticmethod
    def make_input(config: BenchmarkConfig) -> np.ndarray:
        """Generate the input array for a configuration."""
        rng = np.random.default_rng(config.random_seed)
        if config.function == "logit":
            return sample_probabilities(config.n_elements, rng)
        return sample_log_odds(config.n_elements, rng)

    def time_kernel(self, config: BenchmarkConfig) -> TimingResult:
        """Time the transform described by ``config``."""
        if config.function not in _INPLACE:
            return self._failed(f"Unknown function {config.function!r}")

        src = self.make_input(config)

        if config.inplace:
            dest = np.empty_like(src)
            func = _INPLACE[config.function]

            def run_fn():
                return func(dest, src, n_jobs=config.n_workers, method=config.method)

        else:
            func = _ALLOCATING[config.function]

            def run_fn():
                return func(src, n_jobs=config.n_workers, method=config.method)

        return self._run_timed_benchmark(run_fn, n_warmup=config.n_warmup, n_runs=config.n_runs)

    def _run_timed_benchmark(self, run_fn, n_warmup: int, n_runs: int) -> TimingResult:
        """Run a timed benchmark with warmup, multiple runs and one traced run."""
        try:
            for _ in range(n_warmup):
                self.gc_collect()
                run_fn()

            times = []
            for _ in range(n_runs):
                self.gc_collect()
                elapsed, _ = self.time_execution(run_fn)
                times.append(elapsed)

            self.gc_collect()
            peak_bytes = self.measure_peak_bytes(run_fn)

            return TimingResult(
                mean_time=float(np.mean(times)),
                std_time=float(np.std(times)),
                min_time=float(np.min(times)),
                max_time=float(np.max(times)),
                times=times,
                peak_bytes=peak_bytes,
                success=True,
            )

        except (ValueError, RuntimeError) as e:
            return self._failed(str(e))

    @staticmethod
    def _failed(error: str) -> TimingResult:
        return TimingResult(
            mean_time=float("nan"),
            std_time=float("nan"),
            min_time=float("nan"),
            max_time=float("nan"),
            times=[],
            peak_bytes=0,
            success=False,
            error=error,
        )
