"""Benchmark configurations and predefined suites."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class BenchmarkConfig:
    """Configuration for one kernel timing run."""

    function: str = "logistic"
    method: str = "loop"
    n_elements: int = 1_000_000
    n_workers: int = 1
    inplace: bool = True
    n_warmup: int = 1
    n_runs: int = 5
    random_seed: int = 42

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


def _thread_scaling(function: str) -> list[BenchmarkConfig]:
    return [BenchmarkConfig(function=function, n_elements=10_000_000, n_workers=w) for w in (1, 2, 4, 8)]


BENCHMARK_SUITES: dict[str, list[BenchmarkConfig]] = {
    "methods": [
        BenchmarkConfig(function=function, method=method, inplace=inplace)
        for function in ("logistic", "logit")
        for method in ("loop", "numpy", "scipy")
        for inplace in (True, False)
    ],
    "thread_scaling": _thread_scaling("logistic") + _thread_scaling("logit"),
    "sizes": [
        BenchmarkConfig(n_elements=1_000),
        BenchmarkConfig(n_elements=10_000),
        BenchmarkConfig(n_elements=100_000),
        BenchmarkConfig(n_elements=1_000_000),
        BenchmarkConfig(n_elements=10_000_000),
    ],
}
