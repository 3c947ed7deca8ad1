"""CLI entry point for running kernel benchmarks."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from benchmark.config import BENCHMARK_SUITES, BenchmarkConfig
from benchmark.results.storage import BenchmarkResult, ResultStorage, thread_speedup
from benchmark.runners.kernel_runner import KernelBenchmarkRunner
from logitkit import METHODS

logger = logging.getLogger(__name__)


def run_single_benchmark(config: BenchmarkConfig, runner: KernelBenchmarkRunner) -> BenchmarkResult:
    """Run a single benchmark configuration."""
    variant = "in-place" if config.inplace else "allocating"
    logger.info(
        "%s (%s, %s): %d elements, %d workers, %d runs",
        config.function,
        config.method,
        variant,
        config.n_elements,
        config.n_workers,
        config.n_runs,
    )

    timing = runner.time_kernel(config)

    if timing.success:
        logger.info(
            "  %.6fs (std: %.6fs), peak alloc %.1f KiB",
            timing.mean_time,
            timing.std_time,
            timing.peak_bytes / 1024,
        )
    else:
        logger.error("  FAILED - %s", timing.error)

    throughput = float("nan")
    if timing.success and timing.mean_time > 0:
        throughput = config.n_elements / timing.mean_time

    return BenchmarkResult(
        function=config.function,
        method=config.method,
        n_elements=config.n_elements,
        n_workers=config.n_workers,
        inplace=config.inplace,
        mean_time=timing.mean_time,
        std_time=timing.std_time,
        min_time=timing.min_time,
        max_time=timing.max_time,
        peak_bytes=timing.peak_bytes,
        success=timing.success,
        error=timing.error,
        throughput=throughput,
        timestamp=datetime.now().isoformat(),
    )


def run_benchmark_suite(configs: list[BenchmarkConfig]) -> list[BenchmarkResult]:
    """Run a suite of benchmark configurations."""
    runner = KernelBenchmarkRunner()
    results = []
    for i, config in enumerate(configs):
        logger.info("Benchmark %d/%d:", i + 1, len(configs))
        results.append(run_single_benchmark(config, runner))
    return results


def main(argv=None):
    """Run benchmark CLI."""
    parser = argparse.ArgumentParser(
        description="Benchmark vectorized, elementwise and multithreaded logistic/logit kernels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--suite",
        type=str,
        choices=list(BENCHMARK_SUITES.keys()),
        help="Predefined benchmark suite to run",
    )
    parser.add_argument("--function", type=str, default="logistic", choices=["logistic", "logit"])
    parser.add_argument("--method", type=str, default="loop", choices=list(METHODS), help="Evaluation strategy")
    parser.add_argument("--n-elements", type=int, default=1_000_000, help="Input length")
    parser.add_argument("--workers", type=int, default=1, help="Worker threads (-1 for all cores)")
    parser.add_argument("--allocating", action="store_true", help="Time the allocating variant")
    parser.add_argument("--warmup", type=int, default=1, help="Number of warmup runs")
    parser.add_argument("--runs", type=int, default=5, help="Number of timed runs")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output-dir", type=str, default="benchmark/output", help="Output directory")
    parser.add_argument("--quiet", action="store_true", help="Suppress verbose output")

    args = parser.parse_args(argv)

    log_level = logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )

    if args.suite:
        configs = BENCHMARK_SUITES[args.suite]
        suite_name = args.suite
    else:
        configs = [
            BenchmarkConfig(
                function=args.function,
                method=args.method,
                n_elements=args.n_elements,
                n_workers=args.workers,
                inplace=not args.allocating,
                n_warmup=args.warmup,
                n_runs=args.runs,
                random_seed=args.seed,
            )
        ]
        suite_name = "custom"

    logger.info("Running benchmark suite: %s", suite_name)
    logger.info("Number of configurations: %d", len(configs))

    results = run_benchmark_suite(configs)

    storage = ResultStorage(output_dir=args.output_dir)
    csv_path = storage.save_csv(results, storage.generate_filename(suite_name, "csv"))
    json_path = storage.save_json(results, storage.generate_filename(suite_name, "json"))

    logger.info("Results saved to:")
    logger.info("  CSV: %s", csv_path)
    logger.info("  JSON: %s", json_path)

    if any(r.n_workers > 1 for r in results):
        logger.info("Thread scaling:\n%s", thread_speedup(results))

    return results


if __name__ == "__main__":
    main()
