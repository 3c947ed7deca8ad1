"""Core kernels, parallel dispatch and configuration."""

from logitkit.core.config import (
    ENV_NUM_THREADS,
    get_num_workers,
    resolve_num_workers,
    set_num_workers,
    use_num_workers,
)
from logitkit.core.kernels import CHUNK_KERNELS, logistic, logit
from logitkit.core.parallel import chunk_bounds, parallel_map, run_chunked
from logitkit.core.validation import ContractViolation, check_same_length, detach_overlap

__all__ = [
    "CHUNK_KERNELS",
    "ENV_NUM_THREADS",
    "ContractViolation",
    "check_same_length",
    "chunk_bounds",
    "detach_overlap",
    "get_num_workers",
    "logistic",
    "logit",
    "parallel_map",
    "resolve_num_workers",
    "run_chunked",
    "set_num_workers",
    "use_num_workers",
]
