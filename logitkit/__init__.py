"""Scalar, vectorized and multithreaded logistic and logit transforms."""

from logitkit.core.config import get_num_workers, set_num_workers, use_num_workers
from logitkit.core.kernels import logistic, logit
from logitkit.core.validation import ContractViolation
from logitkit.datasets import sample_log_odds, sample_probabilities
from logitkit.transforms import (
    METHODS,
    logistic_inplace,
    logistic_vector,
    logit_inplace,
    logit_vector,
)

__version__ = "0.1.0"

__all__ = [
    "METHODS",
    "ContractViolation",
    "get_num_workers",
    "logistic",
    "logistic_inplace",
    "logistic_vector",
    "logit",
    "logit_inplace",
    "logit_vector",
    "sample_log_odds",
    "sample_probabilities",
    "set_num_workers",
    "use_num_workers",
]
