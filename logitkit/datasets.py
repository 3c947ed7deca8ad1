"""Random sample generators for exercising the transforms."""

from __future__ import annotations

import numpy as np

__all__ = ["sample_log_odds", "sample_probabilities"]


def sample_probabilities(size, rng=None):
    """Draw probabilities uniformly from the open interval :math:`(0, 1)`.

    Parameters
    ----------
    size : int or tuple of int
        Output shape.
    rng : int, Generator, or None, default None
        Random generator, or a seed for :func:`numpy.random.default_rng`.
        NumPy's global random state is never used.

    Returns
    -------
    ndarray
        Float64 samples strictly between 0 and 1.
    """
    rng = np.random.default_rng(rng)
    samples = rng.random(size)
    # Generator.random draws from [0, 1); remap exact zeros
    return np.where(samples == 0.0, np.nextafter(0.0, 1.0), samples)


def sample_log_odds(size, rng=None, scale=1.0):
    """Draw log-odds values from a centred logistic distribution.

    Parameters
    ----------
    size : int or tuple of int
        Output shape.
    rng : int, Generator, or None, default None
        Random generator, or a seed for :func:`numpy.random.default_rng`.
    scale : float, default 1.0
        Scale of the logistic distribution.

    Returns
    -------
    ndarray
        Float64 samples.
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}.")
    rng = np.random.default_rng(rng)
    return rng.logistic(loc=0.0, scale=scale, size=size)
