"""Elementwise logistic and logit transforms over sequences."""

from __future__ import annotations

import numpy as np

from logitkit.core.config import resolve_num_workers
from logitkit.core.kernels import CHUNK_KERNELS
from logitkit.core.parallel import run_chunked
from logitkit.core.validation import check_same_length, detach_overlap

__all__ = [
    "METHODS",
    "logistic_inplace",
    "logistic_vector",
    "logit_inplace",
    "logit_vector",
]

METHODS = ("loop", "numpy", "scipy")


def _chunk_kernel(name, method):
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}. Choose one of {', '.join(repr(m) for m in METHODS)}.")
    return CHUNK_KERNELS[name][method]


def _is_direct_target(dest):
    return (
        isinstance(dest, np.ndarray)
        and dest.dtype == np.float64
        and dest.flags.c_contiguous
        and dest.flags.writeable
    )


def _transform_into(name, dest, src, n_jobs, method):
    kernel = _chunk_kernel(name, method)
    n_workers = resolve_num_workers(n_jobs)
    src_arr = np.ravel(np.asarray(src, dtype=np.float64))
    check_same_length(dest, src_arr)

    if _is_direct_target(dest):
        out = dest.reshape(-1)
        run_chunked(kernel, out, detach_overlap(out, src_arr), n_workers)
        return dest

    out = np.empty(src_arr.size, dtype=np.float64)
    run_chunked(kernel, out, src_arr, n_workers)
    if isinstance(dest, np.ndarray):
        dest[...] = out.reshape(dest.shape)
    else:
        dest[:] = out.tolist()
    return dest


def _transform_new(name, src, n_jobs, method):
    kernel = _chunk_kernel(name, method)
    n_workers = resolve_num_workers(n_jobs)
    arr = np.asarray(src, dtype=np.float64)
    flat = np.ravel(arr)
    out = np.empty(flat.size, dtype=np.float64)
    run_chunked(kernel, out, flat, n_workers)
    return out.reshape(arr.shape)


def logistic_inplace(dest, src, *, n_jobs=None, method="loop"):
    """Write ``logistic(src[i])`` into ``dest[i]`` for every index.

    ``dest`` may be ``src`` itself for a true in-place update. Partially
    overlapping buffers are handled as if ``src`` had been read in full
    before the first write.

    Parameters
    ----------
    dest : ndarray or mutable sequence
        Output storage with as many elements as ``src``. Float64 C-contiguous
        arrays are written directly; anything else is filled from a temporary
        buffer.
    src : array_like
        Log-odds values.
    n_jobs : int or None, default None
        Worker threads. ``None`` uses :func:`~logitkit.core.config.get_num_workers`,
        ``-1`` uses all cores.
    method : {"loop", "numpy", "scipy"}, default "loop"
        Compiled elementwise loop, vectorized NumPy ufunc calls, or
        :func:`scipy.special.expit`.

    Returns
    -------
    ndarray or mutable sequence
        ``dest``.

    Raises
    ------
    ContractViolation
        If ``dest`` and ``src`` differ in length. Nothing is written.
    """
    return _transform_into("logistic", dest, src, n_jobs, method)


def logit_inplace(dest, src, *, n_jobs=None, method="loop"):
    """Write ``logit(src[i])`` into ``dest[i]`` for every index.

    Same contract as :func:`logistic_inplace`; ``method="scipy"`` uses
    :func:`scipy.special.logit`. Probabilities outside :math:`[0, 1]` give NaN.
    """
    return _transform_into("logit", dest, src, n_jobs, method)


def logistic_vector(src, *, n_jobs=None, method="loop"):
    """Return a new float64 array holding ``logistic`` of each element of ``src``.

    Parameters
    ----------
    src : array_like
        Log-odds values of any shape.
    n_jobs : int or None, default None
        Worker threads, see :func:`logistic_inplace`.
    method : {"loop", "numpy", "scipy"}, default "loop"
        Evaluation strategy, see :func:`logistic_inplace`.

    Returns
    -------
    ndarray
        Probabilities with the shape of ``src``.
    """
    return _transform_new("logistic", src, n_jobs, method)


def logit_vector(src, *, n_jobs=None, method="loop"):
    """Return a new float64 array holding ``logit`` of each element of ``src``."""
    return _transform_new("logit", src, n_jobs, method)
