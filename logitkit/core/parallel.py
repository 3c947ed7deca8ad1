"""Parallel execution utilities for chunked elementwise maps."""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

__all__ = ["chunk_bounds", "parallel_map", "run_chunked"]


def parallel_map(func, args_list, n_jobs=1):
    """Execute func(*args) for each args in args_list, optionally in parallel.

    Uses threads rather than processes because the kernels are either
    compiled with ``nogil=True`` or are NumPy/SciPy ufuncs, all of which
    release the GIL. Threads also share the output buffer, which processes
    could not write into.

    ``ContextVar`` values (e.g. the worker override set by
    :func:`~logitkit.core.config.use_num_workers`, or NumPy's error state)
    are propagated to each worker thread via :func:`contextvars.copy_context`.

    Parameters
    ----------
    func : callable
        Function to call for each set of arguments.
    args_list : list of tuples
        Arguments for each call.
    n_jobs : int
        1 = sequential (default), -1 = all cores, >1 = that many workers.

    Returns
    -------
    list
        Results in the same order as args_list.
    """
    if n_jobs == 1 or len(args_list) <= 1:
        return [func(*args) for args in args_list]

    max_workers = os.cpu_count() if n_jobs == -1 else n_jobs
    results = [None] * len(args_list)

    # Each task gets its own snapshot so Context.run() is never called
    # concurrently on the same object (which would raise RuntimeError).
    contexts = [contextvars.copy_context() for _ in args_list]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_idx = {
            executor.submit(ctx.run, func, *args): i
            for i, (ctx, args) in enumerate(zip(contexts, args_list, strict=True))
        }
        for future in as_completed(future_to_idx):
            idx = future_to_idx[future]
            results[idx] = future.result()
    return results


def chunk_bounds(n, n_chunks):
    """Split ``range(n)`` into contiguous, disjoint ``(start, stop)`` chunks.

    Parameters
    ----------
    n : int
        Length of the index range.
    n_chunks : int
        Requested number of chunks. Capped at ``n`` so that no chunk is empty.

    Returns
    -------
    list of tuple of int
        Chunk boundaries in increasing order. Sizes differ by at most one,
        larger chunks first. A zero-length range yields a single empty chunk.
    """
    if n <= 0:
        return [(0, 0)]
    n_chunks = max(1, min(n_chunks, n))
    base, extra = divmod(n, n_chunks)

    bounds = []
    start = 0
    for i in range(n_chunks):
        stop = start + base + (1 if i < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


def run_chunked(kernel, dest, src, n_workers):
    """Apply ``kernel(dest, src, start, stop)`` over worker-sized chunks.

    Every chunk writes only ``dest[start:stop]`` and reads only
    ``src[start:stop]``. Returns once all chunks are done.

    Parameters
    ----------
    kernel : callable
        Chunk kernel with signature ``(dest, src, start, stop)``.
    dest : ndarray
        One-dimensional output buffer.
    src : ndarray
        One-dimensional input buffer of the same length.
    n_workers : int
        Number of worker threads, and therefore of chunks.

    Returns
    -------
    ndarray
        ``dest``.
    """
    bounds = chunk_bounds(len(src), n_workers)
    parallel_map(kernel, [(dest, src, start, stop) for start, stop in bounds], n_jobs=len(bounds))
    return dest
