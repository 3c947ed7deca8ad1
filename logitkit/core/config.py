"""Worker-count configuration for the threaded kernels."""

from __future__ import annotations

import contextlib
import os
import warnings
from contextvars import ContextVar

__all__ = [
    "ENV_NUM_THREADS",
    "get_num_workers",
    "resolve_num_workers",
    "set_num_workers",
    "use_num_workers",
]

ENV_NUM_THREADS = "LOGITKIT_NUM_THREADS"

_active_workers: ContextVar[int | None] = ContextVar("logitkit_num_workers", default=None)
_process_workers: int | None = None


def _cpu_count():
    return os.cpu_count() or 1


def _validate_worker_count(n):
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Worker count must be an integer, got {n!r}.")
    if n == -1:
        return _cpu_count()
    if n < 1:
        raise ValueError(f"Worker count must be a positive integer or -1 (all cores), got {n}.")
    return n


def _env_num_workers():
    raw = os.environ.get(ENV_NUM_THREADS)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        warnings.warn(
            f"Ignoring invalid {ENV_NUM_THREADS}={raw!r}; expected a positive integer. "
            f"Using {_cpu_count()} workers.",
            UserWarning,
            stacklevel=3,
        )
        return None
    return value


def set_num_workers(n):
    """Set the process-wide default worker count.

    Parameters
    ----------
    n : int or None
        Number of worker threads, ``-1`` for all cores, or ``None`` to fall back
        to the ``LOGITKIT_NUM_THREADS`` environment variable and then to the
        number of available cores.
    """
    global _process_workers
    _process_workers = None if n is None else _validate_worker_count(n)


def get_num_workers():
    """Return the worker count used when ``n_jobs`` is not given.

    Lookup order is the context-local override from :func:`use_num_workers`,
    the process default from :func:`set_num_workers`, the
    ``LOGITKIT_NUM_THREADS`` environment variable and finally
    :func:`os.cpu_count`.

    Returns
    -------
    int
        Number of worker threads, at least 1.
    """
    active = _active_workers.get()
    if active is not None:
        return active
    if _process_workers is not None:
        return _process_workers
    env = _env_num_workers()
    if env is not None:
        return env
    return _cpu_count()


@contextlib.contextmanager
def use_num_workers(n):
    """Context manager that temporarily overrides the worker count.

    The previous value is restored when the block exits, even on error.
    Because the override lives in a ``ContextVar`` it is inherited by the
    snapshots taken in :func:`~logitkit.core.parallel.parallel_map`.

    Parameters
    ----------
    n : int
        Number of worker threads or ``-1`` for all cores.
    """
    token = _active_workers.set(_validate_worker_count(n))
    try:
        yield
    finally:
        _active_workers.reset(token)


def resolve_num_workers(n_jobs=None):
    """Turn an ``n_jobs`` argument into a concrete worker count.

    Parameters
    ----------
    n_jobs : int or None
        ``None`` uses :func:`get_num_workers`, ``-1`` uses all cores and any
        positive integer is taken as is.

    Returns
    -------
    int
        Number of worker threads, at least 1.
    """
    if n_jobs is None:
        return get_num_workers()
    return _validate_worker_count(n_jobs)
