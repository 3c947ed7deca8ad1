"""Compiled and vectorized kernels for the logistic and logit functions.

Every chunk kernel has the signature ``(dest, src, start, stop)`` and writes
``dest[i] = f(src[i])`` for ``start <= i < stop``. The compiled kernels use
``error_model="numpy"`` so that division by zero and overflow follow IEEE-754
instead of raising, and ``nogil=True`` so that chunks run concurrently.
"""

import numba as nb
import numpy as np
from scipy import special

__all__ = [
    "CHUNK_KERNELS",
    "logistic",
    "logit",
]


@nb.njit(cache=True, nogil=True, error_model="numpy")
def logistic(x):
    """Logistic function :math:`1 / (1 + e^{-x})`.

    Saturates to ``1.0`` for large positive and ``0.0`` for large negative
    ``x``; NaN propagates.

    Parameters
    ----------
    x : float
        Log-odds value.

    Returns
    -------
    float
        Probability in :math:`[0, 1]`.
    """
    return 1.0 / (1.0 + np.exp(-x))


@nb.njit(cache=True, nogil=True, error_model="numpy")
def logit(p):
    """Logit function :math:`\\log(p / (1 - p))`.

    No domain check: ``logit(0) == -inf``, ``logit(1) == inf`` and values
    outside :math:`[0, 1]` give NaN.

    Parameters
    ----------
    p : float
        Probability value.

    Returns
    -------
    float
        Log-odds value.
    """
    return np.log(p / (1.0 - p))


@nb.njit(cache=True, nogil=True, error_model="numpy")
def _logistic_loop(dest, src, start, stop):
    for i in range(start, stop):
        dest[i] = logistic(src[i])


@nb.njit(cache=True, nogil=True, error_model="numpy")
def _logit_loop(dest, src, start, stop):
    for i in range(start, stop):
        dest[i] = logit(src[i])


def _logistic_numpy(dest, src, start, stop):
    out = dest[start:stop]
    with np.errstate(all="ignore"):
        np.negative(src[start:stop], out=out)
        np.exp(out, out=out)
        np.add(out, 1.0, out=out)
        np.divide(1.0, out, out=out)


def _logit_numpy(dest, src, start, stop):
    out = dest[start:stop]
    p = src[start:stop]
    with np.errstate(all="ignore"):
        # dest may be src, so 1 - p needs its own buffer
        denom = np.subtract(1.0, p)
        np.divide(p, denom, out=out)
        np.log(out, out=out)


def _logistic_scipy(dest, src, start, stop):
    special.expit(src[start:stop], out=dest[start:stop])


def _logit_scipy(dest, src, start, stop):
    special.logit(src[start:stop], out=dest[start:stop])


CHUNK_KERNELS = {
    "logistic": {
        "loop": _logistic_loop,
        "numpy": _logistic_numpy,
        "scipy": _logistic_scipy,
    },
    "logit": {
        "loop": _logit_loop,
        "numpy": _logit_numpy,
        "scipy": _logit_scipy,
    },
}
