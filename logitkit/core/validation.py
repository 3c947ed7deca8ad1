"""Preconditions for the in-place transforms."""

import numpy as np

__all__ = ["ContractViolation", "check_same_length", "detach_overlap"]


class ContractViolation(ValueError):
    """Raised when an in-place call gets a destination of the wrong length."""


def _length(seq):
    if isinstance(seq, np.ndarray):
        return seq.size
    return len(seq)


def check_same_length(dest, src):
    """Raise :class:`ContractViolation` unless both buffers hold as many elements."""
    n_dest, n_src = _length(dest), _length(src)
    if n_dest != n_src:
        raise ContractViolation(
            f"Destination length {n_dest} does not match source length {n_src}. "
            "In-place transforms need equally sized buffers."
        )


def detach_overlap(dest, src):
    """Return ``src``, copied if it partially overlaps ``dest``.

    Exact aliasing (same start, same strides) is safe for an elementwise map
    and is left alone. Any other overlap would let an earlier write clobber a
    later read.
    """
    if dest is src or not np.may_share_memory(dest, src):
        return src
    same_view = (
        dest.__array_interface__["data"][0] == src.__array_interface__["data"][0]
        and dest.strides == src.strides
        and dest.itemsize == src.itemsize
    )
    if same_view:
        return src
    return src.copy()
