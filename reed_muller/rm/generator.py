"""Generator matrix of the first-order Reed–Muller code RM(1, m)."""

from __future__ import annotations

import functools

import numpy as np

from ..algebra import MatrixMod2
from ..errors import InvalidOrderError

_BASE = np.array([[1, 1], [0, 1]], dtype=np.int64)


@functools.lru_cache(maxsize=None)
def _generator_rows(m: int) -> np.ndarray:
    g = _BASE
    for _ in range(2, m + 1):
        cols = g.shape[1]
        bottom = np.concatenate([np.zeros(cols, dtype=np.int64), np.ones(cols, dtype=np.int64)])
        g = np.vstack([np.hstack([g, g]), bottom])
    g = g.copy()
    g.setflags(write=False)
    return g


def build_generator_matrix(m: int) -> MatrixMod2:
    """Return ``G(1, m)`` of shape (m + 1) × 2^m.

    ``G(1, 1) = [[1, 1], [0, 1]]``; for m > 1 the top block is
    ``[G(1, m-1) | G(1, m-1)]`` and the new bottom row is zeros over the left
    half and ones over the right half.
    """

    if m <= 0:
        raise InvalidOrderError("Parameter m must be a positive integer")
    return MatrixMod2(_generator_rows(m))


__all__ = ["build_generator_matrix"]
