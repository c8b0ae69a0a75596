"""Integer and GF(2) linear algebra: vectors, matrices, Kronecker products."""

from .vector import Vector
from .matrix import Matrix, MatrixMod2, kronecker_product, identity_matrix

__all__ = [
    "Vector",
    "Matrix",
    "MatrixMod2",
    "kronecker_product",
    "identity_matrix",
]
