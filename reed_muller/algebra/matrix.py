"""Dense integer matrices and their mod-2 counterpart."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from ..errors import DimensionMismatchError
from .vector import Vector

# ------------------------------
# Helper functions
# ------------------------------

def _as_grid(values: Union[Sequence[Sequence[int]], np.ndarray]) -> np.ndarray:
    grid = np.array(values, dtype=np.int64)
    if grid.ndim != 2:
        raise ValueError("Matrix values must be two-dimensional")
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        raise ValueError("Matrix must have at least one row and one column")
    return grid


def _check_inner(left_cols: int, right_rows: int, what: str) -> None:
    if left_cols != right_rows:
        raise DimensionMismatchError(f"{what}: inner dimensions {left_cols} and {right_rows} differ")


class Matrix:
    """Dense 2-D integer grid with fixed dimensions."""

    __slots__ = ("_values",)

    def __init__(self, values: Union[Sequence[Sequence[int]], np.ndarray]) -> None:
        self._values = _as_grid(values)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        if rows <= 0 or columns <= 0:
            raise ValueError("Matrix must have at least one row and one column")
        return cls(np.zeros((rows, columns), dtype=np.int64))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        if n <= 0:
            raise ValueError("Identity size must be positive")
        return cls(np.eye(n, dtype=np.int64))

    @property
    def rows(self) -> int:
        return int(self._values.shape[0])

    @property
    def columns(self) -> int:
        return int(self._values.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def __getitem__(self, index: Tuple[int, int]) -> int:
        return int(self._values[index])

    def __setitem__(self, index: Tuple[int, int], value: int) -> None:
        self._values[index] = value

    def __iter__(self) -> Iterator[int]:
        return (int(x) for x in self._values.ravel())

    def __eq__(self, other: object) -> bool:
        if type(other) is not Matrix:
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash((self.shape, self._values.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix({self._values.tolist()!r})"

    def get_row(self, index: int) -> Vector:
        if not 0 <= index < self.rows:
            raise IndexError("Row index is out of range")
        return Vector(self._values[index])

    def get_column(self, index: int) -> Vector:
        if not 0 <= index < self.columns:
            raise IndexError("Column index is out of range")
        return Vector(self._values[:, index])

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def to_mod2(self) -> "MatrixMod2":
        return MatrixMod2(self._values)

    # ------------------------------
    # Products
    # ------------------------------

    def multiply(self, other: Union["Matrix", Vector]) -> Union["Matrix", Vector]:
        """Return ``self × other`` for a matrix or a column vector."""

        if isinstance(other, Vector):
            _check_inner(self.columns, len(other), "Matrix × Vector")
            return Vector(self._values @ other.to_array())
        if not isinstance(other, Matrix):
            raise TypeError("Matrix can only be multiplied by a Matrix or a Vector")
        _check_inner(self.columns, other.rows, "Matrix × Matrix")
        return Matrix(self._values @ other._values)

    def premultiply(self, vector: Vector) -> Vector:
        """Return the row-vector product ``vector × self``."""

        _check_inner(len(vector), self.rows, "Vector × Matrix")
        return Vector(vector.to_array() @ self._values)

    def kronecker_product(self, other: "Matrix") -> "Matrix":
        """Block matrix whose block (r, c) is ``self[r, c] * other``."""

        return Matrix(np.kron(self._values, other._values))


class MatrixMod2:
    """Matrix over GF(2).

    Wraps a plain :class:`Matrix` and keeps every entry reduced modulo 2: on
    construction, on indexed assignment, and in every product it returns.
    """

    __slots__ = ("_matrix",)

    def __init__(self, values: Union[Sequence[Sequence[int]], np.ndarray, Matrix, "MatrixMod2"]) -> None:
        grid = values.to_array() if isinstance(values, (Matrix, MatrixMod2)) else _as_grid(values)
        self._matrix = Matrix(np.mod(grid, 2))

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "MatrixMod2":
        return cls(Matrix.zeros(rows, columns))

    @property
    def rows(self) -> int:
        return self._matrix.rows

    @property
    def columns(self) -> int:
        return self._matrix.columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._matrix.shape

    def __getitem__(self, index: Tuple[int, int]) -> int:
        return self._matrix[index]

    def __setitem__(self, index: Tuple[int, int], value: int) -> None:
        self._matrix[index] = value % 2

    def __iter__(self) -> Iterator[int]:
        return iter(self._matrix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixMod2):
            return NotImplemented
        return self._matrix == other._matrix

    def __hash__(self) -> int:
        return hash(("mod2", hash(self._matrix)))

    def __repr__(self) -> str:
        return f"MatrixMod2({self._matrix.to_array().tolist()!r})"

    def get_row(self, index: int) -> Vector:
        return self._matrix.get_row(index)

    def get_column(self, index: int) -> Vector:
        return self._matrix.get_column(index)

    def to_array(self) -> np.ndarray:
        return self._matrix.to_array()

    def to_matrix(self) -> Matrix:
        return Matrix(self._matrix.to_array())

    def multiply(self, other: Union["MatrixMod2", Matrix, Vector]) -> Union["MatrixMod2", Vector]:
        """Return ``self × other`` with operands and result reduced mod 2."""

        if isinstance(other, Vector):
            _check_inner(self.columns, len(other), "Matrix × Vector")
            return Vector(np.mod(self._matrix.to_array() @ np.mod(other.to_array(), 2), 2))
        if isinstance(other, Matrix):
            other = other.to_mod2()
        if not isinstance(other, MatrixMod2):
            raise TypeError("MatrixMod2 can only be multiplied by a matrix or a Vector")
        _check_inner(self.columns, other.rows, "Matrix × Matrix")
        return MatrixMod2(self._matrix.to_array() @ other._matrix.to_array())

    def premultiply(self, vector: Vector) -> Vector:
        _check_inner(len(vector), self.rows, "Vector × Matrix")
        return Vector(np.mod(np.mod(vector.to_array(), 2) @ self._matrix.to_array(), 2))

    def kronecker_product(self, other: "MatrixMod2") -> "MatrixMod2":
        return MatrixMod2(np.kron(self._matrix.to_array(), other.to_array()))


def kronecker_product(a: Matrix, b: Matrix) -> Matrix:
    return a.kronecker_product(b)


def identity_matrix(n: int) -> Matrix:
    return Matrix.identity(n)


__all__ = ["Matrix", "MatrixMod2", "kronecker_product", "identity_matrix"]
