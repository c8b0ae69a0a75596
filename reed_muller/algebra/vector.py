"""Dense integer vectors used by the codec and its transforms."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Union

import numpy as np

from ..errors import DimensionMismatchError

if TYPE_CHECKING:
    from .matrix import Matrix, MatrixMod2

_BYTE_BITS = 8


class Vector:
    """Fixed-length sequence of integers.

    Entries are logically bits in codec context, but any integer is allowed so
    that signed intermediates of the Hadamard transform fit in the same type.
    The vector owns its storage: the constructor always copies its input.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Union[Iterable[int], np.ndarray]) -> None:
        raw = np.asarray(list(values) if not isinstance(values, np.ndarray) else values)
        if raw.dtype.kind not in "biuf":
            raise ValueError("Vector values must be integers")
        if raw.dtype.kind == "f" and not np.all(np.mod(raw, 1) == 0):
            raise ValueError("Vector values must be integral")
        arr = np.array(raw, dtype=np.int64)
        if arr.ndim != 1:
            raise ValueError("Vector values must be one-dimensional")
        if arr.size == 0:
            raise ValueError("Vector must have at least one element")
        self._values = arr

    @classmethod
    def zeros(cls, size: int) -> "Vector":
        if size <= 0:
            raise ValueError("Vector size must be positive")
        return cls(np.zeros(size, dtype=np.int64))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Vector":
        # Takes ownership of `arr` without copying.
        vec = cls.__new__(cls)
        vec._values = arr
        return vec

    # ------------------------------
    # Container protocol
    # ------------------------------

    def __len__(self) -> int:
        return int(self._values.size)

    def __getitem__(self, index: int) -> int:
        return int(self._values[index])

    def __setitem__(self, index: int, value: int) -> None:
        self._values[index] = value

    def __iter__(self) -> Iterator[int]:
        return (int(x) for x in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values.size == other._values.size and bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "".join(str(int(x)) for x in self._values)

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()!r})"

    def copy(self) -> "Vector":
        return Vector._wrap(self._values.copy())

    def to_array(self) -> np.ndarray:
        """Return a copy of the entries as an int64 array."""

        return self._values.copy()

    # ------------------------------
    # Arithmetic
    # ------------------------------

    def add(self, other: "Vector") -> "Vector":
        """Element-wise sum of two vectors of equal length."""

        if len(self) != len(other):
            raise DimensionMismatchError("Vectors must be of the same length to add")
        return Vector._wrap(self._values + other._values)

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def scale(self, scalar: int) -> "Vector":
        return Vector._wrap(self._values * int(scalar))

    def multiply(self, matrix: Union["Matrix", "MatrixMod2"]) -> "Vector":
        """Row-vector product ``self × matrix``."""

        return matrix.premultiply(self)

    def to_row_matrix(self) -> "Matrix":
        from .matrix import Matrix

        return Matrix(self._values.reshape(1, -1))

    def to_column_matrix(self) -> "Matrix":
        from .matrix import Matrix

        return Matrix(self._values.reshape(-1, 1))

    # ------------------------------
    # Conversions
    # ------------------------------

    @classmethod
    def parse(cls, text: str) -> "Vector":
        """Parse a digit string such as ``"1011"`` into a vector."""

        if not text:
            raise ValueError("Cannot parse an empty string into a vector")
        values = []
        for ch in text:
            if ch not in "0123456789":
                raise ValueError(f"Invalid vector character: {ch!r}")
            values.append(int(ch))
        return cls(values)

    @classmethod
    def from_byte(cls, value: int) -> "Vector":
        """Return the 8-bit MSB-first binary representation of ``value``."""

        if not 0 <= value <= 0xFF:
            raise ValueError("Byte value must be in range 0..255")
        return cls([(value >> (_BYTE_BITS - 1 - i)) & 1 for i in range(_BYTE_BITS)])

    def to_byte(self) -> int:
        """Interpret the vector as an MSB-first unsigned integer of at most 8 bits."""

        if len(self) > _BYTE_BITS:
            raise ValueError("Only vectors of length <= 8 can be converted to a byte")
        value = 0
        for bit in self:
            if bit not in (0, 1):
                raise ValueError("Byte conversion requires binary entries")
            value = (value << 1) | bit
        return value


__all__ = ["Vector"]
