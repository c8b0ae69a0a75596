"""Maximum-correlation RM(1, m) decoder via the fast Hadamard transform.

The 2^m × 2^m Hadamard transform is factored into m Kronecker products

    K_i = I(2^(m-i)) ⊗ H ⊗ I(2^(i-1)),    H = [[1, 1], [1, -1]],

each with exactly two non-zeros per row, so applying all of them costs
O(m · 2^m) instead of the O(4^m) of a dense multiplication.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

import numpy as np
import scipy.sparse as sp

from ..algebra import Matrix, Vector
from ..bitio import BitWriter
from ..errors import DimensionMismatchError, InvalidOrderError

logger = logging.getLogger(__name__)

_HADAMARD = np.array([[1, 1], [1, -1]], dtype=np.int64)
_METADATA_BITS = 8


def _kronecker_factors(m: int) -> List[sp.csr_matrix]:
    factors = []
    for i in range(1, m + 1):
        left = sp.identity(1 << (m - i), dtype=np.int64, format="csr")
        right = sp.identity(1 << (i - 1), dtype=np.int64, format="csr")
        factor = sp.kron(sp.kron(left, _HADAMARD, format="csr"), right, format="csr")
        factors.append(factor)
    return factors


class ReedMullerDecoder:
    """Decode RM(1, m) codewords.

    The order may be left unset at construction; :meth:`decode_frames` then
    configures it from the frame header. Rebuilding the factor set is not
    thread-safe, so a decoder must not be shared across concurrent callers.
    """

    def __init__(self, m: Optional[int] = None) -> None:
        self._m: Optional[int] = None
        self._factors: List[sp.csr_matrix] = []
        self._row_operators: List[sp.csr_matrix] = []
        if m is not None:
            self._configure(m)

    @property
    def m(self) -> Optional[int]:
        return self._m

    @property
    def kronecker_matrices(self) -> List[Matrix]:
        """The factors K_1..K_m as dense integer matrices."""

        return [Matrix(factor.toarray()) for factor in self._factors]

    def _configure(self, m: int) -> None:
        if m < 1:
            raise InvalidOrderError("Parameter m must be a positive integer")
        logger.debug("Building %d Kronecker factors of size %d", m, 1 << m)
        self._factors = _kronecker_factors(m)
        # v · K is computed as K^T · v
        self._row_operators = [factor.T.tocsr() for factor in self._factors]
        self._m = m

    def decode(self, codeword: Union[Vector, Sequence[int]]) -> Vector:
        """Return the (m + 1)-bit message closest to ``codeword``.

        Beyond the correction radius the result is a best guess; no error is
        signalled.
        """

        if self._m is None:
            raise InvalidOrderError("Decoder order is not configured")
        if not isinstance(codeword, Vector):
            codeword = Vector(codeword)
        m = self._m
        if len(codeword) != 1 << m:
            raise DimensionMismatchError(f"Codeword must have length {1 << m}, got {len(codeword)}")

        # bipolar mapping on a private copy: 0 -> -1, 1 -> +1
        spectrum = codeword.to_array()
        spectrum[spectrum == 0] = -1

        for factor in self._row_operators:
            spectrum = factor @ spectrum

        # argmax returns the first index among equal maxima
        peak = int(np.argmax(np.abs(spectrum)))
        constant = 1 if spectrum[peak] > 0 else 0
        return Vector([constant] + [(peak >> i) & 1 for i in range(m)])

    def decode_frames(self, frames: Sequence[Vector]) -> bytes:
        """Decode a framed sequence ``[m, padding, codeword_1, ...]`` to bytes."""

        if len(frames) < 2:
            raise ValueError("Framed message must contain the two metadata vectors")
        for header in frames[:2]:
            if len(header) != _METADATA_BITS:
                raise DimensionMismatchError("Metadata vectors must be exactly 8 bits wide")

        m = frames[0].to_byte()
        padding = frames[1].to_byte()
        codewords = frames[2:]
        if m == 0:
            raise InvalidOrderError("Frame header carries m = 0")
        if padding > m + 1:
            raise ValueError(f"Padding count {padding} exceeds message length {m + 1}")
        if padding and not codewords:
            raise ValueError("Padding declared for a message without codewords")
        for codeword in codewords:
            if len(codeword) != 1 << m:
                raise DimensionMismatchError(
                    f"Codeword length {len(codeword)} does not match m = {m}"
                )

        if not codewords:
            return b""

        if m != self._m:
            self._configure(m)

        bits: List[int] = []
        for codeword in codewords:
            bits.extend(self.decode(codeword))

        # Whole padding bytes never reach the writer; the partial one is
        # suppressed by the flush threshold.
        whole = (padding // 8) * 8
        if whole:
            del bits[len(bits) - whole:]

        writer = BitWriter()
        writer.write_bits(bits)
        return writer.to_array(padding % 8)


__all__ = ["ReedMullerDecoder"]
