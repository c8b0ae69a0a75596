"""RM(1, m) encoder for single messages and framed byte streams."""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from ..algebra import MatrixMod2, Vector
from ..bitio import BitReader
from ..errors import DimensionMismatchError, InvalidOrderError
from .generator import build_generator_matrix

logger = logging.getLogger(__name__)

# m travels in an 8-bit header vector
MAX_ORDER = 0xFF


class ReedMullerEncoder:
    def __init__(self, m: int) -> None:
        if m < 2:
            raise InvalidOrderError("Parameter m must be at least 2")
        if m > MAX_ORDER:
            raise InvalidOrderError(f"Parameter m must not exceed {MAX_ORDER}")
        self.m = m
        self.required_message_length = m + 1
        self.codeword_length = 1 << m
        self._generator = build_generator_matrix(m)

    @property
    def generator_matrix(self) -> MatrixMod2:
        return MatrixMod2(self._generator)

    def encode(self, message: Union[Vector, Sequence[int]]) -> Vector:
        """Return the codeword ``message × G(1, m)`` over GF(2)."""

        if not isinstance(message, Vector):
            message = Vector(message)
        if len(message) != self.required_message_length:
            raise DimensionMismatchError(
                f"Message must have length {self.required_message_length}, got {len(message)}"
            )
        return message.multiply(self._generator)

    def encode_bytes(self, data: bytes) -> List[Vector]:
        """Chunk, pad and encode ``data`` into a framed codeword sequence.

        Frame layout: ``[m, padding, codeword_1, ...]`` where the first two
        entries are 8-bit vectors and ``padding`` counts the zero bits appended
        to the final chunk.
        """

        reader = BitReader(data)
        frames: List[Vector] = [Vector.from_byte(self.m), Vector.from_byte(0)]
        padding = 0

        while not reader.end_of_buffer:
            bits = reader.read_bits(self.required_message_length)
            if not bits:
                break
            if len(bits) < self.required_message_length:
                padding = self.required_message_length - len(bits)
                bits.extend([0] * padding)
            frames.append(self.encode(Vector(bits)))

        frames[1] = Vector.from_byte(padding)
        logger.debug(
            "Encoded %d bytes into %d codewords (m=%d, padding=%d)",
            len(data),
            len(frames) - 2,
            self.m,
            padding,
        )
        return frames


__all__ = ["ReedMullerEncoder", "MAX_ORDER"]
