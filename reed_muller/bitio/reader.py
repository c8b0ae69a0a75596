"""Bit-level reader over a byte buffer."""

from __future__ import annotations

from typing import List

_BYTE_BITS = 8


class BitReader:
    """Read bits MSB-first across byte boundaries.

    Reading past the end never raises: the short list is returned and
    ``end_of_buffer`` is set, so callers must check the returned length.
    """

    def __init__(self, buffer: bytes) -> None:
        if buffer is None:
            raise TypeError("buffer must be a bytes-like object")
        self._buffer = bytes(buffer)
        self._byte_index = 0
        self._bit_index = 0  # 0 = MSB, 7 = LSB
        self.end_of_buffer = False

    @property
    def has_more_bits(self) -> bool:
        return self._byte_index < len(self._buffer)

    def read_bits(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError("count cannot be negative")

        bits: List[int] = []
        for _ in range(count):
            if self._byte_index >= len(self._buffer):
                self.end_of_buffer = True
                return bits

            current = self._buffer[self._byte_index]
            bits.append((current >> (_BYTE_BITS - 1 - self._bit_index)) & 1)

            self._bit_index += 1
            if self._bit_index == _BYTE_BITS:
                self._bit_index = 0
                self._byte_index += 1
        return bits


__all__ = ["BitReader"]
