"""Bit-level writer packing into bytes."""

from __future__ import annotations

from typing import Iterable

_BYTE_BITS = 8


class BitWriter:
    """Accumulate bits MSB-first and emit whole bytes."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._current = 0
        self._bit_position = 0  # 0..7

    @property
    def bit_position(self) -> int:
        """Number of bits held in the unflushed partial byte."""

        return self._bit_position

    def write_bit(self, bit: int) -> None:
        if bit != 0 and bit != 1:
            raise ValueError(f"Bit must be 0 or 1, got {bit!r}")

        self._current = (self._current << 1) | bit
        self._bit_position += 1
        if self._bit_position == _BYTE_BITS:
            self._buffer.append(self._current)
            self._current = 0
            self._bit_position = 0

    def write_bits(self, bits: Iterable[int]) -> None:
        for bit in bits:
            self.write_bit(bit)

    def to_array(self, padding_zeros: int = 0) -> bytes:
        """Return the written bytes.

        The partial trailing byte is flushed left-justified, zero-filled on the
        right, unless it holds no more than ``padding_zeros`` bits, in which
        case it consists only of padding and is dropped.
        """

        if padding_zeros < 0:
            raise ValueError("padding_zeros cannot be negative")

        out = bytearray(self._buffer)
        if self._bit_position - padding_zeros > 0:
            out.append((self._current << (_BYTE_BITS - self._bit_position)) & 0xFF)
        return bytes(out)


__all__ = ["BitWriter"]
