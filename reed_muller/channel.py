"""Binary symmetric channel used to exercise the codec."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .algebra import Vector


class BinarySymmetricChannel:
    """Flip every transmitted bit independently with probability ``p``."""

    def __init__(self, error_probability: float, rng: Optional[np.random.Generator] = None) -> None:
        if not 0.0 <= error_probability <= 1.0:
            raise ValueError("Error probability must be between 0 and 1")
        self.error_probability = float(error_probability)
        self._rng = rng if rng is not None else np.random.default_rng()

    def _flips(self, size: int) -> np.ndarray:
        return (self._rng.random(size) < self.error_probability).astype(np.int64)

    def pass_through(self, vector: Vector) -> Vector:
        bits = vector.to_array()
        return Vector(bits ^ self._flips(bits.size))

    def pass_through_bytes(self, data: bytes) -> bytes:
        if not data:
            return b""
        bits = np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8))
        flipped = bits ^ self._flips(bits.size).astype(np.uint8)
        return np.packbits(flipped).tobytes()

    def pass_through_frames(self, frames: Sequence[Vector], protect_metadata: bool = False) -> List[Vector]:
        """Transmit a framed sequence; optionally keep the two header vectors intact."""

        out: List[Vector] = []
        for idx, frame in enumerate(frames):
            if protect_metadata and idx < 2:
                out.append(frame.copy())
            else:
                out.append(self.pass_through(frame))
        return out


__all__ = ["BinarySymmetricChannel"]
