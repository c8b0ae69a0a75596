"""First-order Reed–Muller RM(1, m) codec with fast Hadamard decoding."""

from .rm import ReedMullerDecoder, ReedMullerEncoder, build_generator_matrix
from .channel import BinarySymmetricChannel

__all__ = [
    "ReedMullerEncoder",
    "ReedMullerDecoder",
    "build_generator_matrix",
    "BinarySymmetricChannel",
]
