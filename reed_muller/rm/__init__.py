"""RM(1, m) generator construction, encoder and FHT decoder."""

from .generator import build_generator_matrix
from .encoder import ReedMullerEncoder
from .decoder import ReedMullerDecoder

__all__ = [
    "build_generator_matrix",
    "ReedMullerEncoder",
    "ReedMullerDecoder",
]
