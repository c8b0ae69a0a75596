"""MSB-first bit packing over byte buffers."""

from .reader import BitReader
from .writer import BitWriter

__all__ = ["BitReader", "BitWriter"]
