"""Exceptions raised by the codec."""

from __future__ import annotations


class DimensionMismatchError(ValueError):
    """Operand shapes or lengths do not agree."""


class InvalidOrderError(ValueError):
    """Order parameter m is outside the supported range."""


__all__ = ["DimensionMismatchError", "InvalidOrderError"]
