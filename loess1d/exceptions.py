"""Errors raised by the LOESS smoothing pipeline.

All errors derive from :class:`LoessError`, itself a ``ValueError``, so
callers that already guard argument validation with ``except ValueError``
keep working.
"""

from __future__ import annotations

__all__ = [
    "LoessError",
    "InvalidParameterError",
    "LengthMismatchError",
    "DegenerateWeightsError",
    "EmptyNeighborhoodError",
]


class LoessError(ValueError):
    """Base class for all smoothing errors."""


class InvalidParameterError(LoessError):
    """Bandwidth outside ``(0, 1]`` or an empty observation set."""


class LengthMismatchError(LoessError):
    """Two sequences that must be aligned by index have different lengths."""


class DegenerateWeightsError(LoessError):
    """The weights of a neighborhood sum to zero."""


class EmptyNeighborhoodError(LoessError):
    """The bandwidth window around a query point holds no observation."""
