"""Custom exception types used across :mod:`edgewise`."""

from __future__ import annotations


class EdgewiseError(Exception):
    """Base class for all package-specific errors."""


class InvalidEdge(EdgewiseError, ValueError):
    """Raised when an edge targets a vertex outside ``0 .. n-1``."""


class InvalidWeight(EdgewiseError, ValueError):
    """Raised for non-numeric, NaN or infinite edge weights."""


class NegativeWeight(InvalidWeight):
    """Raised when an edge carries a negative weight."""


class VertexOutOfRange(EdgewiseError, IndexError):
    """Raised when a query or algorithm source is not a vertex of the graph."""


class InvalidVertexCount(EdgewiseError, ValueError):
    """Raised for impossible vertex/edge counts in graph generation."""


class InvalidWeightRange(EdgewiseError, ValueError):
    """Raised when a random weight range is not ``0 <= lo <= hi``."""


class InvalidDensity(EdgewiseError, ValueError):
    """Raised when an edge probability lies outside ``[0, 1]``."""


class WeightOverflow(EdgewiseError, OverflowError):
    """Raised when an accumulated distance is no longer representable."""


__all__ = [
    "EdgewiseError",
    "InvalidEdge",
    "InvalidWeight",
    "NegativeWeight",
    "VertexOutOfRange",
    "InvalidVertexCount",
    "InvalidWeightRange",
    "InvalidDensity",
    "WeightOverflow",
]
