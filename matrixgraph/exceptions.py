"""Custom exception types used across :mod:`matrixgraph`."""

from __future__ import annotations


class MatrixGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(MatrixGraphError, ValueError):
    """Raised for invalid user input such as a malformed root index."""


class InvalidMatrix(InputError):
    """Raised when an adjacency matrix is not square, numeric and zero-diagonal."""


class InvalidEdge(InputError):
    """Raised for a non-numeric weight or a self-loop request."""


class DuplicateVertex(MatrixGraphError, LookupError):
    """Raised when a vertex name already has an index."""


class UnknownVertex(MatrixGraphError, LookupError):
    """Raised when a vertex name has no index."""


class ConfigError(MatrixGraphError, ValueError):
    """Raised for invalid configuration options."""


__all__ = [
    "MatrixGraphError",
    "InputError",
    "InvalidMatrix",
    "InvalidEdge",
    "DuplicateVertex",
    "UnknownVertex",
    "ConfigError",
]
