"""Validation and coercion of adjacency matrices."""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np
import numpy.typing as npt

from .exceptions import InvalidMatrix

Matrix = npt.NDArray[np.float64]


def is_weight(value: Any) -> bool:
    """Return ``True`` if ``value`` is a finite real number (booleans excluded)."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def validate(matrix: Any) -> bool:
    """Check that ``matrix`` is a valid adjacency matrix.

    A valid matrix is a sequence of rows (lists or tuples) or a 2-D NumPy
    array where every row is as long as the matrix, every cell is a finite
    number and every diagonal cell is zero. The empty matrix is valid.

    Args:
        matrix: Candidate matrix.

    Returns:
        ``True`` when all conditions hold, ``False`` otherwise.

    Examples:
        ```python
        >>> validate([[0, 1], [1, 0]])
        True
        >>> validate([[0, 1], [1, 1]])
        False
        ```
    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            return False
        if matrix.dtype == np.bool_ or not np.issubdtype(matrix.dtype, np.number):
            return False
        if np.issubdtype(matrix.dtype, np.complexfloating):
            return False
        return bool(np.all(np.isfinite(matrix)) and np.all(np.diagonal(matrix) == 0))

    if not isinstance(matrix, (list, tuple)):
        return False
    n = len(matrix)
    for i, row in enumerate(matrix):
        if not isinstance(row, (list, tuple)) or len(row) != n:
            return False
        if not all(is_weight(cell) for cell in row):
            return False
        if row[i] != 0:
            return False
    return True


def as_square_array(matrix: Any) -> Matrix:
    """Return a private ``float64`` copy of a non-empty square matrix.

    Unlike :func:`validate` this accepts non-zero diagonals and ``+inf``
    cells; it only rejects what the shortest-path routine cannot read.

    Raises:
        InvalidMatrix: If ``matrix`` is ragged, empty, not square or holds
            non-numeric or NaN cells.
    """
    try:
        raw = np.asarray(matrix)
    except (TypeError, ValueError) as exc:
        raise InvalidMatrix(f"matrix is not a 2-D array: {exc}") from exc
    if raw.dtype.kind not in "iuf":
        raise InvalidMatrix(f"matrix cells must be numbers, got dtype {raw.dtype}")
    arr = np.array(raw, dtype=np.float64, copy=True)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise InvalidMatrix(f"matrix must be square, got shape {arr.shape}")
    if arr.shape[0] == 0:
        raise InvalidMatrix("matrix must have at least one vertex")
    if np.isnan(arr).any():
        raise InvalidMatrix("matrix contains NaN cells")
    return arr


__all__ = ["Matrix", "as_square_array", "is_weight", "validate"]
