"""
The matrix holder behind cache_solve.

A CacheCell keeps one matrix and, once computed, its inverse. The inverse
is dropped whenever the matrix is replaced.
"""

import logging
from typing import Any, Optional

import numpy as np

logger = logging.getLogger(__name__)


class CacheCell:
    """
    Holds a matrix together with a cached copy of its inverse.

    Replacing the matrix through set_matrix() always discards the cached
    inverse. The cell stores whatever it is given: shape checks happen only
    when the inverse is computed.
    """

    def __init__(self, matrix: Any = None):
        """
        Args:
            matrix: Initial matrix. None creates an empty (0 x 0) cell
        """
        self._matrix = _empty_matrix() if matrix is None else matrix
        self._inverse: Optional[Any] = None

    def set_matrix(self, new_matrix: Any) -> None:
        """Replace the matrix and invalidate the cached inverse"""
        self._matrix = new_matrix
        self._inverse = None
        logger.debug("Matrix replaced, cached inverse cleared")

    def get_matrix(self) -> Any:
        """Return the stored matrix (not a copy)"""
        return self._matrix

    def set_cached_inverse(self, new_inverse: Any) -> None:
        """
        Overwrite the cached inverse.

        No check is made that new_inverse belongs to the current matrix;
        only cache_solve() should call this, right after computing it.
        """
        self._inverse = new_inverse

    def get_cached_inverse(self) -> Optional[Any]:
        """Return the cached inverse, or None if there is none"""
        return self._inverse

    @property
    def is_empty(self) -> bool:
        return np.size(self._matrix) == 0

    @property
    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        return f"CacheCell(shape={np.shape(self._matrix)}, cached={self.has_cached_inverse})"


def _empty_matrix() -> np.ndarray:
    return np.empty((0, 0), dtype=float)


def make_cache_cell(initial: Any = None) -> CacheCell:
    """Create a CacheCell holding ``initial``, or an empty matrix if omitted."""
    return CacheCell(initial)
