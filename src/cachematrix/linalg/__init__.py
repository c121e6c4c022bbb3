"""
Matrix inversion with a per-matrix cached inverse.

This module provides:
- CacheCell: a matrix holder that remembers its inverse until the matrix changes
- cache_solve: returns the cached inverse or computes and stores it
- invert_matrix: the default scipy-backed inversion primitive
"""

from .cache_cell import CacheCell, make_cache_cell
from .cache_solve import cache_solve, cached_inverse
from .exceptions import EmptyMatrixError, InversionError, ShapeError, SingularityError
from .inverse import invert_matrix

__all__ = [
    "CacheCell",
    "make_cache_cell",
    "cache_solve",
    "cached_inverse",
    "invert_matrix",
    "InversionError",
    "ShapeError",
    "EmptyMatrixError",
    "SingularityError",
]
