"""
cachematrix: memoized matrix inversion.

This package contains:
- linalg: the cached-inverse cell, the cache_solve entry point and its errors
- utils: configuration and logging helpers
"""

from .linalg import (
    CacheCell,
    EmptyMatrixError,
    InversionError,
    ShapeError,
    SingularityError,
    cache_solve,
    cached_inverse,
    invert_matrix,
    make_cache_cell,
)
from .utils import CacheConfig, SolverParameters, setup_logging

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
    "CacheConfig",
    "SolverParameters",
    "setup_logging",
]
