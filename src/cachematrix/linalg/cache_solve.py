"""
Cached matrix inversion.

cache_solve() returns the inverse held by a CacheCell when there is one and
otherwise computes it, stores it in the cell and returns it.
"""

import logging
import time
from typing import Any, Callable, Optional

from ..utils.config import SolverParameters
from .cache_cell import CacheCell
from .inverse import invert_matrix

logger = logging.getLogger(__name__)


def cache_solve(cell: CacheCell, *args, solver: Callable = invert_matrix,
                parameters: Optional[SolverParameters] = None, **kwargs) -> Any:
    """
    Return the inverse of the matrix stored in ``cell``, computing it at most once.

    Args:
        cell: The CacheCell holding the matrix
        *args: Extra positional arguments passed to ``solver`` unchanged
        solver: Inversion primitive. Defaults to invert_matrix
        parameters: Cache behavior. Defaults to SolverParameters.from_env()
        **kwargs: Extra keyword arguments passed to ``solver`` unchanged

    Returns:
        The inverse of the cell's matrix

    Raises:
        Whatever ``solver`` raises; with the default solver ShapeError or
        SingularityError. The cell's cached inverse is left untouched.
    """
    parameters = parameters or SolverParameters.from_env()

    if parameters.cache_enabled:
        inverse = cell.get_cached_inverse()
        if inverse is not None:
            level = logging.INFO if parameters.log_cache_hits else logging.DEBUG
            logger.log(level, "Getting cached inverse")
            return inverse

    matrix = cell.get_matrix()

    start = time.perf_counter()
    inverse = solver(matrix, *args, **kwargs)
    logger.debug(f"Computed inverse in {time.perf_counter() - start:.4f}s")

    if parameters.cache_enabled:
        cell.set_cached_inverse(inverse)
    return inverse


cached_inverse = cache_solve
