"""
Default inversion primitive used by cache_solve.
"""

import logging

import numpy as np
import pandas as pd
import scipy.linalg

from .exceptions import EmptyMatrixError, ShapeError, SingularityError

logger = logging.getLogger(__name__)


def invert_matrix(matrix, *args, **kwargs):
    """
    Compute the inverse of a square matrix with scipy.linalg.inv.

    Args:
        matrix: A square array-like or pandas DataFrame
        *args: Extra positional arguments passed to scipy.linalg.inv
        **kwargs: Extra keyword arguments passed to scipy.linalg.inv
            (e.g. overwrite_a, check_finite)

    Returns:
        The inverse as a numpy array, or a DataFrame labelled with the
        input's columns as index and its index as columns

    Raises:
        ShapeError: If the matrix is not two-dimensional and square
        EmptyMatrixError: If the matrix is 0 x 0
        SingularityError: If the matrix is singular
    """
    try:
        values = np.asarray(matrix)
    except ValueError as e:
        # Ragged nested sequences have no array shape at all
        logger.error(f"Cannot invert matrix with inhomogeneous rows: {e}")
        raise ShapeError(f"expected a square matrix: {e}", shape=None) from e

    if values.ndim != 2 or values.shape[0] != values.shape[1]:
        logger.error(f"Cannot invert matrix of shape {values.shape}: not square")
        raise ShapeError(f"expected a square matrix, got shape {values.shape}", shape=values.shape)
    if values.size == 0:
        logger.error("Cannot invert an empty matrix")
        raise EmptyMatrixError("cannot invert an empty matrix; set a matrix first", shape=values.shape)

    try:
        inverse = scipy.linalg.inv(values, *args, **kwargs)
    except np.linalg.LinAlgError as e:
        logger.error(f"Matrix of shape {values.shape} is singular: {e}")
        raise SingularityError(f"matrix is singular: {e}", shape=values.shape) from e

    if isinstance(matrix, pd.DataFrame):
        return pd.DataFrame(inverse, index=matrix.columns, columns=matrix.index)
    return inverse
