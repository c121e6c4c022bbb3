"""
Errors raised by the inversion primitive.
"""

from typing import Optional, Tuple

import numpy as np


class InversionError(Exception):
    """Base class for matrix inversion failures."""

    def __init__(self, message: str, shape: Optional[Tuple[int, ...]] = None):
        super().__init__(message)
        self.shape = shape


class ShapeError(InversionError, ValueError):
    """The matrix is not two-dimensional and square."""


class EmptyMatrixError(ShapeError):
    """The matrix has no elements, e.g. a cell that was never given one."""


class SingularityError(InversionError, np.linalg.LinAlgError):
    """The matrix is square but has no inverse."""
