import numpy as np
import pandas as pd
import pytest

from cachematrix.linalg.exceptions import (
    EmptyMatrixError,
    InversionError,
    ShapeError,
    SingularityError,
)
from cachematrix.linalg.inverse import invert_matrix


def test_invert_nested_list():
    inverse = invert_matrix([[4, 7], [2, 6]])
    assert isinstance(inverse, np.ndarray)
    np.testing.assert_allclose(inverse, [[0.6, -0.7], [-0.2, 0.4]])


def test_invert_random_well_conditioned():
    rng = np.random.default_rng(42)
    a = rng.random((50, 50)) + np.eye(50) * 50.0
    np.testing.assert_allclose(a @ invert_matrix(a), np.eye(50), atol=1e-10)


def test_dataframe_labels_are_swapped():
    frame = pd.DataFrame([[89, 56], [43, 2]], index=["r1", "r2"], columns=["c1", "c2"])
    inverse = invert_matrix(frame)

    assert isinstance(inverse, pd.DataFrame)
    assert list(inverse.index) == ["c1", "c2"]
    assert list(inverse.columns) == ["r1", "r2"]
    np.testing.assert_allclose(frame.to_numpy() @ inverse.to_numpy(), np.eye(2), atol=1e-12)


@pytest.mark.parametrize("matrix", [
    [[1, 2, 3], [4, 5, 6]],
    [1, 2, 3],
    np.zeros((2, 2, 2)),
])
def test_non_square_raises_shape_error(matrix):
    with pytest.raises(ShapeError) as excinfo:
        invert_matrix(matrix)
    assert excinfo.value.shape == np.shape(matrix)


def test_ragged_rows_raise_shape_error():
    with pytest.raises(ShapeError):
        invert_matrix([[1.0, 2.0], [3.0]])


def test_empty_matrix_raises():
    with pytest.raises(EmptyMatrixError) as excinfo:
        invert_matrix(np.empty((0, 0)))
    assert excinfo.value.shape == (0, 0)


def test_singular_raises_singularity_error():
    with pytest.raises(SingularityError) as excinfo:
        invert_matrix([[1, 2], [2, 4]])
    assert excinfo.value.shape == (2, 2)
    assert isinstance(excinfo.value.__cause__, np.linalg.LinAlgError)


def test_errors_keep_builtin_bases():
    assert issubclass(ShapeError, ValueError)
    assert issubclass(EmptyMatrixError, ShapeError)
    assert issubclass(SingularityError, np.linalg.LinAlgError)
    assert issubclass(SingularityError, InversionError)


def test_non_finite_input_raises_value_error():
    with pytest.raises(ValueError) as excinfo:
        invert_matrix([[np.nan, 1.0], [1.0, 2.0]])
    assert not isinstance(excinfo.value, InversionError)
