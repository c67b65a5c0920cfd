"""
Shared input handling for model-level computations.

Normalizes responses, pairwise matrices and unary values to the array forms
the reductions in centering.py and objectives.py work on.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import sparse

from autologistic.core.exceptions import DimensionMismatch
from autologistic.core.validation import (
    check_2d,
    check_array,
    check_bool_array,
    check_square,
)


def as_response_matrix(responses: ArrayLike) -> NDArray[np.bool_]:
    """Boolean responses as an (n, m) array; 1-D input is one replicate."""
    Y = check_bool_array(responses, 'responses')
    if Y.ndim == 1:
        Y = Y.reshape(-1, 1)
    check_2d(Y, 'responses')
    return Y


def as_pairwise(pairwise: Any, n: int) -> Any:
    """
    Validate an association matrix.

    Sparse matrices are kept sparse (converted to CSR); anything else is
    converted to a dense float64 array.

    Raises:
        DimensionMismatch: If the matrix is not (n, n)
    """
    if sparse.issparse(pairwise):
        check_square(pairwise, n, 'pairwise')
        return pairwise.tocsr()
    dense = check_array(pairwise, 'pairwise')
    check_square(dense, n, 'pairwise')
    return dense


def matvec(pairwise: Any, v: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """Λ @ v as a flat float64 vector, for dense or sparse Λ."""
    return np.asarray(pairwise @ v, dtype=np.float64).ravel()


def unary_values(unary: Any) -> NDArray[np.float64]:
    """
    α values of a unary component or array.

    Objects with a materialize() method are materialized once; anything else
    is treated as an array of α values.
    """
    if hasattr(unary, 'materialize'):
        return unary.materialize()
    return check_array(unary, 'unary')


def check_same_shape(
    actual: tuple[int, ...],
    expected: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify two model components agree in shape.

    Raises:
        DimensionMismatch: If the shapes differ
    """
    if tuple(actual) != tuple(expected):
        raise DimensionMismatch(
            f"{name}: expected shape {tuple(expected)}, got {tuple(actual)}",
            name=name,
            expected=tuple(expected),
            actual=tuple(actual),
        )
