"""
Input validation utilities for autologistic.

These validators fail fast and loud. They raise immediately with a message
naming the argument rather than silently reshaping or coercing data.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from autologistic.core.exceptions import ValidationError, DimensionMismatch


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_bool_array(array: ArrayLike, name: str) -> NDArray[np.bool_]:
    """
    Validate that input is a boolean array.

    Responses of a dichotomous model are boolean; numeric 0/1 input is
    rejected rather than guessed at.

    Raises:
        ValidationError: If the array dtype is not bool
    """
    result = np.asarray(array)
    if result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: expected boolean array, got dtype {result.dtype}"
        )
    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionMismatch: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatch(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            name=name,
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_3d(array: NDArray[Any], name: str) -> None:
    """Verify array is 3-dimensional."""
    check_ndim(array, 3, name)


def check_length(array: NDArray[Any], length: int, name: str) -> None:
    """
    Verify the first dimension of an array has the required extent.

    Args:
        array: Array to check
        length: Required extent of the first axis
        name: Parameter name for error messages

    Raises:
        DimensionMismatch: If the extent differs
    """
    actual = array.shape[0] if array.ndim > 0 else 0
    if actual != length:
        raise DimensionMismatch(
            f"{name}: expected length {length}, got {actual}",
            name=name,
            expected=length,
            actual=actual,
        )


def check_square(matrix: Any, n: int, name: str) -> None:
    """
    Verify a (dense or sparse) matrix has shape (n, n).

    Only the ``shape`` attribute is inspected, so scipy.sparse matrices are
    accepted without densifying them.

    Raises:
        DimensionMismatch: If the shape is not (n, n)
    """
    shape = tuple(getattr(matrix, 'shape', ()))
    if shape != (n, n):
        raise DimensionMismatch(
            f"{name}: expected shape ({n}, {n}), got {shape}",
            name=name,
            expected=(n, n),
            actual=shape,
        )


def check_coding(coding: Any, name: str = 'coding') -> tuple[float, float]:
    """
    Validate a dichotomous coding pair.

    Args:
        coding: Two numbers (lo, hi) representing the two states
        name: Parameter name for error messages

    Returns:
        The pair as a tuple of floats

    Raises:
        ValidationError: If coding is not two distinct finite numbers
            with lo < hi
    """
    arr = check_array(coding, name)
    if arr.shape != (2,):
        raise ValidationError(f"{name}: expected two values, got shape {arr.shape}")
    check_finite(arr, name)
    lo, hi = float(arr[0]), float(arr[1])
    if not lo < hi:
        raise ValidationError(
            f"{name}: low value must be less than high value, got ({lo}, {hi})"
        )
    return lo, hi
