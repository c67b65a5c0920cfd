"""
Axis selector normalization for unary components.

Every selector a caller can put on one axis of ``u[rows, cols]`` is reduced
to one of two canonical forms before any arithmetic happens:

    - a single non-negative int (the axis is dropped from the result)
    - a 1-D intp array of positions (order and repeats preserved)

Boolean masks become the positions of their True entries.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from autologistic.core.exceptions import DimensionMismatch


def is_full_slice(selector: Any) -> bool:
    """True for a bare ``:`` selector."""
    return isinstance(selector, slice) and selector == slice(None)


def _check_bounds(index: int, extent: int, axis: str) -> int:
    if not -extent <= index < extent:
        raise IndexError(
            f"{axis} index {index} is out of bounds for extent {extent}"
        )
    return index + extent if index < 0 else index


def normalize_selector(
    selector: Any, extent: int, axis: str
) -> int | NDArray[np.intp]:
    """
    Reduce one axis selector to its canonical form.

    Args:
        selector: int, slice, range, boolean mask, or integer sequence
        extent: Size of the axis being selected from
        axis: Axis name for error messages ('observation' or 'replicate')

    Returns:
        A non-negative int for scalar selectors, otherwise a 1-D intp array.

    Raises:
        DimensionMismatch: If a boolean mask's length differs from extent,
            or an index sequence is not 1-D
        IndexError: If an integer index is out of bounds
        TypeError: If the selector type is not supported
    """
    if isinstance(selector, (bool, np.bool_)):
        raise TypeError(f"{axis} selector: boolean scalars are not valid indices")

    if isinstance(selector, (int, np.integer)):
        return _check_bounds(int(selector), extent, axis)

    if isinstance(selector, slice):
        return np.arange(extent, dtype=np.intp)[selector]

    arr = np.asarray(selector)

    if arr.dtype == np.bool_:
        if arr.ndim != 1 or arr.shape[0] != extent:
            raise DimensionMismatch(
                f"{axis} mask: expected length {extent}, got shape {arr.shape}",
                name=f"{axis} mask",
                expected=extent,
                actual=arr.shape,
            )
        return np.flatnonzero(arr)

    if arr.size == 0:
        return np.empty(0, dtype=np.intp)

    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(
            f"{axis} selector: expected integers or booleans, got dtype {arr.dtype}"
        )

    if arr.ndim != 1:
        raise DimensionMismatch(
            f"{axis} selector: expected a 1D index sequence, got shape {arr.shape}",
            name=f"{axis} selector",
            expected=1,
            actual=arr.ndim,
        )

    out_of_bounds = (arr < -extent) | (arr >= extent)
    if np.any(out_of_bounds):
        bad = int(arr[out_of_bounds][0])
        raise IndexError(
            f"{axis} index {bad} is out of bounds for extent {extent}"
        )
    return np.where(arr < 0, arr + extent, arr).astype(np.intp, copy=False)


def linear_select(values: NDArray[np.floating[Any]], key: Any) -> Any:
    """
    Index a materialized (n, m) matrix with a single, non-tuple key.

    Linearization is row-major (C order), the same order as
    ``values.ravel()``. A boolean mask may have the full (n, m) shape or be
    flat with n*m entries.

    Raises:
        DimensionMismatch: If a boolean mask matches neither form
    """
    flat = values.ravel(order='C')

    if isinstance(key, (bool, np.bool_)):
        raise TypeError("boolean scalars are not valid indices")
    if isinstance(key, (int, np.integer)):
        return float(flat[_check_bounds(int(key), flat.shape[0], 'linear')])
    if isinstance(key, slice):
        return flat[key]

    arr = np.asarray(key)
    if arr.dtype == np.bool_:
        if arr.shape == values.shape:
            return values[arr]
        if arr.shape == flat.shape:
            return flat[arr]
        raise DimensionMismatch(
            f"linear mask: expected shape {values.shape} or {flat.shape}, got {arr.shape}",
            name="linear mask",
            expected=values.shape,
            actual=arr.shape,
        )
    if arr.size == 0:
        return flat[np.empty(arr.shape, dtype=np.intp)]
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(
            f"linear selector: expected integers or booleans, got dtype {arr.dtype}"
        )
    return flat[arr]
