"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest
from scipy import sparse

from autologistic.core.exceptions import DimensionMismatch, ValidationError
from autologistic.core.validation import (
    check_1d,
    check_2d,
    check_3d,
    check_array,
    check_bool_array,
    check_coding,
    check_finite,
    check_length,
    check_ndim,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "beta")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


class TestCheckBoolArray:

    def test_bool_passthrough(self):
        result = check_bool_array([True, False], "responses")
        assert result.dtype == np.bool_

    def test_rejects_numeric(self):
        with pytest.raises(ValidationError, match="boolean"):
            check_bool_array([0, 1, 1], "responses")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "X")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Dimension checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_correct_ndim(self):
        check_ndim(np.zeros((2, 3, 4)), 3, "X")
        check_1d(np.zeros(3), "beta")
        check_2d(np.zeros((2, 2)), "X")
        check_3d(np.zeros((2, 2, 1)), "X")

    def test_wrong_ndim_raises_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch, match="expected 3D") as exc_info:
            check_3d(np.zeros((2, 2)), "X")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2


class TestCheckLength:

    def test_matching_length(self):
        check_length(np.zeros(4), 4, "beta")

    def test_mismatch(self):
        with pytest.raises(DimensionMismatch, match="expected length 4, got 3"):
            check_length(np.zeros(3), 4, "beta")


class TestCheckSquare:

    def test_dense(self):
        check_square(np.zeros((3, 3)), 3, "pairwise")

    def test_sparse_not_densified(self):
        check_square(sparse.eye(5, format="csr"), 5, "pairwise")

    def test_wrong_shape(self):
        with pytest.raises(DimensionMismatch, match=r"\(3, 3\)"):
            check_square(np.zeros((3, 2)), 3, "pairwise")


class TestCheckCoding:

    def test_valid_pairs(self):
        assert check_coding((-1, 1)) == (-1.0, 1.0)
        assert check_coding([0, 1]) == (0.0, 1.0)

    def test_wrong_length(self):
        with pytest.raises(ValidationError, match="two values"):
            check_coding((0, 1, 2))

    def test_not_increasing(self):
        with pytest.raises(ValidationError, match="less than"):
            check_coding((1, -1))

    def test_equal_values(self):
        with pytest.raises(ValidationError):
            check_coding((0.5, 0.5))

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            check_coding((0.0, np.inf))
