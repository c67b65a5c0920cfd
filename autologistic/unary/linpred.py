"""
Linear-predictor unary component.

LinPredUnary holds an n-by-p-by-m design tensor X (n observations,
p predictors, m replicates) and a p-vector of coefficients β shared by all
replicates. It behaves as an n-by-m matrix of values

    u[i, r] = Σ_j X[i, j, r] * β[j]

that are computed on demand and never stored. Reads go through indexing or
materialize(); writes are refused, since the only way to change a value is
to change β via set_parameters().

Indexing grammar (per axis: int, slice, range, boolean mask, int sequence):
    u[:, :]          full (n, m) matrix
    u[i, r]          float
    u[:, r]          (n,) values for replicate r
    u[i, :]          (m,) values for observation i
    u[I, R]          (len(I), len(R)), computed from the selected slab of X
    u[A]             linear indexing into the row-major materialization

There is deliberately no __len__, __iter__ or implicit __array__ conversion:
each of those would let generic code materialize the whole matrix once per
element. Use materialize() to get all values at once.
"""

from __future__ import annotations

from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from autologistic.core.exceptions import DimensionMismatch, ImmutableValueError
from autologistic.core.validation import check_array, check_1d, check_2d, check_3d
from autologistic.unary._indexing import is_full_slice, linear_select, normalize_selector
from autologistic.unary.backends import BackendChoice, get_backend


class LinPredUnary:
    """
    Unary component whose values are a regression linear predictor.

    Construction:
        LinPredUnary(X, beta)                  # X is (n, p, m)
        LinPredUnary.from_matrix(X, beta)      # X is (n, p), m = 1
        LinPredUnary.from_tensor(X)            # coefficients unset
        LinPredUnary.uninitialized(n, p, m)    # tensor and coefficients unset

    Unset storage is filled with NaN and every read of values emits a
    RuntimeWarning while any of it remains. Coefficients are completed with
    set_parameters(); the tensor of uninitialized() has no setter, so its
    values stay NaN.
    """

    __slots__ = ('_X', '_beta', '_X_unset')

    def __init__(self, X: ArrayLike, beta: ArrayLike):
        X_arr = check_array(X, 'X')
        beta_arr = check_array(beta, 'beta')
        check_3d(X_arr, 'X')
        check_1d(beta_arr, 'beta')

        p = X_arr.shape[1]
        if beta_arr.shape[0] != p:
            raise DimensionMismatch(
                f"LinPredUnary: X and beta dimensions are inconsistent "
                f"(X has {p} predictors, beta has length {beta_arr.shape[0]})",
                name='beta',
                expected=p,
                actual=beta_arr.shape[0],
            )

        # Owned copies: callers keep no handle on the internal storage.
        self._X = np.array(X_arr, dtype=np.float64, order='C')
        self._beta = np.array(beta_arr, dtype=np.float64)
        # X is never written after construction
        self._X_unset = bool(np.isnan(self._X).any())

    # === Factory methods ===

    @classmethod
    def from_matrix(cls, X: ArrayLike, beta: ArrayLike | None = None) -> LinPredUnary:
        """Build a single-replicate component from an (n, p) design matrix."""
        X_arr = check_array(X, 'X')
        check_2d(X_arr, 'X')
        n, p = X_arr.shape
        if beta is None:
            beta = np.full(p, np.nan)
        return cls(X_arr.reshape(n, p, 1), beta)

    @classmethod
    def from_tensor(cls, X: ArrayLike, beta: ArrayLike | None = None) -> LinPredUnary:
        """Build from an (n, p, m) design tensor."""
        X_arr = check_array(X, 'X')
        check_3d(X_arr, 'X')
        if beta is None:
            beta = np.full(X_arr.shape[1], np.nan)
        return cls(X_arr, beta)

    @classmethod
    def uninitialized(cls, n: int, p: int, m: int = 1) -> LinPredUnary:
        """Allocate an (n, p, m) component with unset tensor and coefficients."""
        for name, value in (('n', n), ('p', p), ('m', m)):
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        return cls(np.full((n, p, m), np.nan), np.full(p, np.nan))

    # === Properties ===

    @property
    def shape(self) -> tuple[int, int]:
        """Logical extent (n, m)."""
        return (self._X.shape[0], self._X.shape[2])

    @property
    def n_observations(self) -> int:
        return self._X.shape[0]

    @property
    def n_predictors(self) -> int:
        return self._X.shape[1]

    @property
    def n_replicates(self) -> int:
        return self._X.shape[2]

    @property
    def X(self) -> NDArray[np.float64]:
        """Read-only view of the design tensor (n, p, m)."""
        view = self._X.view()
        view.flags.writeable = False
        return view

    # === Parameters ===

    def get_parameters(self) -> NDArray[np.float64]:
        """
        Current coefficients as a live, read-only view.

        The view reflects later calls to set_parameters().
        """
        view = self._beta.view()
        view.flags.writeable = False
        return view

    def set_parameters(self, new_parameters: ArrayLike) -> None:
        """
        Replace all p coefficients.

        Args:
            new_parameters: New coefficient vector of length p

        Raises:
            DimensionMismatch: If the length differs from p; the existing
                coefficients are left unchanged
        """
        arr = check_array(new_parameters, 'new_parameters')
        check_1d(arr, 'new_parameters')
        p = self._beta.shape[0]
        if arr.shape[0] != p:
            raise DimensionMismatch(
                f"set_parameters: expected {p} coefficients, got {arr.shape[0]}",
                name='new_parameters',
                expected=p,
                actual=arr.shape[0],
            )
        self._beta[:] = arr

    # === Values ===

    def materialize(self, backend: BackendChoice = 'cpu') -> NDArray[np.float64]:
        """
        Compute the full (n, m) matrix of values.

        Args:
            backend: 'cpu' (default), 'gpu', 'auto', 'cpu_einsum',
                'gpu_fp32' or 'gpu_fp64'

        Returns:
            Freshly computed values; modifying the result does not affect
            the component.
        """
        self._warn_if_unset()
        return get_backend(backend).evaluate(self._X, self._beta)

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(key, tuple):
            return linear_select(self.materialize(), key)
        if len(key) != 2:
            raise IndexError(
                f"{type(self).__name__} is 2-dimensional, got {len(key)} indices"
            )

        rows, cols = key
        if is_full_slice(rows) and is_full_slice(cols):
            return self.materialize()

        n, _, m = self._X.shape
        I = normalize_selector(rows, n, 'observation')
        R = normalize_selector(cols, m, 'replicate')
        self._warn_if_unset()

        if isinstance(I, int) and isinstance(R, int):
            return float(self._X[I, :, R] @ self._beta)
        if isinstance(I, int):
            # X[I] is (p, m)
            return self._beta @ self._X[I][:, R]
        if isinstance(R, int):
            # X[:, :, R] restricted to rows I is (len(I), p)
            return self._X[I, :, R] @ self._beta
        slab = self._X[np.ix_(I, np.arange(self._X.shape[1]), R)]
        return np.einsum('ijr,j->ir', slab, self._beta)

    def __setitem__(self, key: Any, value: Any) -> None:
        raise ImmutableValueError(
            f"Values of {type(self).__name__} must be set using set_parameters().",
            type_name=type(self).__name__,
        )

    __iter__ = None

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        raise TypeError(
            f"{type(self).__name__} does not convert implicitly to an array; "
            f"call materialize() to compute all values."
        )

    def _warn_if_unset(self) -> None:
        name = type(self).__name__
        if self._X_unset:
            warnings.warn(
                f"{name}: design tensor contains unset (NaN) entries; "
                f"the affected values are NaN.",
                RuntimeWarning,
                stacklevel=3,
            )
        if np.isnan(self._beta).any():
            warnings.warn(
                f"{name}: coefficients have not been set; "
                f"values are NaN until every coefficient is set.",
                RuntimeWarning,
                stacklevel=3,
            )

    def __repr__(self) -> str:
        n, p, m = self._X.shape
        return f"{type(self).__name__}(n={n}, p={p}, m={m})"
