"""
CPU reference backend for unary value evaluation.

Contracts the (n, p, m) design tensor with the p-vector of coefficients
in a single einsum, giving the (n, m) matrix of linear-predictor values.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


class CPUEinsumBackend:
    """
    CPU backend computing value[i, r] = sum_j X[i, j, r] * beta[j].

    This is the reference implementation; GPU results are compared
    against it.
    """

    @property
    def name(self) -> str:
        return 'cpu_einsum'

    def evaluate(
        self,
        X: NDArray[np.floating[Any]],
        beta: NDArray[np.floating[Any]],
    ) -> NDArray[np.float64]:
        """
        Evaluate the full value matrix.

        Args:
            X: Design tensor (n, p, m)
            beta: Coefficients (p,)

        Returns:
            Values (n, m)
        """
        return np.einsum('ijr,j->ir', X, beta)
