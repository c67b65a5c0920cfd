"""
Objective functions of the autologistic model.

negpotential:      per-replicate negpotential values
pseudolikelihood:  negative log pseudolikelihood summed over replicates

Both take the model pieces separately: a unary component (or α array), a
pairwise association matrix Λ (dense or scipy.sparse), boolean responses,
a coding pair and a centering policy. The unary component is materialized
once per call.

References:
    Besag, J. (1975). Statistical Analysis of Non-Lattice Data.
    Journal of the Royal Statistical Society, Series D, 24(3), 179-195.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from autologistic.core.validation import check_2d, check_coding
from autologistic.model._common import (
    as_pairwise,
    as_response_matrix,
    check_same_shape,
    matvec,
    unary_values,
)
from autologistic.model.centering import centering_adjustment
from autologistic.model.coding import DEFAULT_CODING, CenteringKind


def _prepare(unary, pairwise, responses, coding):
    lo, hi = check_coding(coding)
    alpha = unary_values(unary)
    if alpha.ndim == 1:
        alpha = alpha.reshape(-1, 1)
    check_2d(alpha, 'unary')
    Y_bool = as_response_matrix(responses)
    check_same_shape(Y_bool.shape, alpha.shape, 'responses')
    Lam = as_pairwise(pairwise, alpha.shape[0])
    Y = np.where(Y_bool, hi, lo)
    return alpha, Lam, Y, (lo, hi)


def negpotential(
    unary: Any,
    pairwise: Any,
    responses: ArrayLike,
    coding: tuple[float, float] = DEFAULT_CODING,
    centering: str | CenteringKind = CenteringKind.NONE,
) -> NDArray[np.float64]:
    """
    Negpotential of each replicate.

    For replicate j with coded responses Y_j, unary values α_j and centering
    adjustment μ_j:

        Y_j'α_j - α_j'Λμ_j + α_j'Λα_j / 2

    Args:
        unary: Unary component or α array, (n, m) or (n,)
        pairwise: Association matrix Λ (n, n), dense or sparse
        responses: Boolean responses (n, m) or (n,)
        coding: (lo, hi) coding pair
        centering: Centering policy

    Returns:
        Array of m negpotential values

    Raises:
        DimensionMismatch: If the pieces disagree in shape
        UnrecognizedKindError: If centering is not a recognized policy
    """
    alpha, Lam, Y, coding = _prepare(unary, pairwise, responses, coding)
    mu = centering_adjustment(alpha, centering, coding)

    m = alpha.shape[1]
    out = np.empty(m, dtype=np.float64)
    for j in range(m):
        a = alpha[:, j]
        out[j] = Y[:, j] @ a - a @ matvec(Lam, mu[:, j]) + a @ matvec(Lam, a) / 2
    return out


def pseudolikelihood(
    unary: Any,
    pairwise: Any,
    responses: ArrayLike,
    coding: tuple[float, float] = DEFAULT_CODING,
    centering: str | CenteringKind = CenteringKind.NONE,
) -> float:
    """
    Negative log pseudolikelihood, summed over replicates.

    Each observation's full conditional given its neighbours has natural
    parameter α_i + s_i, where s = Λ(Y - μ) is the association-weighted sum
    of centered neighbour responses. For replicate j:

        log PL_j = Σ_i [ Y_ij (α_ij + s_ij)
                         - log(exp(lo (α_ij + s_ij)) + exp(hi (α_ij + s_ij))) ]

    and the return value is -Σ_j log PL_j. The normalizing term is
    evaluated with np.logaddexp.

    Args:
        unary: Unary component or α array, (n, m) or (n,)
        pairwise: Association matrix Λ (n, n), dense or sparse
        responses: Boolean responses (n, m) or (n,)
        coding: (lo, hi) coding pair
        centering: Centering policy

    Returns:
        Negative log pseudolikelihood

    Raises:
        DimensionMismatch: If the pieces disagree in shape
        UnrecognizedKindError: If centering is not a recognized policy
    """
    alpha, Lam, Y, (lo, hi) = _prepare(unary, pairwise, responses, coding)
    mu = centering_adjustment(alpha, centering, (lo, hi))

    out = 0.0
    for j in range(alpha.shape[1]):
        a_plus_s = alpha[:, j] + matvec(Lam, Y[:, j] - mu[:, j])
        log_pl = np.sum(
            Y[:, j] * a_plus_s - np.logaddexp(lo * a_plus_s, hi * a_plus_s)
        )
        out -= float(log_pl)
    return out
