"""
Centering adjustment for the pairwise term.

The adjustment μ is subtracted from the coded responses before neighbour
interactions are applied. It is derived from the unary values each time it
is needed and never stored.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.special import expit

from autologistic.core.validation import check_2d, check_coding
from autologistic.model._common import unary_values
from autologistic.model.coding import DEFAULT_CODING, CenteringKind, resolve_centering


def centering_adjustment(
    unary: Any,
    kind: str | CenteringKind,
    coding: tuple[float, float] = DEFAULT_CODING,
    *,
    replicate: int | None = None,
) -> NDArray[np.float64]:
    """
    Compute the centering adjustment μ.

    Args:
        unary: A unary component (anything with materialize()) or an array
            of α values, shape (n,) or (n, m)
        kind: 'none', 'onehalf' or 'expectation' (or a CenteringKind)
        coding: (lo, hi) coding pair
        replicate: If given, compute only for this replicate and return (n,)

    Returns:
        μ with the shape of the α values, or (n,) when replicate is given.
        For 'expectation':

            μ = (lo·e^{lo·α} + hi·e^{hi·α}) / (e^{lo·α} + e^{hi·α})
              = lo + (hi - lo) · expit((hi - lo) · α)

        The second form cannot overflow for large |α|.

    Raises:
        UnrecognizedKindError: If kind is not a recognized policy
    """
    k = resolve_centering(kind)
    lo, hi = check_coding(coding)

    if replicate is not None:
        if hasattr(unary, 'materialize'):
            alpha = np.asarray(unary[:, replicate], dtype=np.float64)
        else:
            alpha = unary_values(unary)
            if alpha.ndim == 1:
                alpha = alpha.reshape(-1, 1)
            check_2d(alpha, 'unary')
            alpha = alpha[:, replicate]
    else:
        alpha = unary_values(unary)

    if k is CenteringKind.NONE:
        return np.zeros_like(alpha)
    if k is CenteringKind.ONEHALF:
        return np.full_like(alpha, 0.5)
    return lo + (hi - lo) * expit((hi - lo) * alpha)
