"""
Autologistic model container.

ALModel holds the pieces an autologistic regression is defined by: boolean
responses (n observations by m replicates), a unary component, a pairwise
association matrix, a centering policy, and the coding and labels of the
two states. It validates that the pieces agree once, at build time, and
delegates computation to centering.py and objectives.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from autologistic.core.exceptions import ValidationError
from autologistic.core.protocols import UnaryComponent
from autologistic.core.validation import check_coding
from autologistic.model import objectives
from autologistic.model._common import as_pairwise, as_response_matrix, check_same_shape
from autologistic.model.centering import centering_adjustment
from autologistic.model.coding import (
    DEFAULT_CODING,
    DEFAULT_LABELS,
    CenteringKind,
    Dichotomous,
    make_coded,
    resolve_centering,
)


@dataclass(frozen=True, eq=False)
class ALModel:
    """
    Autologistic model specification.

    Construction:
        ALModel.build(responses, unary, pairwise)
        ALModel.build(responses, unary, pairwise, centering='expectation',
                      coding=(0, 1), labels=('absent', 'present'))

    The container itself is immutable; the unary component's parameters
    are changed through set_parameters().
    """
    _responses: NDArray[np.bool_]
    _unary: UnaryComponent
    _pairwise: Any
    _centering: CenteringKind
    _coding: tuple[float, float]
    _labels: tuple[str, str]

    @classmethod
    def build(
        cls,
        responses: ArrayLike,
        unary: UnaryComponent,
        pairwise: Any,
        *,
        centering: str | CenteringKind = CenteringKind.NONE,
        coding: tuple[float, float] = DEFAULT_CODING,
        labels: tuple[str, str] = DEFAULT_LABELS,
    ) -> ALModel:
        """
        Build a validated model.

        Raises:
            TypeError: If unary does not implement UnaryComponent
            DimensionMismatch: If responses, unary and pairwise disagree
            UnrecognizedKindError: If centering is not a recognized policy
            ValidationError: If coding or labels are invalid
        """
        if not isinstance(unary, UnaryComponent):
            raise TypeError(
                f"unary must implement UnaryComponent, got {type(unary).__name__}"
            )
        Y = np.array(as_response_matrix(responses), dtype=np.bool_)
        check_same_shape(unary.shape, Y.shape, 'unary')
        lam = as_pairwise(pairwise, Y.shape[0])
        kind = resolve_centering(centering)
        lo, hi = check_coding(coding)

        labels = tuple(labels)
        if len(labels) != 2 or not all(isinstance(s, str) for s in labels):
            raise ValidationError(f"labels: expected two strings, got {labels!r}")

        Y.flags.writeable = False
        return cls(
            _responses=Y,
            _unary=unary,
            _pairwise=lam,
            _centering=kind,
            _coding=(lo, hi),
            _labels=labels,
        )

    # === Properties ===

    @property
    def responses(self) -> NDArray[np.bool_]:
        """Boolean responses (n, m), read-only."""
        return self._responses

    @property
    def unary(self) -> UnaryComponent:
        return self._unary

    @property
    def pairwise(self) -> Any:
        """Association matrix Λ (n, n), dense ndarray or CSR matrix."""
        return self._pairwise

    @property
    def centering(self) -> CenteringKind:
        return self._centering

    @property
    def coding(self) -> tuple[float, float]:
        return self._coding

    @property
    def labels(self) -> tuple[str, str]:
        return self._labels

    @property
    def n_observations(self) -> int:
        return self._responses.shape[0]

    @property
    def n_replicates(self) -> int:
        return self._responses.shape[1]

    # === Parameters ===

    def get_parameters(self) -> NDArray[np.floating[Any]]:
        return self._unary.get_parameters()

    def set_parameters(self, new_parameters: ArrayLike) -> None:
        self._unary.set_parameters(new_parameters)

    # === Derived quantities ===

    def coded_responses(self) -> NDArray[np.float64]:
        """Responses as coded values (n, m): True → hi, False → lo."""
        return make_coded(self._responses, self._coding)

    def dichotomous(self, i: int, r: int = 0) -> Dichotomous:
        """The response of observation i in replicate r as a Dichotomous."""
        return Dichotomous.from_response(
            bool(self._responses[i, r]), self._coding, self._labels
        )

    def centering_adjustment(
        self, kind: str | CenteringKind | None = None
    ) -> NDArray[np.float64]:
        """
        Centering adjustment μ (n, m).

        Args:
            kind: Policy to use instead of the model's own centering
        """
        k = self._centering if kind is None else kind
        return centering_adjustment(self._unary, k, self._coding)

    def negpotential(self) -> NDArray[np.float64]:
        """Negpotential of each replicate (m,)."""
        return objectives.negpotential(
            self._unary, self._pairwise, self._responses,
            self._coding, self._centering,
        )

    def pseudolikelihood(self) -> float:
        """Negative log pseudolikelihood summed over replicates."""
        return objectives.pseudolikelihood(
            self._unary, self._pairwise, self._responses,
            self._coding, self._centering,
        )

    def __repr__(self) -> str:
        return (
            f"ALModel(n={self.n_observations}, m={self.n_replicates}, "
            f"unary={self._unary!r}, centering={self._centering.value!r}, "
            f"coding={self._coding})"
        )
