"""
Model-level pieces of autologistic regression.

Public API:
    ALModel: container for responses, unary, pairwise, centering and coding
    centering_adjustment(unary, kind, coding) -> μ
    negpotential(unary, pairwise, responses, coding, centering) -> (m,)
    pseudolikelihood(unary, pairwise, responses, coding, centering) -> float
    make_coded(responses, coding) -> coded responses
    CenteringKind, Dichotomous

Example:
    >>> from autologistic.model import ALModel
    >>> model = ALModel.build(Y, unary, Lam, centering='expectation')
    >>> model.negpotential()
    >>> model.pseudolikelihood()
"""

from autologistic.model.coding import (
    CenteringKind,
    Dichotomous,
    make_coded,
    resolve_centering,
)
from autologistic.model.centering import centering_adjustment
from autologistic.model.objectives import negpotential, pseudolikelihood
from autologistic.model.almodel import ALModel

__all__ = [
    "ALModel",
    "CenteringKind",
    "Dichotomous",
    "centering_adjustment",
    "make_coded",
    "negpotential",
    "pseudolikelihood",
    "resolve_centering",
]
