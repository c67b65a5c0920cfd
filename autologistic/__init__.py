"""
autologistic: autologistic regression models for dichotomous network data.

The autologistic model is a Markov random field for binary responses on the
nodes of a graph. Each node has a unary (node-level) linear predictor and
pairs of nodes interact through an association matrix.

Submodules:
    unary: Unary components (LinPredUnary)
    model: ALModel container, centering adjustment, negpotential and
           pseudolikelihood objectives
    core: Exceptions, validation, protocols, device selection
"""

__version__ = "0.1.0"

from autologistic import unary
from autologistic import model
from autologistic.unary import LinPredUnary
from autologistic.model import (
    ALModel,
    CenteringKind,
    Dichotomous,
    centering_adjustment,
    make_coded,
    negpotential,
    pseudolikelihood,
)
from autologistic.core.exceptions import (
    AutologisticError,
    ValidationError,
    DimensionMismatch,
    UnrecognizedKindError,
    ImmutableValueError,
)

__all__ = [
    "__version__",
    "unary",
    "model",
    "LinPredUnary",
    "ALModel",
    "CenteringKind",
    "Dichotomous",
    "centering_adjustment",
    "make_coded",
    "negpotential",
    "pseudolikelihood",
    "AutologisticError",
    "ValidationError",
    "DimensionMismatch",
    "UnrecognizedKindError",
    "ImmutableValueError",
]
