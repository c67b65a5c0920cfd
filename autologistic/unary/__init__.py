"""
Unary (node-level) components of autologistic models.

Public API:
    LinPredUnary: linear-predictor values X·β, per observation and replicate

Example:
    >>> import numpy as np
    >>> from autologistic.unary import LinPredUnary
    >>> u = LinPredUnary.from_matrix(np.array([[1.0, 2.0], [3.0, 4.0]]), [1.0, 1.0])
    >>> u.materialize()
    array([[3.],
           [7.]])
"""

from autologistic.unary.linpred import LinPredUnary

__all__ = [
    "LinPredUnary",
]
