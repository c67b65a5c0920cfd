"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from autologistic.unary import LinPredUnary


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def design_tensor(rng):
    """Design tensor with n=6 observations, p=3 predictors, m=4 replicates."""
    return rng.standard_normal((6, 3, 4))


@pytest.fixture
def coefficients():
    return np.array([0.5, -1.0, 2.0])


@pytest.fixture
def unary(design_tensor, coefficients):
    """LinPredUnary over the shared design tensor and coefficients."""
    return LinPredUnary(design_tensor, coefficients)


@pytest.fixture
def expected_values(design_tensor, coefficients):
    """Reference values computed by explicit loops."""
    n, p, m = design_tensor.shape
    out = np.zeros((n, m))
    for r in range(m):
        for i in range(n):
            for j in range(p):
                out[i, r] += design_tensor[i, j, r] * coefficients[j]
    return out
