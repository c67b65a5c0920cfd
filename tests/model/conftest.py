"""
Shared fixtures for model-level tests.

Provides a small lattice-like graph with known structure.
"""

import numpy as np
import pytest
from scipy import sparse

from autologistic.unary import LinPredUnary


@pytest.fixture
def ring_pairwise():
    """Association matrix of a 6-node ring with weight 0.4 on each edge."""
    n = 6
    lam = np.zeros((n, n))
    for i in range(n):
        lam[i, (i + 1) % n] = 0.4
        lam[(i + 1) % n, i] = 0.4
    return lam


@pytest.fixture
def ring_pairwise_sparse(ring_pairwise):
    return sparse.csr_matrix(ring_pairwise)


@pytest.fixture
def responses(rng):
    """Boolean responses, 6 observations by 4 replicates."""
    return rng.random((6, 4)) < 0.5


@pytest.fixture
def two_node():
    """Hand-checkable two-node model: α = (3, 7), Λ = [[0, 1], [1, 0]]."""
    X = np.array([[[1.0], [2.0]], [[3.0], [4.0]]])
    unary = LinPredUnary(X, [1.0, 1.0])
    pairwise = np.array([[0.0, 1.0], [1.0, 0.0]])
    responses = np.array([[True], [False]])
    return unary, pairwise, responses
