"""
GPU tests for unary value evaluation.

Validates the torch backend against the CPU einsum reference, within the
tolerance tier for its precision.

Skipped automatically when no GPU is available.
"""

import numpy as np
import pytest

from autologistic.core.compute import select_tolerance
from autologistic.unary import LinPredUnary
from autologistic.unary.backends import get_backend


def _gpu_available():
    try:
        import torch
        return (torch.cuda.is_available() or
                (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()))
    except ImportError:
        return False


pytestmark = pytest.mark.skipif(
    not _gpu_available(), reason="No GPU available"
)


@pytest.fixture
def large_unary():
    rng = np.random.default_rng(7)
    X = rng.standard_normal((2000, 8, 5))
    beta = rng.standard_normal(8)
    return LinPredUnary(X, beta)


def test_gpu_matches_cpu(large_unary):
    backend = get_backend('gpu')
    tol = select_tolerance(backend.name)
    cpu = large_unary.materialize('cpu')
    gpu = large_unary.materialize('gpu')
    assert gpu.dtype == np.float64
    np.testing.assert_allclose(gpu, cpu, rtol=tol.rtol, atol=tol.atol * 100)


def test_auto_uses_gpu(large_unary):
    assert get_backend('auto').name.startswith('gpu')
    cpu = large_unary.materialize('cpu')
    np.testing.assert_allclose(large_unary.materialize('auto'), cpu, rtol=1e-3, atol=1e-3)
