"""
Negpotential and pseudolikelihood tests.

Reference values are computed with explicit per-observation loops and,
for the two-node model, by hand.
"""

import math

import numpy as np
import pytest
from scipy import sparse

from autologistic.core.exceptions import DimensionMismatch, UnrecognizedKindError, ValidationError
from autologistic.model import centering_adjustment, make_coded, negpotential, pseudolikelihood


def _loop_negpotential(alpha, lam, Y, mu):
    n, m = alpha.shape
    out = np.zeros(m)
    for j in range(m):
        for i in range(n):
            out[j] += Y[i, j] * alpha[i, j]
            for k in range(n):
                out[j] -= alpha[i, j] * lam[i, k] * mu[k, j]
                out[j] += alpha[i, j] * lam[i, k] * alpha[k, j] / 2
    return out


def _loop_pseudolikelihood(alpha, lam, Y, mu, lo, hi):
    n, m = alpha.shape
    total = 0.0
    for j in range(m):
        for i in range(n):
            s = sum(lam[i, k] * (Y[k, j] - mu[k, j]) for k in range(n))
            eta = alpha[i, j] + s
            total -= Y[i, j] * eta - math.log(math.exp(lo * eta) + math.exp(hi * eta))
    return total


# =====================================================================
# negpotential
# =====================================================================

class TestNegpotential:

    def test_two_node_by_hand(self, two_node):
        # Y = (1, -1), α = (3, 7): Y'α = -4, α'Λα / 2 = 21
        unary, lam, Y = two_node
        result = negpotential(unary, lam, Y)
        assert result.shape == (1,)
        assert result[0] == pytest.approx(17.0)

    @pytest.mark.parametrize("centering", ['none', 'onehalf', 'expectation'])
    @pytest.mark.parametrize("coding", [(-1, 1), (0, 1)])
    def test_matches_loops(self, unary, ring_pairwise, responses, centering, coding):
        alpha = unary.materialize()
        Y = make_coded(responses, coding)
        mu = centering_adjustment(alpha, centering, coding)
        expected = _loop_negpotential(alpha, ring_pairwise, Y, mu)
        result = negpotential(unary, ring_pairwise, responses, coding, centering)
        assert result.shape == (4,)
        np.testing.assert_allclose(result, expected, rtol=1e-10)

    def test_sparse_equals_dense(self, unary, ring_pairwise, ring_pairwise_sparse, responses):
        dense = negpotential(unary, ring_pairwise, responses, centering='expectation')
        sp = negpotential(unary, ring_pairwise_sparse, responses, centering='expectation')
        np.testing.assert_allclose(sp, dense, rtol=1e-12)

    def test_accepts_alpha_array(self, unary, ring_pairwise, responses):
        np.testing.assert_allclose(
            negpotential(unary.materialize(), ring_pairwise, responses),
            negpotential(unary, ring_pairwise, responses),
        )

    def test_zero_pairwise_reduces_to_unary_term(self, unary, responses):
        alpha = unary.materialize()
        Y = make_coded(responses)
        result = negpotential(unary, np.zeros((6, 6)), responses)
        np.testing.assert_allclose(result, np.sum(Y * alpha, axis=0))

    def test_response_shape_mismatch(self, unary, ring_pairwise):
        with pytest.raises(DimensionMismatch, match="responses"):
            negpotential(unary, ring_pairwise, np.ones((6, 3), dtype=bool))

    def test_pairwise_shape_mismatch(self, unary, responses):
        with pytest.raises(DimensionMismatch, match="pairwise"):
            negpotential(unary, np.eye(5), responses)

    def test_sparse_pairwise_shape_mismatch(self, unary, responses):
        with pytest.raises(DimensionMismatch, match="pairwise"):
            negpotential(unary, sparse.eye(7), responses)

    def test_unknown_centering(self, unary, ring_pairwise, responses):
        with pytest.raises(UnrecognizedKindError):
            negpotential(unary, ring_pairwise, responses, centering='median')


# =====================================================================
# pseudolikelihood
# =====================================================================

class TestPseudolikelihood:

    def test_two_node_by_hand(self, two_node):
        # s = Λ Y = (-1, 1), α + s = (2, 8)
        unary, lam, Y = two_node
        expected = 16.0 + math.log1p(math.exp(-4.0)) + math.log1p(math.exp(-16.0))
        assert pseudolikelihood(unary, lam, Y) == pytest.approx(expected, rel=1e-12)

    @pytest.mark.parametrize("centering", ['none', 'onehalf', 'expectation'])
    @pytest.mark.parametrize("coding", [(-1, 1), (0, 1)])
    def test_matches_loops(self, unary, ring_pairwise, responses, centering, coding):
        alpha = unary.materialize()
        Y = make_coded(responses, coding)
        mu = centering_adjustment(alpha, centering, coding)
        expected = _loop_pseudolikelihood(alpha, ring_pairwise, Y, mu, *coding)
        result = pseudolikelihood(unary, ring_pairwise, responses, coding, centering)
        assert isinstance(result, float)
        assert result == pytest.approx(expected, rel=1e-10)

    def test_zero_pairwise_is_logistic_loss(self, unary, responses):
        """Without neighbours, (0, 1) coding gives the logistic negative log-likelihood."""
        alpha = unary.materialize()
        y = responses.astype(float)
        expected = float(np.sum(np.logaddexp(0.0, alpha) - y * alpha))
        result = pseudolikelihood(unary, np.zeros((6, 6)), responses, (0, 1))
        assert result == pytest.approx(expected, rel=1e-12)

    def test_positive(self, unary, ring_pairwise, responses):
        assert pseudolikelihood(unary, ring_pairwise, responses) > 0

    def test_sums_over_replicates(self, unary, ring_pairwise, responses):
        alpha = unary.materialize()
        per_replicate = [
            pseudolikelihood(alpha[:, j], ring_pairwise, responses[:, j], centering='expectation')
            for j in range(4)
        ]
        total = pseudolikelihood(unary, ring_pairwise, responses, centering='expectation')
        assert total == pytest.approx(sum(per_replicate), rel=1e-12)

    def test_sparse_equals_dense(self, unary, ring_pairwise, ring_pairwise_sparse, responses):
        assert pseudolikelihood(unary, ring_pairwise_sparse, responses) == pytest.approx(
            pseudolikelihood(unary, ring_pairwise, responses), rel=1e-12
        )

    def test_stable_for_large_alpha(self):
        alpha = np.array([800.0, -800.0])
        result = pseudolikelihood(alpha, np.zeros((2, 2)), np.array([True, False]))
        assert math.isfinite(result)
        assert result == pytest.approx(0.0, abs=1e-12)

    def test_numeric_responses_rejected(self, unary, ring_pairwise):
        with pytest.raises(ValidationError, match="boolean"):
            pseudolikelihood(unary, ring_pairwise, np.ones((6, 4)))
