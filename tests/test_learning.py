"""
Unit tests for Hebbian learning and update dynamics.

Verifies rho, weight construction, sign tie-breaking and energy.
"""

import numpy as np
import pytest
from hopmem.dynamics import network_energy, sign, synchronous_update
from hopmem.learning import compute_weights, mean_activation
from hopmem.linalg import Matrix
from hopmem.utils import is_symmetric


def _pattern(values):
    return Matrix(1, len(values), [values])


class TestMeanActivation:
    """Test the bias-correction term rho."""

    def test_balanced_pattern_zero(self):
        assert mean_activation([_pattern([1, 1, -1, -1])], 4) == 0.0

    def test_multiple_patterns(self):
        """Test rho = sum of all entries / (P * N)."""
        patterns = [_pattern([1, 1, 1, 1]), _pattern([1, -1, 1, -1])]

        assert mean_activation(patterns, 4) == pytest.approx(0.5)

    def test_no_patterns(self):
        assert mean_activation([], 4) == 0.0


class TestComputeWeights:
    """Test weight matrix construction."""

    def test_no_patterns_zero_weights(self):
        w = compute_weights([], 3)
        assert w.compare(Matrix(3, 3))

    def test_single_pattern_outer_product(self):
        """Test W = PᵀP / N with zero diagonal for a balanced pattern."""
        p = [1, 1, -1, -1]
        w = compute_weights([_pattern(p)], 4)

        expected = np.outer(p, p) / 4
        np.fill_diagonal(expected, 0)
        assert np.allclose(w.data, expected)

    def test_symmetric_zero_diagonal(self):
        """Test invariants on random unbalanced patterns."""
        rng = np.random.RandomState(7)
        patterns = [_pattern(rng.choice([-1, 1], size=9)) for _ in range(3)]

        w = compute_weights(patterns, 9)

        assert is_symmetric(w)
        assert np.all(np.diag(w.data) == 0)

    def test_bias_correction(self):
        """Test that patterns are centered on rho before the outer product."""
        patterns = [_pattern([1, 1, 1, 1]), _pattern([1, -1, 1, -1])]
        rho = 0.5

        expected = np.zeros((4, 4))
        for p in patterns:
            c = p.data[0] - rho
            expected += np.outer(c, c)
        expected /= 4
        np.fill_diagonal(expected, 0)

        w = compute_weights(patterns, 4)
        assert np.allclose(w.data, expected)

    def test_recomputation_is_order_independent(self):
        a = _pattern([1, -1, -1, 1])
        b = _pattern([1, 1, 1, -1])

        assert np.allclose(compute_weights([a, b], 4).data,
                           compute_weights([b, a], 4).data)


class TestDynamics:
    """Test sign activation, synchronous update and energy."""

    def test_sign_tie_break(self):
        """Test that exactly zero resolves to -1."""
        assert sign(0.0) == -1.0
        assert sign(-0.0) == -1.0
        assert sign(1e-9) == 1.0
        assert sign(-3.0) == -1.0

    def test_synchronous_update_zero_weights(self):
        state = _pattern([1, -1, 1])
        nxt = synchronous_update(state, Matrix(3, 3))

        assert nxt.to_list() == [[-1, -1, -1]]

    def test_stored_pattern_energy(self):
        """Test E(P) = -(1/2) Σ_{i≠j} W_ij P_i P_j for a single stored pattern."""
        p = _pattern([1, 1, -1, -1])
        w = compute_weights([p], 4)

        assert network_energy(p, w) == pytest.approx(-1.5)

    def test_noisy_pattern_has_higher_energy(self):
        p = _pattern([1, 1, -1, -1])
        w = compute_weights([p], 4)

        assert network_energy(_pattern([1, 1, -1, 1]), w) > network_energy(p, w)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
