"""
Bias-corrected Hebbian learning for the Hopfield network.

Weights are derived from the complete set of stored patterns:

    rho = (1 / (P·N)) Σ_μ Σ_i ξ_i^μ
    W   = (1/N) Σ_μ (ξ^μ - rho)ᵀ (ξ^μ - rho),   W_ii = 0

Subtracting the mean activation rho keeps the rule usable when stored
patterns are not balanced between -1 and +1.
"""

import logging
from functools import reduce
from typing import Sequence

from hopmem.linalg.matrix import Matrix

logger = logging.getLogger(__name__)


def mean_activation(patterns: Sequence[Matrix], neurons: int) -> float:
    """
    Compute mean activation rho across all stored patterns.

    Sums the element-wise sum of every pattern and divides by the number of
    entries seen (len(patterns) * neurons).

    Args:
        patterns: Stored patterns, each shape (1, neurons)
        neurons: Pattern length N

    Returns:
        float: Mean activation, 0.0 when no patterns are stored
    """
    if len(patterns) == 0:
        return 0.0

    summed = reduce(lambda a, b: a.add(b), patterns)
    return summed.total() / (len(patterns) * neurons)


def compute_weights(patterns: Sequence[Matrix], neurons: int) -> Matrix:
    """
    Build the weight matrix from scratch for a list of patterns.

    Args:
        patterns: Stored patterns in training order, each shape (1, neurons)
        neurons: Pattern length N

    Returns:
        Matrix: Shape (N, N) - symmetric with zero diagonal
    """
    weights = Matrix.zeros(neurons, neurons)

    if len(patterns) == 0:
        return weights

    rho = mean_activation(patterns, neurons)

    for pattern in patterns:
        centered = pattern.sub(rho)
        # Outer product (N, 1) @ (1, N)
        weights = weights.add(centered.transpose().mul(centered))

    weights = weights.div(neurons)

    logger.debug("Computed weights for %d pattern(s), N=%d, rho=%.4f",
                 len(patterns), neurons, rho)

    return weights.with_zero_diagonal()
