"""
Update dynamics for the Hopfield network.

Synchronous update: every neuron is recomputed from the previous full state,

    s(t+1) = sign(s(t) W)

Energy of a state:

    E(s) = -(1/2) s W sᵀ
"""

from hopmem.linalg.matrix import Matrix


def sign(x: float) -> float:
    """
    Bipolar threshold activation.

    Ties at exactly 0 resolve to -1.
    """
    return -1.0 if x <= 0 else 1.0


def synchronous_update(state: Matrix, weights: Matrix) -> Matrix:
    """
    Apply one synchronous update step.

    Args:
        state: Shape (1, N) - current bipolar state
        weights: Shape (N, N) - weight matrix

    Returns:
        Matrix: Shape (1, N) - next state, entries in {-1, +1}
    """
    return state.mul(weights).apply_activation(sign)


def network_energy(state: Matrix, weights: Matrix) -> float:
    """
    Compute Hopfield energy E(s) = -(1/2) s W sᵀ.

    Stored patterns sit in local minima of this function.

    Args:
        state: Shape (1, N) - bipolar state
        weights: Shape (N, N) - symmetric weight matrix

    Returns:
        float: Energy of the state
    """
    quadratic = state.mul(weights).mul(state.transpose())
    return -0.5 * quadratic.total()
