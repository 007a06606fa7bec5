"""
Utility functions for the Hopfield network.

Includes recall metrics, symmetry checks and capacity estimates.
"""

import math
import numpy as np
from typing import Dict, TYPE_CHECKING

from hopmem.linalg import Matrix, ShapeError

if TYPE_CHECKING:
    from hopmem.network import HopfieldNetwork

# Pattern-to-neuron ratio above which recall of random patterns breaks down
CAPACITY_RATIO = 0.138


def hamming_distance(a: Matrix, b: Matrix) -> int:
    """Number of positions at which two equally shaped patterns differ."""
    if a.shape != b.shape:
        raise ShapeError(f"Cannot compare patterns of shape {a.shape} and {b.shape}")
    return int(np.sum(a.data != b.data))


def overlap(a: Matrix, b: Matrix) -> float:
    """
    Normalized overlap m = (1/N) Σ a_i b_i.

    1.0 for identical bipolar patterns, -1.0 for exact inverses.
    """
    if a.shape != b.shape:
        raise ShapeError(f"Cannot compare patterns of shape {a.shape} and {b.shape}")
    return float(np.sum(a.data * b.data)) / (a.height * a.width)


def is_symmetric(matrix: Matrix) -> bool:
    return matrix.compare(matrix.transpose())


def estimate_capacity(neurons: int) -> int:
    """
    Approximate number of random patterns storable for reliable recall.

    Args:
        neurons: Number of neurons N

    Returns:
        int: floor(0.138 * N)
    """
    return int(math.floor(CAPACITY_RATIO * neurons))


def compute_recall_metrics(network: "HopfieldNetwork", pattern: Matrix,
                           target: Matrix) -> Dict[str, float]:
    """
    Recall from `pattern` and score the result against `target`.

    Args:
        network: Trained network
        pattern: Noisy or partial input
        target: Pattern the recall is expected to reach

    Returns:
        dict: hamming_before, hamming_after, overlap, iterations,
            converged, energy_initial, energy_final
    """
    result = network.recall(pattern)
    source = pattern.reshape(1, network.neurons)
    expected = target.reshape(1, network.neurons)

    return {
        'hamming_before': hamming_distance(source, expected),
        'hamming_after': hamming_distance(result.state, expected),
        'overlap': overlap(result.state, expected),
        'iterations': result.iterations,
        'converged': result.converged,
        'energy_initial': result.energy_history[0],
        'energy_final': result.energy_history[-1]
    }
