"""
Hopfield Network: Main entry point for the associative memory.

Stores bipolar patterns in a symmetric weight matrix through bias-corrected
Hebbian learning and recalls the closest stored pattern from a noisy or
partial input by iterating synchronous updates to a fixed point.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Union

import numpy as np

from hopmem.dynamics import network_energy, synchronous_update
from hopmem.learning import compute_weights
from hopmem.linalg import Matrix, ShapeError

logger = logging.getLogger(__name__)

PatternLike = Union[Matrix, Sequence[float]]


class InvalidPatternError(ValueError):
    """Raised when a pattern has the wrong length or non-bipolar entries."""


def as_pattern(pattern: PatternLike, neurons: int) -> Matrix:
    """
    Validate a pattern and return it as a fresh (1, neurons) Matrix.

    Accepts a Matrix of any shape holding `neurons` elements (reshaped
    row-major) or a flat sequence of `neurons` numbers.

    Args:
        pattern: Candidate pattern
        neurons: Expected pattern length N

    Returns:
        Matrix: Shape (1, neurons), entries in {-1, +1}

    Raises:
        InvalidPatternError: If the length is wrong or an entry is not -1 or +1
    """
    if isinstance(pattern, Matrix):
        try:
            matrix = pattern.reshape(1, neurons)
        except ShapeError as exc:
            raise InvalidPatternError(
                f"Pattern of shape {pattern.shape} does not hold {neurons} elements"
            ) from exc
    else:
        try:
            raw = np.asarray(pattern)
        except (TypeError, ValueError) as exc:
            raise InvalidPatternError(f"Pattern is not a flat numeric sequence: {exc}") from exc

        # Only signed/unsigned integers and floats; rejects bool, str and object
        if raw.dtype.kind not in 'iuf':
            raise InvalidPatternError(
                f"Pattern entries must be numeric, got dtype {raw.dtype}"
            )

        values = raw.astype(float)
        if values.ndim != 1 or values.size != neurons:
            raise InvalidPatternError(
                f"Expected a flat pattern of length {neurons}, got shape {values.shape}"
            )
        matrix = Matrix(1, neurons, [values])

    if not np.all(np.isin(matrix.data, (-1.0, 1.0))):
        raise InvalidPatternError("Pattern entries must be -1 or +1")

    return matrix


def _is_count(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


@dataclass
class RecallResult:
    """
    Outcome of a recall.

    Attributes:
        state: Shape (1, N) - final prediction
        iterations: Number of synchronous updates performed
        converged: Whether a fixed point was reached before the cap
        energy_history: Energy of the input followed by each iterate
    """
    state: Matrix
    iterations: int
    converged: bool
    energy_history: List[float] = field(default_factory=list)


class HopfieldNetwork:
    """
    Fully-connected binary Hopfield network.

    Attributes:
        neurons: Pattern length N
        max_iterations: Cap on synchronous updates during recall
        training_patterns: Stored patterns in training order
        weights: Shape (N, N) - recomputed from scratch on every train call
    """

    def __init__(self, neurons: int, max_iterations: int = 100):
        """
        Initialize an untrained network with zero weights.

        Args:
            neurons: Number of neurons (pattern length)
            max_iterations: Maximum synchronous updates per recall
        """
        if not _is_count(neurons) or neurons < 1:
            raise ValueError(f"neurons must be a positive integer, got {neurons!r}")
        if not _is_count(max_iterations) or max_iterations < 1:
            raise ValueError(f"max_iterations must be an integer of at least 1, got {max_iterations!r}")

        self.neurons = int(neurons)
        self.max_iterations = int(max_iterations)
        self.training_patterns: List[Matrix] = []
        self.weights = Matrix.zeros(self.neurons, self.neurons)

    def train(self, pattern: PatternLike) -> None:
        """
        Store a pattern and recompute the weight matrix from all patterns.

        Args:
            pattern: Bipolar pattern of length N
        """
        self.training_patterns.append(as_pattern(pattern, self.neurons))
        self.weights = compute_weights(self.training_patterns, self.neurons)

        logger.debug("Trained pattern %d on %d neurons",
                     len(self.training_patterns), self.neurons)

    def recall(self, pattern: PatternLike) -> RecallResult:
        """
        Iterate synchronous updates from `pattern` until a fixed point or the cap.

        Each new iterate is compared with the state it was computed from,
        starting with the input itself.

        Args:
            pattern: Bipolar pattern of length N

        Returns:
            RecallResult: Final state, iteration count and convergence flag
        """
        current = as_pattern(pattern, self.neurons)
        energy_history = [network_energy(current, self.weights)]
        converged = False
        iterations = 0

        while iterations < self.max_iterations:
            next_state = synchronous_update(current, self.weights)
            iterations += 1
            energy_history.append(network_energy(next_state, self.weights))

            if next_state.compare(current):
                converged = True
                current = next_state
                break

            current = next_state

        if converged:
            logger.debug("Recall converged after %d iteration(s)", iterations)
        else:
            logger.debug("Recall stopped at iteration cap (%d) without converging",
                         self.max_iterations)

        return RecallResult(
            state=current,
            iterations=iterations,
            converged=converged,
            energy_history=energy_history
        )

    def predict(self, pattern: PatternLike) -> Matrix:
        """
        Recall the stored pattern closest to `pattern`.

        Args:
            pattern: Bipolar pattern of length N

        Returns:
            Matrix: Shape (1, N) - entries in {-1, +1}
        """
        return self.recall(pattern).state

    def energy(self, pattern: PatternLike) -> float:
        """Energy of a bipolar state under the current weights."""
        return network_energy(as_pattern(pattern, self.neurons), self.weights)

    def stored_patterns(self) -> List[Matrix]:
        """Copies of the training patterns in training order."""
        return [p.copy() for p in self.training_patterns]

    def __len__(self):
        return len(self.training_patterns)

    def __repr__(self):
        return (f"HopfieldNetwork(neurons={self.neurons}, "
                f"patterns={len(self.training_patterns)})")
