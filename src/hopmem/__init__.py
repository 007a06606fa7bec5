"""
hopmem: A Hopfield associative memory.

A fully-connected binary network that stores bipolar patterns in a weight
matrix and recalls the closest stored pattern from a noisy or partial input
by energy minimization:

- Learning: bias-corrected Hebbian rule over mean-centered patterns
- Recall: synchronous sign updates until a fixed point or an iteration cap
- Energy: E(s) = -(1/2) s W sᵀ decreases toward stored attractors

Patterns are fixed-length vectors over {-1, +1}; callers convert drawings or
other representations to and from this encoding (see hopmem.generators).
"""

__version__ = "0.1.0"

from hopmem.linalg import Matrix, ShapeError
from hopmem.network import HopfieldNetwork, InvalidPatternError, RecallResult

__all__ = [
    "HopfieldNetwork",
    "InvalidPatternError",
    "Matrix",
    "RecallResult",
    "ShapeError",
]
