"""
Pattern generators for the Hopfield network.

Provides random bipolar patterns, noisy copies of stored patterns, and
conversion between painted drawing grids and bipolar vectors. A painted
(black) cell maps to -1 and a blank (white) cell to +1.
"""

import numpy as np
from typing import Iterable, List, Optional, Sequence

from hopmem.linalg import Matrix, ShapeError


def _resolve_rng(rng: Optional[np.random.RandomState],
                 random_seed: Optional[int]) -> np.random.RandomState:
    if rng is not None:
        return rng
    return np.random.RandomState(random_seed)


def random_pattern(neurons: int, rng: Optional[np.random.RandomState] = None,
                   random_seed: Optional[int] = None) -> Matrix:
    """
    Sample a uniformly random bipolar pattern.

    Args:
        neurons: Pattern length N
        rng: Optional random state to draw from
        random_seed: Seed used when rng is not given

    Returns:
        Matrix: Shape (1, N), entries in {-1, +1}
    """
    rng = _resolve_rng(rng, random_seed)
    values = rng.choice([-1.0, 1.0], size=neurons)
    return Matrix(1, neurons, [values])


def flip_bits(pattern: Matrix, indices: Iterable[int]) -> Matrix:
    """Return a copy of a (1, N) pattern with the given positions negated."""
    values = np.array(pattern.row(0))
    for i in indices:
        values[i] = -values[i]
    return Matrix(1, pattern.width, [values])


def corrupt_pattern(pattern: Matrix, num_flips: int,
                    rng: Optional[np.random.RandomState] = None,
                    random_seed: Optional[int] = None) -> Matrix:
    """
    Flip `num_flips` distinct, randomly chosen positions of a pattern.

    Args:
        pattern: Shape (1, N) - source pattern
        num_flips: Number of positions to flip, in [0, N]
        rng: Optional random state to draw from
        random_seed: Seed used when rng is not given

    Returns:
        Matrix: Noisy copy of the pattern
    """
    if num_flips < 0 or num_flips > pattern.width:
        raise ValueError(f"num_flips must be in [0, {pattern.width}], got {num_flips}")

    rng = _resolve_rng(rng, random_seed)
    indices = rng.choice(pattern.width, size=num_flips, replace=False)
    return flip_bits(pattern, indices.tolist())


def pattern_from_grid(grid: Sequence[Sequence[bool]]) -> Matrix:
    """
    Flatten a drawing grid row-major into a bipolar pattern.

    Args:
        grid: Rows of cells, truthy where the cell is painted

    Returns:
        Matrix: Shape (1, H*W) - painted cells are -1, blank cells +1
    """
    cells = np.asarray(grid, dtype=bool)
    if cells.ndim != 2:
        raise ShapeError(f"Expected a 2-D grid, got {cells.ndim} dimension(s)")

    values = np.where(cells.ravel(), -1.0, 1.0)
    return Matrix(1, values.size, [values])


def grid_from_pattern(pattern: Matrix, height: int, width: int) -> List[List[bool]]:
    """
    Unflatten a bipolar pattern into a painted-cell grid.

    Args:
        pattern: Pattern holding height * width entries
        height: Grid rows
        width: Grid columns

    Returns:
        list: height rows of width booleans, True where the entry is -1
    """
    cells = pattern.reshape(height, width)
    return (cells.data < 0).tolist()
