"""
Visualization tools for the Hopfield network.

Renders stored patterns, recall comparisons and energy trajectories with
matplotlib. Lives outside the core package: drawing is a caller concern.
"""

from visualization.pattern_plots import (
    plot_energy_trajectory,
    plot_patterns,
    plot_recall
)

__all__ = [
    'plot_patterns',
    'plot_recall',
    'plot_energy_trajectory',
]
