"""
Pattern visualization for the Hopfield network.

Renders bipolar patterns as grids (blank cells white, painted cells black),
side-by-side recall comparisons, and the energy trajectory of a recall.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import List, Optional, Sequence

from hopmem import Matrix, RecallResult


def _draw_pattern(ax, pattern: Matrix, height: int, width: int, title: str = ""):
    cells = pattern.reshape(height, width).data
    ax.imshow(cells, cmap='gray', vmin=-1, vmax=1, interpolation='nearest')
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title, fontsize=10)


def plot_patterns(patterns: Sequence[Matrix], height: int, width: int,
                  title: str = "Stored Patterns",
                  figsize: Optional[tuple] = None,
                  save_path: Optional[str] = None):
    """
    Plot a row of patterns as grids.

    Args:
        patterns: Patterns holding height * width entries each
        height: Grid rows
        width: Grid columns
        title: Figure title
        figsize: Figure size, scaled to the pattern count by default
        save_path: Optional path to save figure
    """
    count = max(len(patterns), 1)
    figsize = figsize or (2 * count, 2.4)
    fig, axes = plt.subplots(1, count, figsize=figsize, squeeze=False)

    for i, ax in enumerate(axes[0]):
        if i < len(patterns):
            _draw_pattern(ax, patterns[i], height, width, f"#{i}")
        else:
            ax.axis('off')

    fig.suptitle(title, fontsize=12, fontweight='bold')
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_recall(noisy: Matrix, result: RecallResult, height: int, width: int,
                target: Optional[Matrix] = None,
                figsize: tuple = (8, 3),
                save_path: Optional[str] = None):
    """
    Plot input, recalled state and (optionally) the expected pattern.

    Args:
        noisy: Input given to recall
        result: Recall outcome
        height: Grid rows
        width: Grid columns
        target: Optional expected pattern
        figsize: Figure size
        save_path: Optional path to save figure
    """
    panels = [(noisy, "Input")]
    status = "converged" if result.converged else "capped"
    panels.append((result.state, f"Recalled ({result.iterations} it, {status})"))
    if target is not None:
        panels.append((target, "Target"))

    fig, axes = plt.subplots(1, len(panels), figsize=figsize, squeeze=False)
    for ax, (pattern, label) in zip(axes[0], panels):
        _draw_pattern(ax, pattern, height, width, label)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_energy_trajectory(energy_history: List[float],
                           title: str = "Recall Energy",
                           figsize: tuple = (8, 5),
                           save_path: Optional[str] = None):
    """
    Plot energy of each recall iterate (matplotlib).

    Args:
        energy_history: Energy of the input followed by each iterate
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    steps = np.arange(len(energy_history))

    ax.plot(steps, energy_history, marker='o', linewidth=2, color='#2E86AB')
    ax.set_xlabel('Iteration', fontsize=12)
    ax.set_ylabel('Energy $E(s)$', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)

    ax.annotate(f'Final: {energy_history[-1]:.2f}',
                xy=(len(energy_history) - 1, energy_history[-1]),
                xytext=(-80, 20), textcoords='offset points',
                fontsize=10, color='red',
                bbox=dict(boxstyle='round,pad=0.5', facecolor='white', alpha=0.8))

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig
