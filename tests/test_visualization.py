"""
Smoke tests for pattern visualization.
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest
from hopmem import HopfieldNetwork
from hopmem.generators import pattern_from_grid
from visualization import plot_energy_trajectory, plot_patterns, plot_recall


@pytest.fixture
def trained():
    cross = pattern_from_grid([[True, False, True],
                               [False, True, False],
                               [True, False, True]])
    net = HopfieldNetwork(9)
    net.train(cross)
    return net, cross


class TestPlots:
    """Test that plots build figures without a display."""

    def test_plot_patterns(self, trained):
        net, _ = trained
        fig = plot_patterns(net.stored_patterns(), 3, 3)

        assert len(fig.axes) == 1
        plt.close(fig)

    def test_plot_recall_with_target(self, trained):
        net, cross = trained
        result = net.recall(cross)
        fig = plot_recall(cross, result, 3, 3, target=cross)

        assert len(fig.axes) == 3
        plt.close(fig)

    def test_plot_energy_trajectory_saves(self, trained, tmp_path):
        net, cross = trained
        result = net.recall(cross)
        path = tmp_path / "energy.png"

        fig = plot_energy_trajectory(result.energy_history, save_path=str(path))

        assert path.exists()
        plt.close(fig)
