"""Hebbian weight construction for the Hopfield network."""

from hopmem.learning.hebbian import compute_weights, mean_activation

__all__ = ["compute_weights", "mean_activation"]
