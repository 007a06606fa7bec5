"""Synchronous update dynamics and energy for the Hopfield network."""

from hopmem.dynamics.updates import network_energy, sign, synchronous_update

__all__ = [
    "sign",
    "synchronous_update",
    "network_energy",
]
