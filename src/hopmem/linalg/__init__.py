"""Dense matrix value type used by the Hopfield network."""

from hopmem.linalg.matrix import Matrix, ShapeError

__all__ = ["Matrix", "ShapeError"]
