"""
Dense 2-D matrix value type for the Hopfield network.

Every operation is shape-checked and returns a fresh Matrix; receivers are
never mutated. Storage is a float64 numpy array owned by the instance.
"""

import numpy as np
from typing import Callable, List, Optional, Sequence, Tuple


class ShapeError(ValueError):
    """Raised when operand shapes are incompatible for an operation."""


class Matrix:
    """
    Two-dimensional grid of real numbers.

    Attributes:
        height (int): Number of rows
        width (int): Number of columns
        data (np.ndarray): Shape (height, width) - element storage
    """

    def __init__(self, height: int, width: int,
                 data: Optional[Sequence[Sequence[float]]] = None):
        """
        Initialize a matrix, copying data when given, else zero-filled.

        Args:
            height: Number of rows
            width: Number of columns
            data: Optional rectangular nested sequence of height x width numbers
        """
        self.height = height
        self.width = width

        if data is None:
            self.data = np.zeros((height, width), dtype=float)
        else:
            self.data = np.array(data, dtype=float).reshape(height, width)

    @classmethod
    def zeros(cls, height: int, width: int) -> "Matrix":
        return cls(height, width)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    # Transforms

    def reshape(self, height: int, width: int) -> "Matrix":
        """
        Relabel the same row-major element sequence into a new shape.

        Args:
            height: Target number of rows
            width: Target number of columns

        Returns:
            Matrix: New matrix of shape (height, width)

        Raises:
            ShapeError: If height * width differs from the current element count
        """
        if height * width != self.height * self.width:
            raise ShapeError(
                f"Cannot reshape from ({self.height}, {self.width}) to ({height}, {width})"
            )

        return Matrix(height, width, self.data.ravel(order='C'))

    def transpose(self) -> "Matrix":
        """Return a width x height matrix with rows and columns swapped."""
        return Matrix(self.width, self.height, self.data.T)

    # Matrix-matrix operations

    def add(self, other: "Matrix") -> "Matrix":
        """
        Element-wise sum with a matrix of identical shape.

        Raises:
            ShapeError: If the shapes differ
        """
        if self.shape != other.shape:
            raise ShapeError(
                f"Matrices must be the same size to add them, got {self.shape} and {other.shape}"
            )

        return Matrix(self.height, self.width, self.data + other.data)

    def mul(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self @ other.

        result[i][k] = Σ_j self[i][j] * other[j][k]

        Returns:
            Matrix: Shape (self.height, other.width)

        Raises:
            ShapeError: If self.width != other.height
        """
        if self.width != other.height:
            raise ShapeError(
                f"Cannot multiply {self.shape} by {other.shape}: "
                f"width {self.width} does not match height {other.height}"
            )

        return Matrix(self.height, other.width, self.data @ other.data)

    # Element-wise operations

    def sub(self, num: float) -> "Matrix":
        """Subtract a scalar from every element."""
        return Matrix(self.height, self.width, self.data - num)

    def div(self, num: float) -> "Matrix":
        """
        Divide every element by a scalar.

        Division by zero is not guarded: results follow IEEE-754 float
        semantics (±inf for x/0, nan for 0/0).
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            result = self.data / float(num)
        return Matrix(self.height, self.width, result)

    def apply_activation(self, func: Callable[[float], float]) -> "Matrix":
        """
        Apply a scalar function to every element.

        Args:
            func: Callable mapping one number to another

        Returns:
            Matrix: New matrix of the same shape
        """
        result = [[func(float(x)) for x in row] for row in self.data]
        return Matrix(self.height, self.width, result)

    def with_zero_diagonal(self) -> "Matrix":
        """Return a copy of a square matrix with its diagonal set to zero."""
        if self.height != self.width:
            raise ShapeError(f"Diagonal is only defined for square matrices, got {self.shape}")

        result = self.data.copy()
        np.fill_diagonal(result, 0)
        return Matrix(self.height, self.width, result)

    # Queries

    def compare(self, other: "Matrix") -> bool:
        """
        Structural equality: same shape and exactly equal elements.

        No tolerance is applied.
        """
        if self.shape != other.shape:
            return False

        return bool(np.array_equal(self.data, other.data))

    def row(self, i: int) -> List[float]:
        return self.data[i].tolist()

    def total(self) -> float:
        """Sum of all elements."""
        return float(np.sum(self.data))

    def to_list(self) -> List[List[float]]:
        return self.data.tolist()

    def copy(self) -> "Matrix":
        return Matrix(self.height, self.width, self.data)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.compare(other)

    __hash__ = None

    def __repr__(self):
        return f"Matrix(height={self.height}, width={self.width}, data={self.to_list()})"
