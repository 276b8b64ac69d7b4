"""Mathematical utility functions for homogeneous vector and matrix operations."""

from typing import Iterable

from sketchcity.utils.matrix import Matrix
from sketchcity.utils.vector import Vector


class MathUtils:
    """Collection of pure vector/matrix helpers; every call returns a fresh value."""

    @staticmethod
    def scale(v: Vector, k: float) -> Vector:
        """Scale x, y, z by ``k``; w is dropped.

        Args:
            v: Vector to scale.
            k: Scalar.

        Returns:
            A new direction vector.
        """
        return v.scale(k)

    @staticmethod
    def transform(v: Vector, m: Matrix) -> Vector:
        """Row vector times matrix.

        Args:
            v: Input vector, w included.
            m: Transform matrix.

        Returns:
            The transformed vector.
        """
        return v.transform(m)

    @staticmethod
    def add(v1: Vector, v2: Vector) -> Vector:
        """Add x, y, z component-wise."""
        return v1 + v2

    @staticmethod
    def subtract(v1: Vector, v2: Vector) -> Vector:
        """Subtract v2 from v1 over x, y, z."""
        return v1 - v2

    @staticmethod
    def negate(v: Vector) -> Vector:
        """Negate x, y, z."""
        return -v

    @staticmethod
    def matrix_identity() -> Matrix:
        """Return a new 4x4 identity matrix."""
        return Matrix.identity()

    @staticmethod
    def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
        """Multiply two matrices with the row-vector convention of :meth:`transform`."""
        return a.multiply(b)

    @staticmethod
    def distance(v1: Vector, v2: Vector) -> float:
        """Euclidean distance over x, y, z."""
        return v1.distance(v2)

    @staticmethod
    def vertex_seed(vertices: Iterable[Vector]) -> float:
        """Sum ``x + 100y + 100000z`` over vertices.

        Identical geometry always yields the same value, which keeps the
        hand-drawn jitter stable between renders.

        Args:
            vertices: Pre-projection vertices of a shape.

        Returns:
            The accumulated seed.
        """
        return sum(v.x + v.y * 100 + v.z * 100000 for v in vertices)
