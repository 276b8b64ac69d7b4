"""Homogeneous three-dimensional vector utilities module."""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Vector:
    """Immutable point or direction in homogeneous 3D space.

    ``w`` stays at 1 for affine points; it only takes another value as an
    intermediate projection result.

    Attributes:
        x: X coordinate.
        y: Y coordinate (up).
        z: Z coordinate (depth, away from the camera).
        w: Homogeneous coordinate.
    """

    x: float
    y: float
    z: float
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        """Iterate over x, y, z, w."""
        return iter((self.x, self.y, self.z, self.w))

    def scale(self, k: float) -> 'Vector':
        """Multiply x, y, z by a scalar; the result is a direction so w is reset.

        Args:
            k: Scalar factor.

        Returns:
            Scaled vector.
        """
        return Vector(self.x * k, self.y * k, self.z * k)

    def transform(self, m) -> 'Vector':
        """Combine this vector as a row with a 4x4 matrix.

        ``result_i = sum_j v_j * m[j*4 + i]``, where x, y, z, w map to rows 0..3.

        Args:
            m: A :class:`~sketchcity.utils.matrix.Matrix`.

        Returns:
            Transformed vector including the resulting w.
        """
        d = m.data
        return Vector(
            self.x * d[0] + self.y * d[4] + self.z * d[8] + self.w * d[12],
            self.x * d[1] + self.y * d[5] + self.z * d[9] + self.w * d[13],
            self.x * d[2] + self.y * d[6] + self.z * d[10] + self.w * d[14],
            self.x * d[3] + self.y * d[7] + self.z * d[11] + self.w * d[15],
        )

    def __add__(self, other: 'Vector') -> 'Vector':
        """Component-wise addition of x, y, z."""
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector') -> 'Vector':
        """Component-wise subtraction of x, y, z."""
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Vector':
        """Negate x, y, z."""
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other) -> 'Vector':
        """Scale by a number or transform by a matrix.

        Args:
            other: Scalar or Matrix.

        Returns:
            The scaled or transformed vector.
        """
        if isinstance(other, Real):
            return self.scale(other)
        return self.transform(other)

    def distance(self, other: 'Vector') -> float:
        """Euclidean distance to another vector over x, y, z.

        Args:
            other: Another vector.

        Returns:
            Distance between the two vectors.
        """
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2)

    def to_dict(self):
        """Convert the vector to dictionary representation."""
        return {'x': self.x, 'y': self.y, 'z': self.z}
