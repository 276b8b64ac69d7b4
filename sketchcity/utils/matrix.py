"""4x4 transform matrices stored as 16 floats in a fixed linear layout."""
import math
from typing import Iterable, Optional

import numpy as np


class Matrix:
    """Immutable 4x4 matrix used with row vectors.

    ``data[j*4 + i]`` is the coefficient of input component ``j`` in output
    component ``i`` (see :meth:`Vector.transform`).
    """

    __slots__ = ('_data',)

    def __init__(self, data: Optional[Iterable[float]] = None):
        """Create a matrix; defaults to the identity.

        Args:
            data: 16 numbers in row-major order.

        Raises:
            ValueError: If ``data`` does not hold exactly 16 numbers.
        """
        if data is None:
            array = np.eye(4, dtype=float).reshape(16)
        else:
            array = np.asarray(list(data), dtype=float).reshape(-1)
            if array.size != 16:
                raise ValueError(f'Matrix needs 16 values, got {array.size}')
        array.setflags(write=False)
        self._data = array

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the 16 coefficients."""
        return self._data

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(self._data.tobytes())

    def __repr__(self) -> str:
        return f'Matrix({self._data.reshape(4, 4).tolist()})'

    def allclose(self, other: 'Matrix', tol: float = 1e-9) -> bool:
        """Compare coefficients within an absolute tolerance."""
        return bool(np.allclose(self._data, other._data, atol=tol, rtol=0.0))

    def multiply(self, other: 'Matrix') -> 'Matrix':
        """Matrix product accumulating ``result[x + col] += other[i + col] * self[x + i*4]``.

        With 4x4 views this is ``other @ self``, so transforming by the product
        applies ``other`` first and ``self`` second.

        Args:
            other: Right operand.

        Returns:
            New product matrix.
        """
        a = self._data.reshape(4, 4)
        b = other._data.reshape(4, 4)
        return Matrix((b @ a).reshape(16))

    def __matmul__(self, other: 'Matrix') -> 'Matrix':
        return self.multiply(other)

    @classmethod
    def identity(cls) -> 'Matrix':
        """Return the 4x4 identity."""
        return cls()

    @classmethod
    def rotation_x(cls, angle: float) -> 'Matrix':
        """Rotation about the x axis (camera pitch).

        Args:
            angle: Angle in radians.

        Returns:
            Rotation matrix.
        """
        data = np.eye(4, dtype=float).reshape(16)
        data[5] = math.cos(angle)
        data[6] = -math.sin(angle)
        data[9] = math.sin(angle)
        data[10] = math.cos(angle)
        return cls(data)

    @classmethod
    def clip(cls, fov: float, aspect_ratio: float, near: float, far: float) -> 'Matrix':
        """Perspective projection matrix for the row-vector convention.

        After transforming a camera-space point the resulting ``w`` equals its
        view depth, which serves as the perspective divisor.

        Args:
            fov: Vertical field of view in radians.
            aspect_ratio: Viewport width divided by height.
            near: Near plane distance.
            far: Far plane distance.

        Returns:
            Clip matrix.
        """
        f = 1.0 / math.tan(fov * 0.5)
        data = np.zeros(16, dtype=float)
        data[0] = f / aspect_ratio
        data[5] = f
        data[10] = far / (far - near)
        data[11] = 1.0
        data[14] = -((far * near) / (far - near))
        return cls(data)
