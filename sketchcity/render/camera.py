"""Fixed camera definition and the matrices derived from it."""
import math
from dataclasses import dataclass

from sketchcity.utils.matrix import Matrix
from sketchcity.utils.vector import Vector


@dataclass(frozen=True)
class Camera:
    """Fixed pitched perspective camera.

    ``position`` is added to every vertex before rotation, so it is the
    negated eye location in world space.

    Attributes:
        position: Translation applied to world vertices.
        pitch: Rotation about the x axis in radians.
        fov: Vertical field of view in radians.
        near: Near plane distance.
        far: Far plane distance.
    """
    position: Vector
    pitch: float
    fov: float
    near: float
    far: float

    @classmethod
    def from_config(cls, config) -> 'Camera':
        """Build a camera from the ``render.camera`` section.

        Pitch is configured as a fraction of pi and fov in degrees.
        """
        x, y, z = config['render.camera.position']
        return cls(
            position=Vector(x, y, z),
            pitch=math.pi * config['render.camera.pitch'],
            fov=math.radians(config['render.camera.fov']),
            near=config['render.camera.near'],
            far=config['render.camera.far'],
        )

    @property
    def eye(self) -> Vector:
        """Camera location in world space."""
        return -self.position

    def rotation_matrix(self) -> Matrix:
        """Pitch rotation applied after translation."""
        return Matrix.rotation_x(self.pitch)

    def clip_matrix(self, aspect_ratio: float) -> Matrix:
        """Perspective matrix for the given viewport aspect ratio."""
        return Matrix.clip(self.fov, aspect_ratio, self.near, self.far)
