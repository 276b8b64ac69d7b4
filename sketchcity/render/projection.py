"""Per-vertex projection from world space to screen coordinates."""
from dataclasses import dataclass
from typing import List, Sequence, Union

from sketchcity.citygen.scene import Scene
from sketchcity.render.camera import Camera
from sketchcity.utils.vector import Vector


@dataclass(frozen=True)
class Projected:
    """Screen-space position of a vertex in front of the camera."""
    x: float
    y: float

    def as_tuple(self):
        return (self.x, self.y)


class Culled:
    """Marker for a vertex that cannot be projected (at or behind the camera)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'CULLED'


CULLED = Culled()

ProjectionResult = Union[Projected, Culled]


class Projector:
    """Projects vertices through camera translation, pitch and the clip matrix."""

    def __init__(self, camera: Camera, scene: Scene):
        """Initialize the projector.

        Args:
            camera: Camera parameters.
            scene: Scene whose viewport is the target surface.
        """
        self.camera = camera
        self.viewport_width = scene.viewport_width
        self.viewport_height = scene.viewport_height
        self.rotation = camera.rotation_matrix()
        self.clip = camera.clip_matrix(scene.aspect_ratio)

    def to_clip_space(self, v: Vector) -> Vector:
        """Translate, rotate and apply the clip matrix, keeping the resulting w."""
        return (v + self.camera.position).transform(self.rotation).transform(self.clip)

    def project(self, v: Vector) -> ProjectionResult:
        """Project one vertex.

        The perspective divide is fused into the viewport mapping. A
        non-positive ``w`` means the vertex is not in front of the camera.

        Args:
            v: World-space vertex.

        Returns:
            ``Projected(x, y)`` or ``CULLED``.
        """
        p = self.to_clip_space(v)
        if p.w <= 0:
            return CULLED

        width = self.viewport_width
        height = self.viewport_height
        return Projected(
            (p.x * width) / (2 * p.w) + width * 0.5,
            -(p.y * height) / (2 * p.w) + height * 0.5,
        )

    def project_all(self, vertices: Sequence[Vector]) -> List[ProjectionResult]:
        """Project a vertex list in order."""
        return [self.project(v) for v in vertices]
