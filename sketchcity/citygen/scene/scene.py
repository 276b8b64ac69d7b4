"""Scene module: the ordered sink every generator writes shapes into."""
from typing import Iterator, List, Optional, Sequence

from sketchcity.citygen.dataclass import Shape
from sketchcity.utils.vector import Vector


class Scene:
    """Ordered collection of drawable shapes plus viewport dimensions.

    Insertion order only matters as a tie-break before depth sorting.
    """

    def __init__(self, viewport_width: float, viewport_height: float):
        """Initialize an empty scene.

        Args:
            viewport_width: Width of the target surface.
            viewport_height: Height of the target surface.
        """
        if viewport_width <= 0 or viewport_height <= 0:
            raise ValueError(f'Invalid viewport {viewport_width}x{viewport_height}')
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.shapes: List[Shape] = []

    @classmethod
    def from_config(cls, config) -> 'Scene':
        """Create an empty scene sized from ``render.viewport``."""
        return cls(config['render.viewport.width'], config['render.viewport.height'])

    @property
    def aspect_ratio(self) -> float:
        """Viewport width over height."""
        return self.viewport_width / self.viewport_height

    def add_shape(self, vertices: Sequence[Vector], fill: Optional[str] = None, stroke: bool = True) -> Shape:
        """Append a shape.

        Args:
            vertices: Ordered vertices (at least 2).
            fill: Fill color, or None for a stroke-only polyline.
            stroke: Whether to outline the shape.

        Returns:
            The created shape.
        """
        shape = Shape(tuple(vertices), fill, stroke)
        self.shapes.append(shape)
        return shape

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)
