"""Module for data classes defining the structures shared by generation and rendering."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple

from sketchcity.utils.vector import Vector


@dataclass(frozen=True)
class Palette:
    """Flat fill tones used to fake directional shading."""
    background: str = '#F1ECEF'
    light: str = '#F1ECEF'
    dark: str = '#D3CFD1'
    shadow: str = 'rgba(0, 0, 0, 0.2)'

    @classmethod
    def from_config(cls, config) -> 'Palette':
        """Build a palette from the ``render.colors`` config section."""
        return cls(
            background=config['render.colors.background'],
            light=config['render.colors.light'],
            dark=config['render.colors.dark'],
            shadow=config['render.colors.shadow'],
        )

    def to_dict(self):
        """Convert the palette to dictionary representation."""
        return {
            'background': self.background,
            'light': self.light,
            'dark': self.dark,
            'shadow': self.shadow,
        }


@dataclass
class Shape:
    """One drawable primitive: a filled polygon or a stroke-only polyline.

    ``sort_key`` is derived by the render pipeline and is only meaningful after
    a depth-sort pass over the current scene.
    """
    vertices: Tuple[Vector, ...]
    fill: Optional[str] = None
    stroke: bool = True
    sort_key: float = 0.0

    def __post_init__(self):
        """Freeze the vertex list and reject degenerate geometry.

        Raises:
            ValueError: If the shape has fewer than 2 vertices, or is filled with fewer than 3.
        """
        self.vertices = tuple(self.vertices)
        if len(self.vertices) < 2:
            raise ValueError(f'Shape needs at least 2 vertices, got {len(self.vertices)}')
        if self.fill is not None and len(self.vertices) < 3:
            raise ValueError('Filled shape needs at least 3 vertices')

    @property
    def is_filled(self) -> bool:
        """Whether the shape is drawn as a filled polygon."""
        return self.fill is not None


@dataclass(frozen=True)
class Footprint:
    """Integer rectangle of occupancy-grid cells claimed by one building."""
    x: int
    z: int
    width: int
    length: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, z) cell covered by the footprint."""
        for xx in range(self.x, self.x + self.width):
            for zz in range(self.z, self.z + self.length):
                yield (xx, zz)

    def to_dict(self):
        """Convert the footprint to dictionary representation."""
        return {'x': self.x, 'z': self.z, 'width': self.width, 'length': self.length}


class FacadeType(Enum):
    """Front facade decoration."""
    WINDOWS = 'windows'
    PANELS = 'panels'


@dataclass(frozen=True)
class WindowLayout:
    """Solved window grid for one facade.

    The spacings are derived so that ``num_x`` windows and ``num_x + 1`` gaps
    exactly fill ``available_width`` (likewise for height).
    """
    window_width: float
    window_height: float
    num_x: int
    num_y: int
    spacing_x: float
    spacing_y: float
    available_width: float
    available_height: float


@dataclass
class BuildingRecord:
    """Summary of one generated building."""
    origin: Vector
    width: float
    length: float
    height: float
    has_roof: bool = False
    chimneys: int = 0
    facade: FacadeType = FacadeType.PANELS
    window_layout: Optional[WindowLayout] = None
    panel_counts: Optional[Tuple[int, int]] = None
    corners: Sequence[Vector] = field(default_factory=tuple, repr=False)

    def to_dict(self):
        """Convert the building to dictionary representation."""
        return {
            'origin': self.origin.to_dict(),
            'width': self.width,
            'length': self.length,
            'height': round(self.height, 4),
            'roof': self.has_roof,
            'chimneys': self.chimneys,
            'facade': self.facade.value,
        }
