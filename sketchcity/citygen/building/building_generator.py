"""Building generator module for turning footprints into drawable geometry."""
import math
import random
from typing import List, Optional, Tuple

from sketchcity.citygen.dataclass import (BuildingRecord, FacadeType, Palette,
                                          WindowLayout)
from sketchcity.citygen.scene import Scene
from sketchcity.utils.logger import Logger
from sketchcity.utils.vector import Vector


def _js_round(value: float) -> int:
    """Round half up, independent of Python's banker's rounding."""
    return int(math.floor(value + 0.5))


class BuildingGenerator:
    """Building generator class emitting cuboids, roofs, chimneys and facades into a scene."""

    def __init__(self, config, scene: Scene, palette: Optional[Palette] = None, rng: Optional[random.Random] = None):
        """Initialize the building generator.

        Args:
            config: Configuration with the ``citygen.building`` and ``citygen.cuboid`` sections.
            scene: Scene receiving the generated shapes.
            palette: Fill tones; read from config when omitted.
            rng: Random source; an unseeded one is created when omitted.
        """
        self.config = config
        self.scene = scene
        self.palette = palette or Palette.from_config(config)
        self.rng = rng or random.Random()

        self.padding = self.config['citygen.building.padding']
        self.facade_offset = self.config['citygen.building.facade_offset']

        self.logger = Logger.get_logger('BuildingGenerator')

    def cuboid(self, v1: Vector, v2: Vector) -> List[Vector]:
        """Emit an axis-aligned box spanning two opposite corners.

        Four side faces are filled with flat tones (the +x side dark, the rest
        light) and a translucent shadow strip is cast along +x on the ground.

        Args:
            v1: Minimum corner (front, bottom, left).
            v2: Maximum corner (back, top, right).

        Returns:
            The 8 corners ``a..h``: ``a..d`` on the front face, ``e..h`` on the back.
        """
        a = Vector(v1.x, v1.y, v1.z)
        b = Vector(v2.x, v1.y, v1.z)
        c = Vector(v2.x, v2.y, v1.z)
        d = Vector(v1.x, v2.y, v1.z)
        e = Vector(v1.x, v1.y, v2.z)
        f = Vector(v2.x, v1.y, v2.z)
        g = Vector(v2.x, v2.y, v2.z)
        h = Vector(v1.x, v2.y, v2.z)

        self.scene.add_shape([a, b, c, d], self.palette.light)
        self.scene.add_shape([b, c, g, f], self.palette.dark)
        self.scene.add_shape([d, c, g, h], self.palette.light)
        self.scene.add_shape([a, d, h, e], self.palette.light)

        offset = Vector((v2.y - v1.y) * self.config['citygen.cuboid.shadow_ratio'], 0, 0)
        self.scene.add_shape([f, b, b + offset, f + offset], self.palette.shadow, stroke=False)

        return [a, b, c, d, e, f, g, h]

    def sample_height(self) -> float:
        """Draw a right-skewed building height: ``(u * scale) ** exponent + base``."""
        scale = self.config['citygen.building.height_scale']
        exponent = self.config['citygen.building.height_exponent']
        base = self.config['citygen.building.height_base']
        return (self.rng.random() * scale) ** exponent + base

    def generate_building(self, v: Vector, width: float, length: float) -> BuildingRecord:
        """Generate one building on a footprint.

        Args:
            v: Footprint origin (minimum x/z corner on the ground).
            width: Footprint extent along x.
            length: Footprint extent along z.

        Returns:
            Record describing what was generated.
        """
        height = self.sample_height()
        padding = self.padding

        corners = self.cuboid(
            v + Vector(padding, 0, padding),
            v + Vector(width - padding, height, length - padding),
        )
        record = BuildingRecord(origin=v, width=width, length=length, height=height, corners=tuple(corners))

        if self.rng.random() < self.config['citygen.building.roof_probability']:
            self._roof(corners)
            record.has_roof = True

        record.chimneys = self._chimneys(v, width, length, height)

        if self.rng.random() < self.config['citygen.building.window_probability']:
            record.facade = FacadeType.WINDOWS
            record.window_layout = self._window_facade(v, width, height)
        else:
            record.facade = FacadeType.PANELS
            record.panel_counts = self._panel_facade(v, width, height)

        self.logger.debug(
            f'Building at ({v.x}, {v.z}) {width}x{length} height={height:.2f} '
            f'chimneys={record.chimneys} facade={record.facade.value}'
        )
        return record

    def _roof(self, corners: List[Vector]):
        """Emit a bevelled roof highlight pulled toward the opposite diagonal corners."""
        _, _, c, d, _, _, g, h = corners
        inset = self.config['citygen.building.roof_inset']
        self.scene.add_shape(
            [
                d - (d - g) * inset,
                c - (c - h) * inset,
                g - (g - d) * inset,
                h - (h - c) * inset,
            ],
            self.palette.light,
        )

    def _chimneys(self, v: Vector, width: float, length: float, height: float) -> int:
        """Place up to ``max_chimneys`` small boxes at random rooftop positions.

        Returns:
            Number of chimneys emitted.
        """
        padding = self.padding
        count = math.ceil(self.rng.random() * self.config['citygen.building.max_chimneys'])
        size_min = self.config['citygen.building.chimney.width_min']
        size_max = self.config['citygen.building.chimney.width_max']
        height_min = self.config['citygen.building.chimney.height_min']
        height_max = self.config['citygen.building.chimney.height_max']

        for _ in range(count):
            size = Vector(
                self.rng.uniform(size_min, size_max),
                self.rng.uniform(height_min, height_max),
                self.rng.uniform(size_min, size_max),
            )
            pos = Vector(
                v.x + padding + self.rng.random() * (width - padding * 2 - size.x),
                v.y + height,
                v.z + padding + self.rng.random() * (length - padding * 2 - size.z),
            )
            self.cuboid(pos, pos + size)
        return count

    def solve_window_layout(self, width: float, height: float) -> WindowLayout:
        """Pick a window size and solve the spacing that tiles the facade exactly.

        The window count comes from dividing the available extent by an
        approximate cell (window plus a random desired gap); the gap is then
        recomputed so ``n`` windows and ``n + 1`` gaps fill the extent.

        Args:
            width: Footprint width.
            height: Building height.

        Returns:
            The solved layout.
        """
        padding = self.padding
        size_min = self.config['citygen.building.window.size_min']
        size_max = self.config['citygen.building.window.size_max']
        spacing_min = self.config['citygen.building.window.spacing_min']
        spacing_max = self.config['citygen.building.window.spacing_max']

        window_width = self.rng.uniform(size_min, size_max)
        window_height = self.rng.uniform(size_min, size_max)
        desired_x = self.rng.uniform(spacing_min, spacing_max)
        desired_y = self.rng.uniform(spacing_min, spacing_max)

        available_width = width - padding * 2
        available_height = height - padding * 2

        num_x = max(1, _js_round(available_width / (window_width + desired_x)))
        num_y = max(1, _js_round(available_height / (window_height + desired_y)))

        return WindowLayout(
            window_width=window_width,
            window_height=window_height,
            num_x=num_x,
            num_y=num_y,
            spacing_x=(available_width - num_x * window_width) / (num_x + 1),
            spacing_y=(available_height - num_y * window_height) / (num_y + 1),
            available_width=available_width,
            available_height=available_height,
        )

    def _window_facade(self, v: Vector, width: float, height: float) -> WindowLayout:
        """Emit a grid of windows on the footprint's front edge, ahead of the inset wall.

        Buildings further than ``lod_distance`` get a single vertical stroke per
        window instead of a closed outline.
        """
        layout = self.solve_window_layout(width, height)
        padding = self.padding
        z = v.z - self.facade_offset
        simplified = v.z > self.config['citygen.building.lod_distance']

        for i in range(layout.num_x):
            x = v.x + padding + layout.spacing_x + i * (layout.window_width + layout.spacing_x)
            for j in range(layout.num_y):
                y = v.y + padding + layout.spacing_y + j * (layout.window_height + layout.spacing_y)
                if simplified:
                    mid = x + layout.window_width * 0.5
                    self.scene.add_shape([
                        Vector(mid, y, z),
                        Vector(mid, y + layout.window_height, z),
                    ])
                else:
                    self.scene.add_shape([
                        Vector(x, y, z),
                        Vector(x + layout.window_width, y, z),
                        Vector(x + layout.window_width, y + layout.window_height, z),
                        Vector(x, y + layout.window_height, z),
                        Vector(x, y, z),
                    ])
        return layout

    def _panel_facade(self, v: Vector, width: float, height: float) -> Tuple[int, int]:
        """Emit evenly spaced vertical and horizontal mullions on the footprint's front edge.

        Returns:
            Number of vertical and horizontal dividers.
        """
        padding = self.padding
        count_min = self.config['citygen.building.panel.count_min']
        count_max = self.config['citygen.building.panel.count_max']
        num_x = _js_round(self.rng.random() * (count_max - count_min) + count_min)
        num_y = _js_round(self.rng.random() * (count_max - count_min) + count_min)

        z = v.z - self.facade_offset
        left = v.x + padding
        right = v.x + width - padding
        spacing_x = (width - padding * 2) / (num_x + 1)
        spacing_y = (height - padding * 2) / (num_y + 1)

        for k in range(1, num_x + 1):
            x = left + k * spacing_x
            self.scene.add_shape([Vector(x, v.y, z), Vector(x, v.y + height, z)])

        for k in range(1, num_y + 1):
            y = v.y + padding + k * spacing_y
            self.scene.add_shape([Vector(left, y, z), Vector(right, y, z)])

        return num_x, num_y
