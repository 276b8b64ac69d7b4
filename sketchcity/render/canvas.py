"""Drawing backends consuming the ordered output of the render pipeline.

``RoughCanvas`` is a small Pillow rasterizer imitating a hand-drawn look:
every edge gets seeded endpoint jitter and a bowed midpoint.
"""
import math
import re
from dataclasses import dataclass
from io import BytesIO
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from sketchcity.utils.logger import Logger

if TYPE_CHECKING:
    from sketchcity.render.pipeline import StyleOptions

Point2D = Tuple[float, float]
RGBA = Tuple[int, int, int, int]

_RGBA_PATTERN = re.compile(r'^rgba\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*\)$')


class Canvas:
    """Interface of a hand-drawn polygon/polyline renderer."""

    def draw_polygon(self, points: Sequence[Point2D], options: 'StyleOptions'):
        """Draw a closed filled shape."""
        raise NotImplementedError

    def draw_path(self, points: Sequence[Point2D], options: 'StyleOptions'):
        """Draw a stroked polyline."""
        raise NotImplementedError


@dataclass(frozen=True)
class DrawCommand:
    """One emitted primitive: ``kind`` is ``'polygon'`` or ``'path'``."""
    kind: str
    points: Tuple[Point2D, ...]
    options: 'StyleOptions'

    def draw_on(self, canvas: Canvas):
        """Dispatch the command to a canvas."""
        if self.kind == 'polygon':
            canvas.draw_polygon(self.points, self.options)
        else:
            canvas.draw_path(self.points, self.options)

    def to_dict(self):
        """Convert the command to dictionary representation."""
        return {
            'kind': self.kind,
            'points': [[round(x, 4), round(y, 4)] for x, y in self.points],
            'options': self.options.to_dict(),
        }


class RecordingCanvas(Canvas):
    """Canvas that only remembers what it was asked to draw."""

    def __init__(self):
        self.commands: List[DrawCommand] = []

    def draw_polygon(self, points, options):
        self.commands.append(DrawCommand('polygon', tuple(points), options))

    def draw_path(self, points, options):
        self.commands.append(DrawCommand('path', tuple(points), options))


def parse_color(color: Optional[str]) -> Optional[RGBA]:
    """Parse ``#rrggbb``, CSS color names and ``rgba(r, g, b, a)`` strings.

    Args:
        color: Color string; ``None`` and ``'transparent'`` mean no paint.

    Returns:
        RGBA tuple, or None when nothing should be drawn.
    """
    if color is None or color == 'transparent':
        return None
    match = _RGBA_PATTERN.match(color.strip())
    if match:
        r, g, b, a = (float(part) for part in match.groups())
        return int(r), int(g), int(b), int(round(a * 255))
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b, 255


class RoughCanvas(Canvas):
    """Pillow-backed canvas drawing jittered, bowed strokes and solid fills."""

    SUPPORTED_FILL_STYLES = ('solid',)
    # number of segments per bowed edge
    CURVE_STEPS = 8

    def __init__(self, width: int, height: int, background: Optional[str] = None):
        """Create the surface and paint the background.

        Args:
            width: Surface width in pixels.
            height: Surface height in pixels.
            background: Background color; transparent when omitted.
        """
        self.width = int(width)
        self.height = int(height)
        fill = parse_color(background) or (0, 0, 0, 0)
        self.image = Image.new('RGBA', (self.width, self.height), fill)
        self.logger = Logger.get_logger('RoughCanvas')

    def _rough_edge(self, p1: Point2D, p2: Point2D, rng: np.random.Generator, roughness: float, bowing: float) -> List[Point2D]:
        """Jitter the endpoints and bow the middle of one edge."""
        length = math.hypot(p2[0] - p1[0], p2[1] - p1[1])
        max_offset = min(2.0, length / 10.0) * roughness
        start = np.asarray(p1, dtype=float) + rng.uniform(-max_offset, max_offset, 2)
        end = np.asarray(p2, dtype=float) + rng.uniform(-max_offset, max_offset, 2)

        direction = end - start
        normal = np.array([-direction[1], direction[0]])
        norm = np.linalg.norm(normal)
        if norm > 0:
            normal /= norm
        bow = bowing * roughness * length / 200.0 * rng.uniform(-1.0, 1.0)
        control = (start + end) / 2.0 + normal * bow

        t = np.linspace(0.0, 1.0, self.CURVE_STEPS + 1)[:, None]
        curve = (1 - t) ** 2 * start + 2 * (1 - t) * t * control + t ** 2 * end
        return [tuple(p) for p in curve]

    def _stroke(self, points: Sequence[Point2D], options: 'StyleOptions', rng: np.random.Generator, closed: bool):
        color = parse_color(options.stroke)
        if color is None or len(points) < 2:
            return
        draw = ImageDraw.Draw(self.image, 'RGBA')
        edges = list(zip(points, points[1:]))
        if closed:
            edges.append((points[-1], points[0]))
        width = max(1, int(round(options.stroke_width)))
        for p1, p2 in edges:
            curve = self._rough_edge(p1, p2, rng, options.roughness, options.bowing)
            draw.line(curve, fill=color, width=width, joint='curve')

    def draw_polygon(self, points, options):
        """Fill the polygon then outline it with rough edges.

        Raises:
            ValueError: If the fill style is not supported.
        """
        if options.fill_style not in self.SUPPORTED_FILL_STYLES:
            raise ValueError(f'Unsupported fill style: {options.fill_style}')
        rng = np.random.default_rng(abs(options.seed))
        fill = parse_color(options.fill)
        if fill is not None:
            self._fill(points, fill)
        self._stroke(points, options, rng, closed=True)

    def _fill(self, points: Sequence[Point2D], fill: RGBA):
        """Fill a polygon, compositing through a bbox-sized layer so translucent fills blend."""
        if fill[3] == 255:
            ImageDraw.Draw(self.image).polygon([tuple(p) for p in points], fill=fill)
            return
        x0 = max(0, int(math.floor(min(p[0] for p in points))))
        y0 = max(0, int(math.floor(min(p[1] for p in points))))
        x1 = min(self.width, int(math.ceil(max(p[0] for p in points))) + 1)
        y1 = min(self.height, int(math.ceil(max(p[1] for p in points))) + 1)
        if x1 <= x0 or y1 <= y0:
            return
        layer = Image.new('RGBA', (x1 - x0, y1 - y0), (0, 0, 0, 0))
        ImageDraw.Draw(layer).polygon([(p[0] - x0, p[1] - y0) for p in points], fill=fill)
        self.image.alpha_composite(layer, dest=(x0, y0))

    def draw_path(self, points, options):
        """Stroke an open polyline with rough edges."""
        rng = np.random.default_rng(abs(options.seed))
        self._stroke(points, options, rng, closed=False)

    def to_png_bytes(self) -> bytes:
        """Encode the surface as PNG."""
        bio = BytesIO()
        self.image.save(bio, format='PNG')
        return bio.getvalue()

    def save(self, path: str):
        """Write the surface to a PNG file."""
        self.image.save(path, format='PNG')
        self.logger.info(f'Saved drawing to {path}')
