"""Render pipeline: depth keys, painter's-algorithm sort and emission."""
import math
import time
from dataclasses import dataclass
from typing import List, Optional

from sketchcity.citygen.dataclass import Shape
from sketchcity.citygen.scene import Scene
from sketchcity.render.camera import Camera
from sketchcity.render.canvas import Canvas, DrawCommand
from sketchcity.render.projection import Projected, Projector
from sketchcity.utils.logger import Logger
from sketchcity.utils.math_utils import MathUtils


@dataclass(frozen=True)
class StyleOptions:
    """Options understood by the hand-drawn renderer."""
    stroke: str
    stroke_width: float
    roughness: float
    bowing: float
    disable_multi_stroke: bool
    seed: int
    fill: Optional[str] = None
    fill_style: Optional[str] = None

    def to_dict(self):
        """Convert to the renderer's camelCase option names."""
        options = {
            'stroke': self.stroke,
            'strokeWidth': self.stroke_width,
            'roughness': self.roughness,
            'bowing': self.bowing,
            'disableMultiStroke': self.disable_multi_stroke,
            'seed': self.seed,
        }
        if self.fill is not None:
            options['fill'] = self.fill
            options['fillStyle'] = self.fill_style
        return options


class RenderPipeline:
    """Projects, depth-sorts and emits the shapes of a scene once.

    Shapes are drawn back to front; nearer shapes hide farther ones through
    overdraw only.
    """

    def __init__(self, config, camera: Optional[Camera] = None):
        """Initialize the pipeline.

        Args:
            config: Configuration with the ``render`` section.
            camera: Camera override; read from config when omitted.
        """
        self.config = config
        self.camera = camera or Camera.from_config(config)
        self.depth_weight = self.config['render.sort.depth_weight']
        self.fill_bias = self.config['render.sort.fill_bias']

        self.logger = Logger.get_logger('RenderPipeline')

    def depth_key(self, shape: Shape) -> float:
        """Compute ``mean_z * depth_weight + mean_camera_distance (+ fill_bias if filled)``.

        Args:
            shape: Shape in world space.

        Returns:
            The sort key; larger means farther.
        """
        count = len(shape.vertices)
        eye = self.camera.eye
        mean_z = sum(v.z for v in shape.vertices) / count
        mean_distance = sum(MathUtils.distance(v, eye) for v in shape.vertices) / count
        return mean_z * self.depth_weight + mean_distance + (self.fill_bias if shape.is_filled else 0.0)

    def sort_shapes(self, scene: Scene) -> List[Shape]:
        """Assign sort keys and order the scene farthest first.

        Equal keys keep their insertion order.

        Args:
            scene: Populated scene.

        Returns:
            Shapes in draw order.
        """
        for shape in scene.shapes:
            shape.sort_key = self.depth_key(shape)
        return sorted(scene.shapes, key=lambda s: s.sort_key, reverse=True)

    def style_for(self, shape: Shape, points: List[Projected]) -> StyleOptions:
        """Derive the hand-drawn style of one projected shape.

        Bowing scales inversely with the on-screen bounding diagonal, so small
        shapes wobble proportionally more. The seed depends only on the world
        geometry.
        """
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        diagonal = math.sqrt((max(xs) - min(xs)) ** 2 + (max(ys) - min(ys)) ** 2)
        # zero-size shapes would divide by zero
        diagonal = max(diagonal, 1.0)

        bowing = self.config['render.style.bowing_factor'] / (math.sqrt(diagonal) * self.config['render.style.bowing_scale'])
        seed = int(round(MathUtils.vertex_seed(shape.vertices)))

        if shape.is_filled:
            return StyleOptions(
                stroke=self.config['render.style.stroke'] if shape.stroke else 'transparent',
                stroke_width=self.config['render.style.stroke_width'],
                roughness=self.config['render.style.fill_roughness'],
                bowing=bowing,
                disable_multi_stroke=self.config['render.style.disable_multi_stroke'],
                seed=seed,
                fill=shape.fill,
                fill_style=self.config['render.style.fill_style'],
            )
        return StyleOptions(
            stroke=self.config['render.style.stroke'],
            stroke_width=self.config['render.style.stroke_width'],
            roughness=self.config['render.style.roughness'],
            bowing=bowing,
            disable_multi_stroke=self.config['render.style.disable_multi_stroke'],
            seed=seed,
        )

    def render(self, scene: Scene, canvas: Optional[Canvas] = None) -> List[DrawCommand]:
        """Run one projection and sort pass and emit the ordered draw commands.

        Shapes with any vertex that cannot be projected are dropped from the frame.

        Args:
            scene: Populated scene; consumed once.
            canvas: Optional drawing backend receiving each command in order.

        Returns:
            Emitted commands in draw order.
        """
        start_time = time.perf_counter()
        projector = Projector(self.camera, scene)

        commands: List[DrawCommand] = []
        culled = 0
        for shape in self.sort_shapes(scene):
            projected = projector.project_all(shape.vertices)
            if not all(isinstance(p, Projected) for p in projected):
                culled += 1
                continue

            points = tuple(p.as_tuple() for p in projected)
            options = self.style_for(shape, projected)
            command = DrawCommand('polygon' if shape.is_filled else 'path', points, options)
            commands.append(command)

            if canvas is not None:
                command.draw_on(canvas)

        self.logger.debug(f'Culled {culled} of {len(scene)} shapes')
        self.logger.info(f'Render took {(time.perf_counter() - start_time) * 1000:.0f} ms')
        return commands
