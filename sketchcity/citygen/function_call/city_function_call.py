"""City function call module for running one generation and render pass.

This module provides a high-level interface tying layout, geometry generation,
projection and export together.
"""
from typing import List, Optional

from sketchcity.citygen.city.city_generator import CityGenerator
from sketchcity.citygen.dataclass import Palette
from sketchcity.citygen.scene import Scene
from sketchcity.config import Config
from sketchcity.render.canvas import Canvas, DrawCommand, RoughCanvas
from sketchcity.render.pipeline import RenderPipeline
from sketchcity.utils.data_exporter import DataExporter
from sketchcity.utils.logger import Logger


class CityFunctionCall:
    """Function call interface for one city sketch pass."""

    def __init__(self, config: Config, seed: int = None, building_count: int = None):
        """Initialize the city function call with configuration.

        Args:
            config: Configuration object.
            seed: Seed for the random number generator.
            building_count: Number of buildings to place.
        """
        self.config = config
        self.city_generator = CityGenerator(self.config, seed, building_count=building_count)
        self.pipeline = RenderPipeline(self.config)
        self.palette = Palette.from_config(self.config)
        self.commands: List[DrawCommand] = []

        self.logger = Logger.get_logger('CityFunctionCall')

    @property
    def scene(self) -> Scene:
        return self.city_generator.scene

    def generate_city(self) -> Scene:
        """Lay out and generate all buildings.

        Returns:
            The populated scene.
        """
        return self.city_generator.generate()

    def create_canvas(self) -> RoughCanvas:
        """Create a Pillow canvas sized to the scene viewport, painted with the background color."""
        return RoughCanvas(self.scene.viewport_width, self.scene.viewport_height, self.palette.background)

    def render(self, canvas: Optional[Canvas] = None) -> List[DrawCommand]:
        """Project, sort and emit the scene.

        Args:
            canvas: Drawing backend; commands are only returned when omitted.

        Returns:
            Draw commands in painter's order.
        """
        self.commands = self.pipeline.render(self.scene, canvas)
        return self.commands

    def export_city(self, output_dir: str = None):
        """Export city data to JSON files.

        Args:
            output_dir: Directory path where the city data will be exported.
        """
        if output_dir is None:
            output_dir = self.config['citygen.output_dir']
        exporter = DataExporter(self.city_generator)
        exporter.export_to_json(output_dir, self.commands or None)
