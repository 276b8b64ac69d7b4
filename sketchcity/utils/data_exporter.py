"""Module for exporting generated city data to JSON files.

This module provides functionality to export placed buildings and emitted draw
commands for inspection and integration with external tools.
"""
import json
import os
from typing import Dict, List, Optional

from sketchcity.utils.logger import Logger


class DataExporter:
    """Manages the export of city data to JSON.

    This class provides methods to export buildings, footprints and the ordered
    draw commands of a render pass.
    """
    def __init__(self, city_generator):
        """Initialize the data exporter with a city generator.

        Args:
            city_generator: The city generator object containing city data.
        """
        self.city_generator = city_generator
        self.logger = Logger.get_logger('DataExporter')

    def export_building_data(self) -> Dict:
        """Export all building data.

        Returns:
            Dictionary containing building data.
        """
        manager = self.city_generator.building_manager
        buildings_data = []
        for footprint, building in zip(manager.footprints, manager.buildings):
            building_data = building.to_dict()
            building_data['footprint'] = footprint.to_dict()
            buildings_data.append(building_data)
        return {'buildings': buildings_data}

    def export_scene_data(self) -> Dict:
        """Export viewport, shape counts and palette of the scene.

        Returns:
            Dictionary containing scene metadata.
        """
        scene = self.city_generator.scene
        return {
            'viewport': {'width': scene.viewport_width, 'height': scene.viewport_height},
            'shape_count': len(scene),
            'filled_count': sum(1 for s in scene.shapes if s.is_filled),
            'palette': self.city_generator.building_generator.palette.to_dict(),
        }

    @staticmethod
    def export_drawing_data(commands: List) -> Dict:
        """Export draw commands in draw order.

        Args:
            commands: Commands emitted by the render pipeline.

        Returns:
            Dictionary containing the commands.
        """
        return {'commands': [command.to_dict() for command in commands]}

    def export_to_json(self, output_dir: str, commands: Optional[List] = None):
        """Export all data to JSON files.

        Args:
            output_dir: Directory path where the JSON files will be written.
            commands: Draw commands; ``drawing.json`` is only written when given.
        """
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        with open(f'{output_dir}/buildings.json', 'w') as f:
            json.dump(self.export_building_data(), f, indent=2)

        with open(f'{output_dir}/scene.json', 'w') as f:
            json.dump(self.export_scene_data(), f, indent=2)

        if commands is not None:
            with open(f'{output_dir}/drawing.json', 'w') as f:
                json.dump(self.export_drawing_data(commands), f, indent=2)

        self.logger.info(f'Exported city data to {output_dir}')
