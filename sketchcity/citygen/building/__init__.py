"""Building geometry and occupancy package."""
from sketchcity.citygen.building.building_generator import BuildingGenerator
from sketchcity.citygen.building.building_manager import BuildingManager

__all__ = ['BuildingGenerator', 'BuildingManager']
