"""Dataclass module for the city generation."""
from sketchcity.citygen.dataclass.dataclass import (BuildingRecord,
                                                    FacadeType, Footprint,
                                                    Palette, Shape,
                                                    WindowLayout)

__all__ = ['BuildingRecord', 'FacadeType', 'Footprint', 'Palette', 'Shape', 'WindowLayout']
