"""City layout package.

This package places non-overlapping buildings on an integer occupancy grid and
drives the building generator for each accepted footprint.
"""
from sketchcity.citygen.city.city_generator import (CityGenerator,
                                                    GenerationState,
                                                    LayoutExhaustedError)

__all__ = ['CityGenerator', 'GenerationState', 'LayoutExhaustedError']
