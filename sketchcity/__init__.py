"""SketchCity package for procedurally generated, hand-drawn miniature cities.

This package provides the city layout and building generators, the
projection and depth-sort pipeline and a Pillow drawing backend.
"""

from sketchcity.citygen.city import CityGenerator, LayoutExhaustedError
from sketchcity.citygen.function_call import CityFunctionCall
from sketchcity.citygen.scene import Scene
from sketchcity.config import Config
from sketchcity.render import Camera, RenderPipeline
from sketchcity.utils.logger import Logger

__version__ = '0.1.0'

__all__ = [
    'Camera',
    'CityFunctionCall',
    'CityGenerator',
    'Config',
    'LayoutExhaustedError',
    'Logger',
    'RenderPipeline',
    'Scene',
]
