"""Projection, depth sorting and drawing backends."""
from sketchcity.render.camera import Camera
from sketchcity.render.canvas import (Canvas, DrawCommand, RecordingCanvas,
                                      RoughCanvas)
from sketchcity.render.pipeline import RenderPipeline, StyleOptions
from sketchcity.render.projection import CULLED, Culled, Projected, Projector

__all__ = [
    'Camera',
    'Canvas',
    'CULLED',
    'Culled',
    'DrawCommand',
    'Projected',
    'Projector',
    'RecordingCanvas',
    'RenderPipeline',
    'RoughCanvas',
    'StyleOptions',
]
