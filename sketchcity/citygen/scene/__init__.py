"""Scene accumulator package."""
from sketchcity.citygen.scene.scene import Scene

__all__ = ['Scene']
