"""Canvas, rasterizers and PPM export."""

from .canvas import Canvas, PixelSurface
from .shapes import Circle, Rectangle, Shape, ShapeBase, Triangle

__all__ = [
    "Canvas",
    "Circle",
    "PixelSurface",
    "Rectangle",
    "Shape",
    "ShapeBase",
    "Triangle",
]
