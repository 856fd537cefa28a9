"""Core value types, palette and error hierarchy."""

from .errors import (
    CanvasError,
    ExportError,
    InvalidColorError,
    InvalidGeometryError,
    OutOfBoundsError,
    RasterInvariantError,
)
from .models import Point, ShapeKind
from .palette import BACKGROUND, PALETTE, RGB

__all__ = [
    "BACKGROUND",
    "CanvasError",
    "ExportError",
    "InvalidColorError",
    "InvalidGeometryError",
    "OutOfBoundsError",
    "PALETTE",
    "Point",
    "RGB",
    "RasterInvariantError",
    "ShapeKind",
]
