"""Exception hierarchy for canvas and rasterization failures.

Every user-facing failure derives from :class:`CanvasError` so front ends
can report it and keep going. :class:`RasterInvariantError` is deliberately
outside that hierarchy: it signals a bug, not bad input.
"""

from __future__ import annotations

__all__ = [
    "CanvasError",
    "OutOfBoundsError",
    "InvalidColorError",
    "InvalidGeometryError",
    "ExportError",
    "RasterInvariantError",
]


class CanvasError(Exception):
    """Base class for recoverable drawing and export errors."""

    default_message = "Canvas operation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class OutOfBoundsError(CanvasError):
    default_message = "Attempt to draw a figure out of bounds of the screen."


class InvalidColorError(CanvasError):
    default_message = "Attempt to use an invalid color."


class InvalidGeometryError(CanvasError):
    default_message = "Attempt to draw a figure with invalid geometry."


class ExportError(CanvasError):
    default_message = "Unable to create PPM file."


class RasterInvariantError(RuntimeError):
    """A pixel write failed after the shape passed validation."""
