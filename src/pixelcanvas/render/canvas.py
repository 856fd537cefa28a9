"""Pixel surface protocol and the in-memory canvas.

:class:`PixelSurface` is the minimal contract the rasterizers and the PPM
encoder depend on, so tests can pass a recording fake. :class:`Canvas` is
the real implementation: a fixed-size grid of palette color names indexed
``[x][y]``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Tuple

from pixelcanvas.core.errors import (
    InvalidColorError,
    InvalidGeometryError,
    OutOfBoundsError,
)
from pixelcanvas.core.palette import BACKGROUND, check_color, is_known_color
from pixelcanvas.render.ppm import write_ppm

__all__ = ["PixelSurface", "Canvas"]

logger = logging.getLogger(__name__)


class PixelSurface(Protocol):
    def dimensions(self) -> Tuple[int, int]:
        ...

    def set_pixel(self, x: int, y: int, color: str) -> None:
        ...

    def get_pixel(self, x: int, y: int) -> str:
        ...


class Canvas(PixelSurface):
    """Fixed-size grid of named colors, initialised to white.

    Every access is bounds-checked and every write is color-checked, so a
    cell always holds a palette name. Dimensions never change after
    construction.
    """

    def __init__(self, width: int, height: int) -> None:
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise InvalidGeometryError(
                f"Canvas dimensions must be positive, got {width}x{height}."
            )
        self._width = width
        self._height = height
        self._grid: list[list[str]] = [[BACKGROUND] * height for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def dimensions(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Pixel ({x},{y}) is outside the {self._width}x{self._height} canvas."
            )

    def set_pixel(self, x: int, y: int, color: str) -> None:
        self._check_bounds(x, y)
        self._grid[x][y] = check_color(color)

    def get_pixel(self, x: int, y: int) -> str:
        self._check_bounds(x, y)
        color = self._grid[x][y]
        if not is_known_color(color):
            raise InvalidColorError(f"Pixel ({x},{y}) holds unknown color {color!r}.")
        return color

    def clear(self) -> None:
        for column in self._grid:
            column[:] = [BACKGROUND] * self._height
        logger.debug("canvas %dx%d cleared", self._width, self._height)

    def export(self, name: str, directory: str | Path | None = None) -> Path:
        """Write the canvas to ``<name>.ppm`` and return the written path.

        Raises:
            ExportError: when the file cannot be created or written.
        """
        return write_ppm(self, name, directory)

    def __repr__(self) -> str:  # pragma: no cover
        return f"Canvas({self._width}x{self._height})"
