"""Drawable shapes: rectangle, triangle and circle.

Each shape is an immutable pydantic model tagged with a ``kind``
discriminator. Drawing follows one protocol for all three:

1. geometry is checked against the target surface (bounds, radius),
2. the fill color is checked against the palette,
3. the covered pixels are painted.

Nothing is written unless steps 1 and 2 pass, so a shape is either drawn
completely or not at all.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, ClassVar, Iterator, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from pixelcanvas.core.errors import InvalidGeometryError, OutOfBoundsError
from pixelcanvas.core.models import Point, ShapeKind
from pixelcanvas.core.palette import check_color
from pixelcanvas.render.raster import (
    Pixel,
    circle_pixels,
    paint,
    rectangle_pixels,
    triangle_pixels,
)

if TYPE_CHECKING:
    from pixelcanvas.render.canvas import PixelSurface

__all__ = ["ShapeBase", "Rectangle", "Triangle", "Circle", "Shape"]

logger = logging.getLogger(__name__)


def _outside(surface: "PixelSurface", x: int, y: int) -> bool:
    width, height = surface.dimensions()
    return x < 0 or x >= width or y < 0 or y >= height


class ShapeBase(BaseModel):
    """Common draw protocol; subclasses supply geometry and pixels."""

    model_config = ConfigDict(frozen=True)

    kind: ShapeKind
    color: str

    # Display name used in user feedback ("Rectangle drawn successfully.")
    label: ClassVar[str] = "Shape"

    @abstractmethod
    def defining_points(self) -> Tuple[Point, ...]:
        """Points that must lie on the surface for the shape to be drawn."""

    def check_geometry(self, surface: "PixelSurface") -> None:
        """Raise :class:`OutOfBoundsError` if a defining point is off-canvas."""
        for p in self.defining_points():
            if _outside(surface, p.x, p.y):
                raise OutOfBoundsError(
                    f"Attempt to draw a figure out of bounds of the screen: "
                    f"{self.label.lower()} point {p} is off-canvas."
                )

    @abstractmethod
    def pixels(self) -> Iterator[Pixel]:
        """Yield every covered (x, y) pixel."""

    @abstractmethod
    def describe(self) -> str:
        """One-line human-readable description for user feedback."""

    def draw(self, surface: "PixelSurface") -> int:
        """Validate then paint onto *surface*; return the pixel count.

        Raises:
            OutOfBoundsError: a defining point lies outside the surface.
            InvalidGeometryError: the geometry itself is invalid.
            InvalidColorError: the fill color is not a palette name.
        """
        self.check_geometry(surface)
        check_color(self.color)
        count = paint(surface, self.pixels(), self.color)
        logger.debug("%s painted %d pixels", self.describe(), count)
        return count


class Rectangle(ShapeBase):
    """Axis-aligned rectangle; the upper-right edge is exclusive."""

    kind: Literal["rectangle"] = "rectangle"
    ll: Point
    ur: Point

    label: ClassVar[str] = "Rectangle"

    def defining_points(self) -> Tuple[Point, ...]:
        return (self.ll, self.ur)

    def pixels(self) -> Iterator[Pixel]:
        return rectangle_pixels(self.ll.as_tuple(), self.ur.as_tuple())

    def describe(self) -> str:
        return f"Rectangle: {self.ll} to {self.ur}"


class Triangle(ShapeBase):
    kind: Literal["triangle"] = "triangle"
    pt0: Point
    pt1: Point
    pt2: Point

    label: ClassVar[str] = "Triangle"

    def defining_points(self) -> Tuple[Point, ...]:
        return (self.pt0, self.pt1, self.pt2)

    def pixels(self) -> Iterator[Pixel]:
        return triangle_pixels(
            self.pt0.as_tuple(), self.pt1.as_tuple(), self.pt2.as_tuple()
        )

    def describe(self) -> str:
        return f"Triangle: {self.pt0}, {self.pt1}, {self.pt2}"


class Circle(ShapeBase):
    """Filled disk: every pixel within distance ``r`` of the center."""

    kind: Literal["circle"] = "circle"
    center: Point
    r: int

    label: ClassVar[str] = "Circle"

    def defining_points(self) -> Tuple[Point, ...]:
        # Bounding square corners; the whole extent must be on-canvas
        cx, cy, r = self.center.x, self.center.y, self.r
        return (Point(x=cx - r, y=cy - r), Point(x=cx + r, y=cy + r))

    def check_geometry(self, surface: "PixelSurface") -> None:
        if self.r < 0:
            raise InvalidGeometryError(
                f"Attempt to draw a circle with negative radius {self.r}."
            )
        super().check_geometry(surface)

    def pixels(self) -> Iterator[Pixel]:
        return circle_pixels(self.center.as_tuple(), self.r)

    def describe(self) -> str:
        return f"Circle: centered around {self.center} with radius {self.r}"


Shape = Annotated[Union[Rectangle, Triangle, Circle], Field(discriminator="kind")]
