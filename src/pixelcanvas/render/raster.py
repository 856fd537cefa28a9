"""Rasterization algorithms.

Each ``*_pixels`` function turns a shape's continuous description into the
discrete set of covered pixel coordinates. They are pure: no canvas is read
or written, and no bounds are checked. :func:`paint` is the single write
loop shared by all shapes.

Triangles use scanline edge interpolation: the vertices are sorted by y,
each edge is interpolated to one x per row, and every row is filled between
the left and right edge.
"""

from __future__ import annotations

import logging
from math import sqrt
from typing import TYPE_CHECKING, Iterable, Iterator, List, Tuple

from pixelcanvas.core.errors import CanvasError, RasterInvariantError

if TYPE_CHECKING:
    from pixelcanvas.render.canvas import PixelSurface

__all__ = [
    "Pixel",
    "Span",
    "interpolate",
    "sort_by_y",
    "triangle_spans",
    "rectangle_pixels",
    "triangle_pixels",
    "inside_circle",
    "circle_pixels",
    "paint",
]

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int]
# (y, x_left, x_right), both x inclusive
Span = Tuple[int, int, int]


def interpolate(i0: int, d0: int, i1: int, d1: int) -> List[int]:
    """Linearly interpolate the dependent value for every integer in [i0, i1].

    Values are truncated toward zero. A zero-length range (``i0 == i1``)
    yields the single value ``[d0]`` instead of dividing by zero.

    Args:
        i0: Independent start value (e.g. y of the first endpoint).
        d0: Dependent value at ``i0`` (e.g. x of the first endpoint).
        i1: Independent end value, ``i1 >= i0``.
        d1: Dependent value at ``i1``.
    Returns:
        ``i1 - i0 + 1`` integers.
    """
    if i1 == i0:
        return [int(d0)]
    span = i1 - i0
    delta = d1 - d0
    return [int(d0 + (i - i0) * delta / span) for i in range(i0, i1 + 1)]


def sort_by_y(p0: Pixel, p1: Pixel, p2: Pixel) -> Tuple[Pixel, Pixel, Pixel]:
    """Order three points so that ``y0 <= y1 <= y2`` using pairwise swaps."""
    if p1[1] < p0[1]:
        p0, p1 = p1, p0
    if p2[1] < p0[1]:
        p0, p2 = p2, p0
    if p2[1] < p1[1]:
        p1, p2 = p2, p1
    return p0, p1, p2


def triangle_spans(p0: Pixel, p1: Pixel, p2: Pixel) -> List[Span]:
    """Return one ``(y, x_left, x_right)`` span per row covered by a triangle.

    Vertices may be given in any order. Assumes non-negative coordinates
    (truncation then equals flooring, which keeps the edges ordered).
    """
    (x0, y0), (x1, y1), (x2, y2) = sort_by_y(p0, p1, p2)

    if y0 == y2:
        xs = (x0, x1, x2)
        return [(y0, min(xs), max(xs))]

    x01 = interpolate(y0, x0, y1, x1)
    x12 = interpolate(y1, x1, y2, x2)
    x02 = interpolate(y0, x0, y2, x2)

    # Short edges joined at y1; drop the shared row
    x012 = x01[:-1] + x12

    m = len(x012) // 2
    if x02[m] != x012[m]:
        long_is_left = x02[m] < x012[m]
    else:
        # The chain lies on one side of the long edge on every row, so the
        # sums settle a tie at the midpoint row
        long_is_left = sum(x02) < sum(x012)

    x_left, x_right = (x02, x012) if long_is_left else (x012, x02)
    return [(y0 + i, x_left[i], x_right[i]) for i in range(len(x02))]


def rectangle_pixels(ll: Pixel, ur: Pixel) -> Iterator[Pixel]:
    """Pixels of ``[ll.x, ur.x) x [ll.y, ur.y)``; the upper-right edge is open."""
    for x in range(ll[0], ur[0]):
        for y in range(ll[1], ur[1]):
            yield (x, y)


def triangle_pixels(p0: Pixel, p1: Pixel, p2: Pixel) -> Iterator[Pixel]:
    for y, x_left, x_right in triangle_spans(p0, p1, p2):
        for x in range(x_left, x_right + 1):
            yield (x, y)


def inside_circle(center: Pixel, tile: Pixel, r: float) -> bool:
    dx = float(center[0] - tile[0])
    dy = float(center[1] - tile[1])
    return sqrt(dx * dx + dy * dy) <= r


def circle_pixels(center: Pixel, r: int) -> Iterator[Pixel]:
    """Pixels of the disk of radius *r*, scanned over its bounding square."""
    cx, cy = center
    for y in range(cy - r, cy + r + 1):
        for x in range(cx - r, cx + r + 1):
            if inside_circle(center, (x, y), float(r)):
                yield (x, y)


def paint(surface: "PixelSurface", pixels: Iterable[Pixel], color: str) -> int:
    """Write *color* to every pixel and return how many were written.

    Callers validate geometry and color first, so any write failure here is
    a bug and is raised as :class:`RasterInvariantError`.
    """
    count = 0
    for x, y in pixels:
        try:
            surface.set_pixel(x, y, color)
        except CanvasError as e:
            logger.exception("pixel write failed after validation at (%d,%d)", x, y)
            raise RasterInvariantError(
                f"write to ({x},{y}) failed after validation: {e}"
            ) from e
        count += 1
    return count
