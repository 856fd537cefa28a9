"""Interactive drawing session.

A small prompt-driven loop over a :class:`~pixelcanvas.render.canvas.Canvas`:
the user picks R/T/C to draw a rectangle, triangle or circle, or X to stop,
then names the ``.ppm`` file to export. Input and output go through
injectable callables (``input``/``print`` by default) so the session can be
scripted in tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from pixelcanvas.core.errors import CanvasError
from pixelcanvas.core.models import Point
from pixelcanvas.render.canvas import Canvas
from pixelcanvas.render.shapes import Circle, Rectangle, ShapeBase, Triangle

__all__ = ["DrawingSession", "prompt_dimensions", "MENU"]

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = (
    "Select a shape to draw: \n"
    "\t R for a rectangle\n"
    "\t T for a triangle\n"
    "\t C for a circle\n"
    " or X to stop drawing shapes."
)


def _parse_ints(line: str, count: int) -> Optional[Tuple[int, ...]]:
    parts = line.replace(",", " ").split()
    if len(parts) != count:
        return None
    try:
        return tuple(int(p) for p in parts)
    except ValueError:
        return None


def _ask_ints(read: Reader, write: Writer, prompt: str, count: int) -> Tuple[int, ...]:
    while True:
        values = _parse_ints(read(prompt), count)
        if values is not None:
            return values
        noun = "whole number" if count == 1 else f"{count} whole numbers"
        write(f"Please enter {noun}.")


def prompt_dimensions(
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Tuple[int, int]:
    """Ask for a positive canvas width and height.

    A dimension passed in as *width* or *height* is kept and only the
    missing one is prompted for.
    """
    read = read if read is not None else input
    write = write if write is not None else print
    dims = []
    for axis, known in (("columns (width)", width), ("rows (height)", height)):
        if known is not None:
            dims.append(known)
            continue
        while True:
            (n,) = _ask_ints(
                read,
                write,
                f"Enter the number of {axis} that you would like the display to have: ",
                1,
            )
            if n > 0:
                dims.append(n)
                break
            write("The value must be greater than zero.")
    return dims[0], dims[1]


class DrawingSession:
    """Menu loop that draws user-described shapes onto one canvas."""

    def __init__(
        self,
        canvas: Canvas,
        *,
        read: Optional[Reader] = None,
        write: Optional[Writer] = None,
        output_dir: str | Path | None = None,
    ) -> None:
        self.canvas = canvas
        self.output_dir = output_dir
        self.history: list[ShapeBase] = []
        self._read: Reader = read if read is not None else input
        self._write: Writer = write if write is not None else print
        self._prompts: Dict[str, Callable[[], ShapeBase]] = {
            "R": self.prompt_rectangle,
            "T": self.prompt_triangle,
            "C": self.prompt_circle,
        }

    # Prompts ---------------------------------------------------------------
    def _ask_point(self, prompt: str) -> Point:
        x, y = _ask_ints(self._read, self._write, prompt, 2)
        return Point(x=x, y=y)

    def _ask_color(self, shape_name: str) -> str:
        return self._read(f"Enter the color of the {shape_name}: ").strip()

    def prompt_rectangle(self) -> Rectangle:
        ll = self._ask_point(
            "Enter the X and Y values of the lower left corner of the rectangle: "
        )
        ur = self._ask_point(
            "Enter the X and Y values of the upper right corner of the rectangle: "
        )
        return Rectangle(ll=ll, ur=ur, color=self._ask_color("rectangle"))

    def prompt_triangle(self) -> Triangle:
        pts = [
            self._ask_point(
                f"Enter the X and Y values of the {nth} point of the triangle: "
            )
            for nth in ("first", "second", "third")
        ]
        return Triangle(
            pt0=pts[0], pt1=pts[1], pt2=pts[2], color=self._ask_color("triangle")
        )

    def prompt_circle(self) -> Circle:
        center = self._ask_point(
            "Enter the X and Y values of the center of the circle: "
        )
        (r,) = _ask_ints(
            self._read, self._write, "Enter the value of the radius of the circle: ", 1
        )
        return Circle(center=center, r=r, color=self._ask_color("circle"))

    # Actions ---------------------------------------------------------------
    def draw(self, shape: ShapeBase) -> bool:
        """Describe and draw *shape*, reporting the outcome. Returns success."""
        self._write(shape.describe())
        try:
            shape.draw(self.canvas)
        except CanvasError as e:
            self._write(f"**Error: {e}")
            return False
        self.history.append(shape)
        self._write(f"{shape.label} drawn successfully.")
        return True

    def menu_loop(self) -> None:
        """Prompt for shapes until the user chooses X."""
        while True:
            self._write(MENU)
            choice = self._read("Your choice --> ").strip().upper()
            if choice == "X":
                return
            prompt = self._prompts.get(choice)
            if prompt is None:
                self._write("Invalid choice, please try again.")
                continue
            self.draw(prompt())

    def save(self) -> int:
        """Ask for a file name and export the canvas. Returns an exit code."""
        name = self._read(
            "Enter the name of the .ppm file in which the results should be saved: "
        ).strip()
        try:
            self.canvas.export(name, self.output_dir)
        except CanvasError as e:
            self._write(f"**Error: {e}")
            return 1
        self._write("Done. Exiting program...")
        return 0

    def run(self) -> int:
        """Run the menu loop, then export. Returns 0 on a successful export."""
        try:
            self.menu_loop()
        except EOFError:
            self._write("")
            logger.info("input closed; leaving the drawing menu")
        try:
            return self.save()
        except EOFError:
            logger.warning("input closed before a file name was given; nothing exported")
            return 1
