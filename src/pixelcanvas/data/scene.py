"""JSON scene files.

A scene is an ordered list of shape records, optionally with the canvas
size it was drawn on. Two layouts are accepted:

    - A document ``{"width": W, "height": H, "shapes": [...]}``.
    - A bare array of shape records.

Each record names its ``kind`` (``rectangle``, ``triangle`` or ``circle``)
plus that shape's fields; points may be ``[x, y]`` pairs or ``{x, y}``
objects, e.g.::

    {"kind": "circle", "center": [10, 10], "r": 3, "color": "blue"}

Records that fail validation are skipped with a warning. Color names are
not checked here; an unknown color is reported when the shape is drawn.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from pydantic import TypeAdapter, ValidationError

from pixelcanvas.core.errors import CanvasError, ExportError
from pixelcanvas.render.canvas import PixelSurface
from pixelcanvas.render.shapes import Shape, ShapeBase

__all__ = ["Scene", "load_scene_json", "save_scene_json", "draw_scene"]

logger = logging.getLogger(__name__)

_SHAPE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Shape)


@dataclass(frozen=True)
class Scene:
    shapes: list[ShapeBase] = field(default_factory=list)
    width: int | None = None
    height: int | None = None


def _coerce_dim(v: object) -> int | None:
    if isinstance(v, bool) or not isinstance(v, int):
        return None
    return v if v > 0 else None


def load_scene_json(path: str | Path) -> Scene:
    """Load a scene from a JSON file.

    Parameters
    ----------
    path: str | Path
        File holding either layout described in the module docstring.

    Returns
    -------
    Scene
        Valid shapes in file order, plus the canvas size when present.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    width = height = None
    if isinstance(data, dict):
        width = _coerce_dim(data.get("width"))
        height = _coerce_dim(data.get("height"))
        records = data.get("shapes")
    else:
        records = data

    shapes: list[ShapeBase] = []
    if not isinstance(records, list):
        logger.warning("scene %s has no shape list", path)
        return Scene(shapes=shapes, width=width, height=height)

    for i, item in enumerate(records):
        try:
            shapes.append(_SHAPE_ADAPTER.validate_python(item))
        except ValidationError as e:
            logger.warning(
                "skipping invalid shape record %d in %s: %s",
                i,
                path,
                e.errors()[0]["msg"],
            )
    return Scene(shapes=shapes, width=width, height=height)


def save_scene_json(
    path: str | Path,
    shapes: Sequence[ShapeBase],
    *,
    width: int | None = None,
    height: int | None = None,
) -> Path:
    """Atomically write *shapes* (and the canvas size, if given) as a scene.

    Raises:
        ExportError: when the file cannot be created or written.
    """
    out = Path(path)
    doc: dict[str, Any] = {}
    if width is not None and height is not None:
        doc["width"] = int(width)
        doc["height"] = int(height)
    doc["shapes"] = [s.model_dump(mode="json") for s in shapes]
    tmp = out.with_name(out.name + ".tmp")
    try:
        tmp.write_text(json.dumps(doc, indent=2), encoding="utf-8")
        os.replace(tmp, out)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        logger.error("failed to write scene %s: %s", out, e)
        raise ExportError(f"Unable to save scene file {str(out)!r}.") from e
    logger.info("saved %d shapes to %s", len(shapes), out)
    return out


def draw_scene(
    surface: PixelSurface, shapes: Sequence[ShapeBase]
) -> list[tuple[ShapeBase, CanvasError | None]]:
    """Draw *shapes* in order, collecting each one's error instead of stopping."""
    results: list[tuple[ShapeBase, CanvasError | None]] = []
    for shape in shapes:
        try:
            shape.draw(surface)
        except CanvasError as e:
            logger.info("%s not drawn: %s", shape.describe(), e)
            results.append((shape, e))
        else:
            results.append((shape, None))
    return results
