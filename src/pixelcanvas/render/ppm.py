"""Plain-text PPM (``P3``) encoding and export.

Layout::

    P3
    <width> <height>
    255
    r g b r g b ... r g b      <- row y = 0
    ...

Rows run top to bottom (increasing y); within a row pixels run left to
right (increasing x). Files are written to a temporary sibling first and
atomically renamed, so a reader never sees a half-written image.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from pixelcanvas.core.errors import ExportError
from pixelcanvas.core.palette import rgb_for

if TYPE_CHECKING:
    from pixelcanvas.render.canvas import PixelSurface

__all__ = ["PPM_MAGIC", "PPM_MAX_VALUE", "PPM_SUFFIX", "encode_ppm", "ppm_path", "write_ppm"]

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255
PPM_SUFFIX = ".ppm"


def _iter_rows(surface: "PixelSurface") -> Iterator[str]:
    width, height = surface.dimensions()
    for y in range(height):
        triples = []
        for x in range(width):
            r, g, b = rgb_for(surface.get_pixel(x, y))
            triples.append(f"{r} {g} {b}")
        yield " ".join(triples)


def encode_ppm(surface: "PixelSurface") -> str:
    """Return the full ``P3`` document for *surface*, newline terminated."""
    width, height = surface.dimensions()
    lines = [PPM_MAGIC, f"{width} {height}", str(PPM_MAX_VALUE)]
    lines.extend(_iter_rows(surface))
    return "\n".join(lines) + "\n"


def ppm_path(name: str, directory: str | Path | None = None) -> Path:
    """Return ``<directory>/<name>.ppm`` (``directory`` defaults to cwd)."""
    base = Path(directory).expanduser() if directory is not None else Path(".")
    return base / f"{name}{PPM_SUFFIX}"


def write_ppm(
    surface: "PixelSurface", name: str, directory: str | Path | None = None
) -> Path:
    """Encode *surface* and write it to ``<name>.ppm``.

    Missing parent directories are not created.

    Raises:
        ExportError: when the destination cannot be created or written.
    """
    if not name:
        raise ExportError("Unable to create PPM file: empty file name.")
    path = ppm_path(name, directory)
    text = encode_ppm(surface)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(text, encoding="ascii")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        logger.error("failed to write %s: %s", path, e)
        raise ExportError(f"Unable to create PPM file {str(path)!r}.") from e
    width, height = surface.dimensions()
    logger.info("exported %dx%d canvas to %s", width, height, path)
    return path
