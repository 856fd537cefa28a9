"""Fixed color palette.

The palette is closed: only the names below are valid colors, and an
unknown name is always an error rather than a fallback to some default.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidColorError

__all__ = ["RGB", "PALETTE", "BACKGROUND", "is_known_color", "check_color", "rgb_for"]

RGB = Tuple[int, int, int]

PALETTE: Mapping[str, RGB] = MappingProxyType(
    {
        "red": (255, 0, 0),
        "green": (0, 255, 0),
        "blue": (0, 0, 255),
        "yellow": (255, 255, 0),
        "orange": (255, 164, 0),
        "purple": (128, 0, 128),
        "brown": (165, 42, 42),
        "black": (0, 0, 0),
        "white": (255, 255, 255),
    }
)

# Fresh and cleared canvases are filled with this color
BACKGROUND = "white"


def is_known_color(name: object) -> bool:
    return isinstance(name, str) and name in PALETTE


def check_color(name: object) -> str:
    """Return *name* unchanged if it is a palette color.

    Raises:
        InvalidColorError: when *name* is not a palette key.
    """
    if not is_known_color(name):
        raise InvalidColorError(f"Attempt to use an invalid color: {name!r}.")
    return name  # type: ignore[return-value]


def rgb_for(name: str) -> RGB:
    """Look up the RGB triple for a palette color name."""
    return PALETTE[check_color(name)]
