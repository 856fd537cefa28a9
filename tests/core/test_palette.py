from __future__ import annotations

import pytest

from pixelcanvas.core.errors import CanvasError, InvalidColorError
from pixelcanvas.core.palette import (
    BACKGROUND,
    PALETTE,
    check_color,
    is_known_color,
    rgb_for,
)


def test_palette_values_exact() -> None:
    assert dict(PALETTE) == {
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
    assert BACKGROUND == "white"


def test_palette_is_read_only() -> None:
    with pytest.raises(TypeError):
        PALETTE["pink"] = (255, 192, 203)  # type: ignore[index]


@pytest.mark.parametrize("name", ["pink", "Red", "", " red", None, 3])
def test_unknown_names_rejected(name: object) -> None:
    assert not is_known_color(name)
    with pytest.raises(InvalidColorError):
        check_color(name)


def test_rgb_lookup() -> None:
    assert rgb_for("orange") == (255, 164, 0)
    with pytest.raises(InvalidColorError) as ei:
        rgb_for("teal")
    assert isinstance(ei.value, CanvasError)
    assert "invalid color" in str(ei.value)
