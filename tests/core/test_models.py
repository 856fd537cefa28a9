from __future__ import annotations

import pytest
from pydantic import ValidationError

from pixelcanvas.core.errors import (
    CanvasError,
    ExportError,
    OutOfBoundsError,
    RasterInvariantError,
)
from pixelcanvas.core.models import Point


def test_point_from_pair_and_keywords() -> None:
    assert Point.model_validate((3, 4)) == Point(x=3, y=4)
    assert Point.model_validate([0, 7]).as_tuple() == (0, 7)
    assert str(Point(x=-1, y=2)) == "(-1,2)"


def test_point_is_frozen() -> None:
    p = Point(x=1, y=1)
    with pytest.raises(ValidationError):
        p.x = 5  # type: ignore[misc]


@pytest.mark.parametrize("bad", [(1,), (1, 2, 3), (1.5, 2), ("a", 2)])
def test_point_rejects_bad_input(bad: object) -> None:
    with pytest.raises(ValidationError):
        Point.model_validate(bad)


def test_error_messages_and_hierarchy() -> None:
    assert str(OutOfBoundsError()) == (
        "Attempt to draw a figure out of bounds of the screen."
    )
    assert str(ExportError()) == "Unable to create PPM file."
    assert str(ExportError("custom")) == "custom"
    assert not issubclass(RasterInvariantError, CanvasError)
