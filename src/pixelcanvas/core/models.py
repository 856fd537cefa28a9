"""Geometry value types shared by the rasterizers and scene files."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

__all__ = ["Point", "ShapeKind"]

ShapeKind = Literal["rectangle", "triangle", "circle"]


class Point(BaseModel):
    """Integer pixel coordinate.

    A point has no bounds of its own; whether it is valid depends on the
    canvas it is checked against. Accepts ``Point(x=1, y=2)`` or a plain
    ``(x, y)`` pair wherever a Point field is expected.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("a point needs exactly two coordinates")
            return {"x": data[0], "y": data[1]}
        return data

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
