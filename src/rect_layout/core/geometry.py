"""Rect: the geometric primitive behind every layout computation."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle.

    No sign constraint is placed on width or height; negative or zero sized
    rectangles are valid values.
    """

    x: float
    y: float
    width: float
    height: float

    def with_x(self, x: float) -> Rect:
        return replace(self, x=x)

    def with_y(self, y: float) -> Rect:
        return replace(self, y=y)

    def with_width(self, width: float) -> Rect:
        return replace(self, width=width)

    def with_height(self, height: float) -> Rect:
        return replace(self, height=height)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def rect(width: float, height: float, x: float = 0, y: float = 0) -> Rect:
    """Create a Rect. Size comes first, position defaults to the origin."""
    return Rect(x=x, y=y, width=width, height=height)
