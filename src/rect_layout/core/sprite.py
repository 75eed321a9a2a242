"""Sprite: a Rect paired with the external content it positions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .geometry import Rect


@dataclass(frozen=True)
class Sprite:
    """Tracks position and size of an external object (an image, a text
    block, a pre-rendered SVG fragment...) through its inner Rect.

    Geometry operations forward to the Rect; content is opaque and is never
    inspected by the layout functions.
    """

    rect: Rect
    content: Any = None

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def y(self) -> float:
        return self.rect.y

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height

    def with_x(self, x: float) -> Sprite:
        return replace(self, rect=self.rect.with_x(x))

    def with_y(self, y: float) -> Sprite:
        return replace(self, rect=self.rect.with_y(y))

    def with_width(self, width: float) -> Sprite:
        return replace(self, rect=self.rect.with_width(width))

    def with_height(self, height: float) -> Sprite:
        return replace(self, rect=self.rect.with_height(height))

    def with_content(self, content: Any) -> Sprite:
        return replace(self, content=content)

    def to_dict(self) -> dict:
        return {**self.rect.to_dict(), "content": self.content}


def sprite(rect: Rect, content: Any) -> Sprite:
    """Create a Sprite wrapping rect and content."""
    return Sprite(rect=rect, content=content)


def sprite_content(item: Sprite) -> Any:
    return item.content


def with_sprite_content(item: Sprite, content: Any) -> Sprite:
    """Return a copy of the sprite holding new content, same geometry."""
    return item.with_content(content)
