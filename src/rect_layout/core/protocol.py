"""LayoutObject: the capability contract every layoutable object satisfies."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LayoutObject(Protocol):
    """Anything that can be measured and moved by the layout functions.

    Implementations expose x, y, width and height as readable attributes and
    a ``with_*`` method per attribute returning a new object with that single
    attribute replaced. Objects are never modified in place.

    Rect, Sprite and Group implement it; any caller-defined type with the same
    eight operations takes part in every accessor and transform.
    """

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def with_x(self, x: float) -> LayoutObject: ...

    def with_y(self, y: float) -> LayoutObject: ...

    def with_width(self, width: float) -> LayoutObject: ...

    def with_height(self, height: float) -> LayoutObject: ...


def is_layout_object(value: Any) -> bool:
    """Return True if value satisfies the LayoutObject contract."""
    return isinstance(value, LayoutObject)


def ensure_layout_object(value: Any) -> LayoutObject:
    """Return value unchanged, or raise TypeError if it is not layoutable."""
    if not is_layout_object(value):
        raise TypeError(
            f"Expected a LayoutObject (Rect, Sprite, Group or a compatible "
            f"type), got {type(value).__name__}."
        )
    return value
