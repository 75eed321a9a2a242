"""Group: moves and scales a set of layout objects together.

Changing a group's x or y translates every child by the same amount.
Changing its width or height scales every child proportionally about the
group's own top-left corner, so the group behaves like one rigid composite.
Setting a dimension to its current value returns the group unchanged, so
zero-sized nested groups survive a resize of their parent.

The bounding rect is computed from the children when the group is built
(``group``) or when its children are replaced (``with_children``). Children
modified outside of those two calls leave the bounding rect stale; call
``with_children`` again to resynchronize it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from ..layout.accessors import surrounding_rect
from .errors import DegenerateGeometryError
from .geometry import Rect
from .protocol import LayoutObject, ensure_layout_object

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Group:
    """A bounding Rect plus an ordered tuple of child layout objects.

    Children may be any LayoutObject, including other groups. Build groups
    with ``group(children)`` rather than calling the constructor directly so
    that the bounding rect matches the children.
    """

    rect: Rect
    children: tuple[LayoutObject, ...] = ()

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

    def with_x(self, x: float) -> Group:
        delta = x - self.rect.x
        return replace(
            self,
            rect=self.rect.with_x(x),
            children=tuple(c.with_x(c.x + delta) for c in self.children),
        )

    def with_y(self, y: float) -> Group:
        delta = y - self.rect.y
        return replace(
            self,
            rect=self.rect.with_y(y),
            children=tuple(c.with_y(c.y + delta) for c in self.children),
        )

    def with_width(self, width: float) -> Group:
        if width == self.rect.width:
            return self
        if self.rect.width == 0:
            raise DegenerateGeometryError(
                "Cannot scale a group of width 0 to a new width."
            )
        scale = width / self.rect.width
        origin = self.rect.x
        logger.debug("Scaling %d children horizontally by %s", len(self.children), scale)
        children = tuple(
            c.with_x(origin + (c.x - origin) * scale).with_width(c.width * scale)
            for c in self.children
        )
        return replace(self, rect=self.rect.with_width(width), children=children)

    def with_height(self, height: float) -> Group:
        if height == self.rect.height:
            return self
        if self.rect.height == 0:
            raise DegenerateGeometryError(
                "Cannot scale a group of height 0 to a new height."
            )
        scale = height / self.rect.height
        origin = self.rect.y
        logger.debug("Scaling %d children vertically by %s", len(self.children), scale)
        children = tuple(
            c.with_y(origin + (c.y - origin) * scale).with_height(c.height * scale)
            for c in self.children
        )
        return replace(self, rect=self.rect.with_height(height), children=children)

    def with_children(self, children: Iterable[LayoutObject]) -> Group:
        """Replace the children and recompute the bounding rect from them."""
        return group(children)

    def to_dict(self) -> dict:
        return {
            **self.rect.to_dict(),
            "children": [_child_dict(c) for c in self.children],
        }


def group(children: Iterable[LayoutObject]) -> Group:
    """Create a Group whose bounding rect surrounds all the children.

    Raises EmptyCollectionError when children is empty.
    """
    children = tuple(ensure_layout_object(c) for c in children)
    return Group(rect=surrounding_rect(children), children=children)


def group_children(item: Group) -> list[LayoutObject]:
    return list(item.children)


def with_group_children(item: Group, children: Iterable[LayoutObject]) -> Group:
    """Return a copy of the group holding new children and a refreshed
    bounding rect. The children are not transformed."""
    return item.with_children(children)


def _child_dict(child: LayoutObject) -> dict:
    # Caller-defined layout objects may not provide to_dict
    if hasattr(child, "to_dict"):
        return child.to_dict()
    return {"x": child.x, "y": child.y, "width": child.width, "height": child.height}
