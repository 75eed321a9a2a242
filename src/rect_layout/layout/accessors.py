"""Derived measurements over layout objects and collections of them.

Single-object functions read or reposition one item. Collection functions
reduce over the items' extents; they raise EmptyCollectionError for an empty
collection because a minimum or maximum is undefined there.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from ..core.errors import EmptyCollectionError
from ..core.geometry import Rect
from ..core.protocol import LayoutObject, ensure_layout_object, is_layout_object


# Column order of the extents array
_X, _Y, _RIGHT, _BOTTOM, _WIDTH, _HEIGHT = range(6)


def _extents(items: Iterable[LayoutObject], what: str) -> np.ndarray:
    """Return an (n, 6) array of x, y, right, bottom, width, height.

    The array holds the callers' own numbers (ints, floats, Fractions...)
    so reductions return them unchanged.
    """
    items = [ensure_layout_object(i) for i in items]
    if not items:
        raise EmptyCollectionError(f"Cannot compute {what} of an empty collection.")
    return np.array(
        [
            [i.x, i.y, i.x + i.width, i.y + i.height, i.width, i.height]
            for i in items
        ],
        dtype=object,
    )


# --- Centers ---

def center_x(item: LayoutObject) -> float:
    """Horizontal center of the item."""
    return item.x + item.width / 2


def with_center_x(item: LayoutObject, value: float) -> LayoutObject:
    """Move the item horizontally so that value becomes its center."""
    return item.with_x(value - item.width / 2)


def center_y(item: LayoutObject) -> float:
    return item.y + item.height / 2


def with_center_y(item: LayoutObject, value: float) -> LayoutObject:
    """Move the item vertically so that value becomes its center."""
    return item.with_y(value - item.height / 2)


# --- Sizes ---

def max_width(items: Iterable[LayoutObject]) -> float:
    return _extents(items, "max_width")[:, _WIDTH].max()


def max_height(items: Iterable[LayoutObject]) -> float:
    return _extents(items, "max_height")[:, _HEIGHT].max()


# --- Edges ---

def left(items: Iterable[LayoutObject]) -> float:
    """Leftmost x across the items."""
    return _extents(items, "left")[:, _X].min()


def top(items: Iterable[LayoutObject]) -> float:
    """Topmost y across the items."""
    return _extents(items, "top")[:, _Y].min()


def right(items: LayoutObject | Iterable[LayoutObject]) -> float:
    """Right edge of a single item, or the rightmost edge across a collection."""
    if is_layout_object(items):
        return items.x + items.width
    return _extents(items, "right")[:, _RIGHT].max()


def bottom(items: LayoutObject | Iterable[LayoutObject]) -> float:
    """Bottom edge of a single item, or the bottommost edge across a collection."""
    if is_layout_object(items):
        return items.y + items.height
    return _extents(items, "bottom")[:, _BOTTOM].max()


def with_right(item: LayoutObject, value: float) -> LayoutObject:
    """Move the item so that its right edge lands on value."""
    return item.with_x(value - item.width)


def with_bottom(item: LayoutObject, value: float) -> LayoutObject:
    """Move the item so that its bottom edge lands on value."""
    return item.with_y(value - item.height)


# --- Bounding box ---

def surrounding_rect(items: Sequence[LayoutObject] | Iterable[LayoutObject]) -> Rect:
    """Tightest Rect containing every item."""
    ext = _extents(items, "surrounding_rect")
    x0 = ext[:, _X].min()
    y0 = ext[:, _Y].min()
    x1 = ext[:, _RIGHT].max()
    y1 = ext[:, _BOTTOM].max()
    return Rect(x=x0, y=y0, width=x1 - x0, height=y1 - y0)
