"""Single-object transforms: edge thresholds, extrusion, aspect constraints."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.errors import DegenerateGeometryError
from ..core.protocol import LayoutObject, is_layout_object
from ..layout.accessors import bottom, right, with_bottom, with_right


# --- Thresholds ---

def threshold_left(item: LayoutObject, value: float) -> LayoutObject:
    """Push the item right so it starts at value. Items already past the
    line are returned unchanged, e.g. a 2x2 rect at x=0 thresholded at 1
    moves to x=1, the same rect at x=5 stays put.
    """
    return item.with_x(value) if item.x < value else item


def threshold_right(item: LayoutObject, value: float) -> LayoutObject:
    """Push the item left so its right edge is at value, if it crosses it."""
    return with_right(item, value) if right(item) > value else item


def threshold_top(item: LayoutObject, value: float) -> LayoutObject:
    """Push the item down so it starts at value, if it starts above it."""
    return item.with_y(value) if item.y < value else item


def threshold_bottom(item: LayoutObject, value: float) -> LayoutObject:
    """Push the item up so its bottom edge is at value, if it crosses it."""
    return with_bottom(item, value) if bottom(item) > value else item


# --- Extrusion ---

def extrude(item: LayoutObject, value: float) -> LayoutObject:
    """Grow the item by value on every side, keeping its center.
    A negative value shrinks it: extruding a 2x2 rect at the origin by 1
    gives a 4x4 rect at (-1, -1).
    """
    return (
        item.with_x(item.x - value)
        .with_y(item.y - value)
        .with_width(item.width + value * 2)
        .with_height(item.height + value * 2)
    )


# --- Aspect ratio ---

def _constrain_width(item: LayoutObject, value: float) -> LayoutObject:
    if item.width == 0:
        raise DegenerateGeometryError(
            "Cannot preserve the aspect ratio of an item with width 0."
        )
    return item.with_width(value).with_height(item.height / item.width * value)


def _constrain_height(item: LayoutObject, value: float) -> LayoutObject:
    if item.height == 0:
        raise DegenerateGeometryError(
            "Cannot preserve the aspect ratio of an item with height 0."
        )
    return item.with_height(value).with_width(item.width / item.height * value)


def constrain_width(
    items: LayoutObject | Iterable[LayoutObject],
    value: float,
) -> LayoutObject | list[LayoutObject]:
    """Set the width to value and scale the height to keep the aspect ratio.

    Given a collection, applies the same width to every item and returns a
    list. A 2x4 rect constrained to width 4 becomes 4x8.
    """
    if is_layout_object(items):
        return _constrain_width(items, value)
    return [_constrain_width(i, value) for i in items]


def constrain_height(
    items: LayoutObject | Iterable[LayoutObject],
    value: float,
) -> LayoutObject | list[LayoutObject]:
    """Set the height to value and scale the width to keep the aspect ratio.

    Given a collection, applies the same height to every item and returns a
    list.
    """
    if is_layout_object(items):
        return _constrain_height(items, value)
    return [_constrain_height(i, value) for i in items]
