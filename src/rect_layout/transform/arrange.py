"""Sequential placement of collections: spread, distribute and flow.

Each item's placement depends on where the previous one landed, so every
function walks the items once, left to right (top to bottom), and returns a
new list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..core.errors import DegenerateGeometryError, EmptyCollectionError
from ..core.protocol import LayoutObject, ensure_layout_object
from ..layout.accessors import bottom, right, with_center_x, with_center_y
from ..layout.options import FlowOptions, SpreadOptions
from .edges import threshold_left, threshold_top

logger = logging.getLogger(__name__)


# --- Spread ---

def spread_horizontal(
    items: Iterable[LayoutObject],
    width: float,
    **options: Any,
) -> list[LayoutObject]:
    """Spread items over ``width`` in equal virtual columns.

    Each item is centered in its column, then pushed right as needed so it
    starts at least ``gap`` after the previous item. The first item is never
    moved left of where it started. Pushed items are no longer centered, but
    items never overlap.

    Options
    -------
    x : where the first column starts, default 0
    gap : minimum gap between items, default 0
    cols : number of columns, default ``len(items)``. May exceed the number
           of items, leaving trailing columns empty.
    """
    items = [ensure_layout_object(i) for i in items]
    opts = SpreadOptions.horizontal(options, len(items))
    if not items:
        raise EmptyCollectionError("Cannot spread an empty collection.")

    col_width = width / opts.slots
    offset = col_width / 2
    logger.debug("Spreading %d items over %d columns of %s", len(items), opts.slots, col_width)

    result: list[LayoutObject] = []
    prev = None
    for index, item in enumerate(items):
        floor = item.x if prev is None else opts.gap + right(prev)
        item = threshold_left(with_center_x(item, opts.origin + col_width * index + offset), floor)
        result.append(item)
        prev = item
    return result


def spread_vertical(
    items: Iterable[LayoutObject],
    height: float,
    **options: Any,
) -> list[LayoutObject]:
    """Spread items over ``height`` in equal virtual rows.

    Same as ``spread_horizontal`` on the y axis, with options ``y``, ``gap``
    and ``rows``.
    """
    items = [ensure_layout_object(i) for i in items]
    opts = SpreadOptions.vertical(options, len(items))
    if not items:
        raise EmptyCollectionError("Cannot spread an empty collection.")

    row_height = height / opts.slots
    offset = row_height / 2
    logger.debug("Spreading %d items over %d rows of %s", len(items), opts.slots, row_height)

    result: list[LayoutObject] = []
    prev = None
    for index, item in enumerate(items):
        floor = item.y if prev is None else opts.gap + bottom(prev)
        item = threshold_top(with_center_y(item, opts.origin + row_height * index + offset), floor)
        result.append(item)
        prev = item
    return result


# --- Distribute ---

def _uniform_gap(span: float, sizes: list[float]) -> float:
    if not sizes:
        raise EmptyCollectionError("Cannot distribute an empty collection.")
    if len(sizes) == 1:
        raise DegenerateGeometryError(
            "Cannot distribute a single item: there is no gap to compute."
        )
    return (span - sum(sizes)) / (len(sizes) - 1)


def distribute_horizontal(items: Iterable[LayoutObject], width: float) -> list[LayoutObject]:
    """Place items left to right with one uniform gap so that they cover
    exactly ``width``, starting at the first item's current x. Widths 1, 2
    and 3 distributed over 12 from x=0 land at x = 0, 4 and 9.
    """
    items = [ensure_layout_object(i) for i in items]
    gap = _uniform_gap(width, [i.width for i in items])
    logger.debug("Distributing %d items horizontally with gap %s", len(items), gap)

    result: list[LayoutObject] = []
    position = items[0].x
    for item in items:
        result.append(item.with_x(position))
        position = position + item.width + gap
    return result


def distribute_vertical(items: Iterable[LayoutObject], height: float) -> list[LayoutObject]:
    """Place items top to bottom with one uniform gap so that they cover
    exactly ``height``, starting at the first item's current y."""
    items = [ensure_layout_object(i) for i in items]
    gap = _uniform_gap(height, [i.height for i in items])
    logger.debug("Distributing %d items vertically with gap %s", len(items), gap)

    result: list[LayoutObject] = []
    position = items[0].y
    for item in items:
        result.append(item.with_y(position))
        position = position + item.height + gap
    return result


# --- Flow ---

def flow_horizontal(items: Iterable[LayoutObject], **options: Any) -> list[LayoutObject]:
    """Place items left to right, each ``gap`` after the previous one.

    Options
    -------
    x : where the first item starts, default 0
    gap : distance between items, default 0
    """
    opts = FlowOptions.horizontal(options)
    result: list[LayoutObject] = []
    position = opts.origin
    for item in items:
        item = ensure_layout_object(item)
        result.append(item.with_x(position))
        position = position + item.width + opts.gap
    return result


def flow_vertical(items: Iterable[LayoutObject], **options: Any) -> list[LayoutObject]:
    """Place items top to bottom, each ``gap`` after the previous one.

    Options: ``y`` (start, default 0) and ``gap`` (default 0).
    """
    opts = FlowOptions.vertical(options)
    result: list[LayoutObject] = []
    position = opts.origin
    for item in items:
        item = ensure_layout_object(item)
        result.append(item.with_y(position))
        position = position + item.height + opts.gap
    return result
