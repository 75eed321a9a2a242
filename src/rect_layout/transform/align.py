"""Align collections of items on a shared edge."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.protocol import LayoutObject
from ..layout.accessors import bottom, left, right, top, with_bottom, with_right


def align_left(items: Iterable[LayoutObject], value: float | None = None) -> list[LayoutObject]:
    """Move every item so its x is value, or the leftmost x when value is None."""
    items = list(items)
    if value is None:
        value = left(items)
    return [i.with_x(value) for i in items]


def align_top(items: Iterable[LayoutObject], value: float | None = None) -> list[LayoutObject]:
    """Move every item so its y is value, or the topmost y when value is None."""
    items = list(items)
    if value is None:
        value = top(items)
    return [i.with_y(value) for i in items]


def align_right(items: Iterable[LayoutObject], value: float | None = None) -> list[LayoutObject]:
    """Move every item so its right edge is value, or the rightmost edge when
    value is None."""
    items = list(items)
    if value is None:
        value = right(items)
    return [with_right(i, value) for i in items]


def align_bottom(items: Iterable[LayoutObject], value: float | None = None) -> list[LayoutObject]:
    """Move every item so its bottom edge is value, or the bottommost edge
    when value is None."""
    items = list(items)
    if value is None:
        value = bottom(items)
    return [with_bottom(i, value) for i in items]
