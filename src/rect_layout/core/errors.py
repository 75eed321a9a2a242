"""Exception types raised by layout operations."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for all rect_layout errors."""


class EmptyCollectionError(LayoutError, ValueError):
    """A min/max/bounding-box was requested over an empty collection."""


class DegenerateGeometryError(LayoutError, ZeroDivisionError):
    """A ratio was requested against a zero width, height or count."""


class LayoutConfigError(LayoutError, ValueError):
    """An option record contains an unknown key or an invalid value."""
