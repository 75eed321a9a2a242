"""Shared test fixtures for rect-layout."""

from dataclasses import dataclass, replace

import pytest

from rect_layout import rect


@pytest.fixture
def staircase():
    """Three squares of growing size stepping down and to the right."""
    return [rect(1, 1, 0, 0), rect(2, 2, 1, 1), rect(3, 3, 2, 2)]


@pytest.fixture
def two_boxes():
    """A 2x2 box at the origin and a 3x3 box at (2, 2)."""
    return [rect(2, 2), rect(3, 3, 2, 2)]


@dataclass(frozen=True)
class Box:
    """Caller-defined layout object, not derived from any library class."""

    left_edge: float
    top_edge: float
    w: float
    h: float

    @property
    def x(self):
        return self.left_edge

    @property
    def y(self):
        return self.top_edge

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def with_x(self, x):
        return replace(self, left_edge=x)

    def with_y(self, y):
        return replace(self, top_edge=y)

    def with_width(self, width):
        return replace(self, w=width)

    def with_height(self, height):
        return replace(self, h=height)


@pytest.fixture
def custom_box():
    return Box(left_edge=1, top_edge=2, w=4, h=6)
