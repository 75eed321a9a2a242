"""Tests for spread, distribute and flow."""

import pytest

from rect_layout import (
    DegenerateGeometryError,
    EmptyCollectionError,
    distribute_horizontal,
    distribute_vertical,
    flow_horizontal,
    flow_vertical,
    group,
    rect,
    right,
    sprite,
    spread_horizontal,
    spread_vertical,
)


class TestSpreadHorizontal:
    def test_centered_in_columns(self, staircase):
        assert spread_horizontal(staircase, 9) == [
            rect(1, 1, 1.0, 0),
            rect(2, 2, 3.5, 1),
            rect(3, 3, 6.0, 2),
        ]

    def test_gap_pushes_right(self, staircase):
        assert spread_horizontal(staircase, 6, gap=2) == [
            rect(1, 1, 0.5, 0),
            rect(2, 2, 3.5, 1),
            rect(3, 3, 7.5, 2),
        ]

    def test_start_x(self, staircase):
        out = spread_horizontal(staircase, 9, x=2)
        assert [r.x for r in out] == [3.0, 5.5, 8.0]

    def test_extra_columns(self):
        out = spread_horizontal([rect(1, 1, 0, 0), rect(2, 2, 1, 1)], 9, cols=3)
        assert out == [rect(1, 1, 1.0, 0), rect(2, 2, 3.5, 1)]

    def test_first_item_not_moved_before_its_start(self):
        out = spread_horizontal([rect(10, 1, 0, 0), rect(10, 1)], 4)
        assert [r.x for r in out] == [0, 10]

    @pytest.mark.parametrize("gap", [0, 0.5, 3])
    @pytest.mark.parametrize("widths", [[1, 1, 1], [5, 1, 8, 2], [0.3, 12.7, 4.1]])
    def test_no_overlap(self, widths, gap):
        items = [rect(w, 1) for w in widths]
        out = spread_horizontal(items, 10, gap=gap)
        for prev, nxt in zip(out, out[1:]):
            assert right(prev) + gap <= nxt.x + 1e-9

    def test_widths_unchanged(self, staircase):
        out = spread_horizontal(staircase, 100, gap=1)
        assert [r.width for r in out] == [1, 2, 3]

    def test_empty(self):
        with pytest.raises(EmptyCollectionError):
            spread_horizontal([], 10)

    def test_inputs_untouched(self, staircase):
        before = list(staircase)
        spread_horizontal(staircase, 9)
        assert staircase == before


class TestSpreadVertical:
    def test_centered_in_rows(self, staircase):
        out = spread_vertical(staircase, 9)
        assert [r.y for r in out] == [1.0, 3.5, 6.0]
        assert [r.x for r in out] == [0, 1, 2]

    def test_gap_pushes_down(self, staircase):
        out = spread_vertical(staircase, 6, gap=2)
        assert [r.y for r in out] == [0.5, 3.5, 7.5]

    def test_start_y(self, staircase):
        out = spread_vertical(staircase, 9, y=2)
        assert [r.y for r in out] == [3.0, 5.5, 8.0]

    def test_extra_rows(self):
        out = spread_vertical([rect(1, 1, 0, 0), rect(2, 2, 1, 1)], 9, rows=3)
        assert [r.y for r in out] == [1.0, 3.5]

    def test_groups_move_as_a_unit(self):
        g = group([rect(2, 2), rect(1, 1, 0, 2)])
        out = spread_vertical([g, rect(1, 1)], 20)
        assert out[0].y == 3.5
        assert [c.y for c in out[0].children] == [3.5, 5.5]


class TestDistribute:
    def test_horizontal(self, staircase):
        out = distribute_horizontal(staircase, 12)
        assert [r.x for r in out] == [0, 4.0, 9.0]
        assert [r.width for r in out] == [1, 2, 3]
        assert [r.y for r in out] == [0, 1, 2]

    def test_vertical(self, staircase):
        out = distribute_vertical(staircase, 12)
        assert [r.y for r in out] == [0, 4.0, 9.0]
        assert [r.x for r in out] == [0, 1, 2]

    def test_starts_at_first_item(self):
        out = distribute_horizontal([rect(2, 1, 5, 0), rect(2, 1, 0, 0)], 10)
        assert [r.x for r in out] == [5, 13.0]

    def test_total_span_met(self):
        items = [rect(3, 1), rect(4, 1), rect(1, 1), rect(2, 1)]
        out = distribute_horizontal(items, 25)
        assert right(out[-1]) - out[0].x == pytest.approx(25)

    def test_overfull_gives_negative_gap(self):
        out = distribute_horizontal([rect(4, 1), rect(4, 1)], 6)
        assert [r.x for r in out] == [0, 2.0]

    def test_single_item(self):
        with pytest.raises(DegenerateGeometryError):
            distribute_horizontal([rect(1, 1)], 10)

    def test_empty(self):
        with pytest.raises(EmptyCollectionError):
            distribute_vertical([], 10)


class TestFlow:
    def test_horizontal_default(self, staircase):
        out = flow_horizontal(staircase)
        assert [r.x for r in out] == [0, 1, 3]

    def test_horizontal_gap(self):
        out = flow_horizontal([rect(1, 1), rect(2, 2), rect(3, 3)], gap=2)
        assert [r.x for r in out] == [0, 3, 7]

    def test_horizontal_gap_and_start(self, staircase):
        out = flow_horizontal(staircase, gap=2, x=2)
        assert [r.x for r in out] == [2, 5, 9]
        assert [r.y for r in out] == [0, 1, 2]

    def test_vertical(self, staircase):
        assert [r.y for r in flow_vertical(staircase)] == [0, 1, 3]
        assert [r.y for r in flow_vertical(staircase, gap=2)] == [0, 3, 7]
        assert [r.y for r in flow_vertical(staircase, gap=2, y=2)] == [2, 5, 9]

    def test_empty(self):
        assert flow_horizontal([]) == []

    def test_keeps_sprite_content(self):
        out = flow_horizontal([sprite(rect(1, 1), "a"), sprite(rect(1, 1), "b")], gap=1)
        assert [s.content for s in out] == ["a", "b"]
        assert [s.x for s in out] == [0, 2]
