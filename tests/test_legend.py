"""Tests for y-axis guide lines."""

from __future__ import annotations

import pytest

from chart_geometry.legend import Legend
from chart_geometry.path import Line, Move
from chart_geometry.scale import Orientation
from chart_geometry.series import Bounds


def test_step_values_split_the_range_evenly() -> None:
    """Five guide values for the default four steps."""

    legend = Legend(Bounds(0, 100), 200)
    assert legend.step_values() == [0, 25, 50, 75, 100]
    assert legend.labels() == ["0.00", "25.00", "50.00", "75.00", "100.00"]


def test_step_positions_follow_orientation() -> None:
    """Screen orientation puts step 0 on the bottom edge."""

    screen = Legend(Bounds(0, 100), 200)
    math_ = Legend(Bounds(0, 100), 200, orientation=Orientation.MATH)
    assert [screen.step_y(i) for i in range(5)] == [200, 150, 100, 50, 0]
    assert [math_.step_y(i) for i in range(5)] == [0, 50, 100, 150, 200]


def test_x_axis_only_when_range_spans_zero() -> None:
    """Draw the zero line only when zero is inside the bounds."""

    spanning = Legend(Bounds(-10, 30), 200)
    assert spanning.shows_x_axis
    assert spanning.x_axis_y() == pytest.approx(150.0)

    positive = Legend(Bounds(5, 10), 200)
    assert not positive.shows_x_axis
    assert positive.x_axis_y() is None


def test_lines_are_horizontal_paths() -> None:
    """Each guide is a move plus one horizontal line."""

    lines = Legend(Bounds(0, 8), 40, total_steps=2).lines(120)
    assert len(lines) == 3
    first = lines[0].elements
    assert first == [Move((0.0, 40.0)), Line((120.0, 40.0))]


def test_flat_bounds_put_every_step_on_the_baseline() -> None:
    """Degenerate bounds do not divide by zero."""

    legend = Legend(Bounds(3, 3), 60)
    assert {legend.step_y(i) for i in range(5)} == {60.0}
    assert legend.step_values() == [3, 3, 3, 3, 3]


def test_total_steps_must_be_positive() -> None:
    """Zero steps cannot be laid out."""

    with pytest.raises(ValueError):
        Legend(Bounds(0, 1), 10, total_steps=0)
