"""Tests for value to pixel mapping."""

from __future__ import annotations

import pytest

from chart_geometry.scale import Orientation, VerticalScale, step_width
from chart_geometry.series import Bounds


def test_step_width_spreads_samples_across_width() -> None:
    """Space samples so the first and last touch the edges."""

    assert step_width(5, 100.0) == 25.0
    assert step_width(1, 100.0) == 0.0
    assert step_width(0, 100.0) == 0.0


def test_screen_and_math_orientations_mirror() -> None:
    """Screen y is height minus math y."""

    screen = VerticalScale(Bounds(2.0, 5.0), 30.0)
    math_ = VerticalScale(Bounds(2.0, 5.0), 30.0, orientation=Orientation.MATH)

    assert screen.value_to_px(2.0) == pytest.approx(30.0)
    assert screen.value_to_px(5.0) == pytest.approx(0.0)
    assert math_.value_to_px(2.0) == pytest.approx(0.0)
    assert math_.value_to_px(5.0) == pytest.approx(30.0)
    for v in (2.0, 3.0, 4.5):
        assert screen.value_to_px(v) == pytest.approx(30.0 - math_.value_to_px(v))


def test_px_to_value_inverts_mapping() -> None:
    """Map pixels back to values."""

    vs = VerticalScale(Bounds(-4.0, 6.0), 50.0)
    for v in (-4.0, 0.0, 1.25, 6.0):
        assert vs.px_to_value(vs.value_to_px(v)) == pytest.approx(v)


def test_offset_moves_the_baseline() -> None:
    """An offset replaces bounds.min as the value drawn at the baseline."""

    vs = VerticalScale(Bounds(0.0, 10.0), 100.0, offset=5.0, orientation=Orientation.MATH)
    assert vs.base == 5.0
    assert vs.value_to_px(5.0) == 0.0
    assert vs.value_to_px(10.0) == pytest.approx(50.0)


def test_flat_bounds_collapse_to_baseline() -> None:
    """Degenerate bounds give a zero scale instead of dividing by zero."""

    vs = VerticalScale.for_values([4.0, 4.0], 80.0)
    assert vs.step_height == 0.0
    assert vs.value_to_px(4.0) == 80.0
    assert vs.px_to_value(12.0) == 4.0
