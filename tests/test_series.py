"""Tests for samples, bounds and draw sizes."""

from __future__ import annotations

import pytest

from chart_geometry.series import Bounds, DrawSize, Sample, SampleSeries, resolve_bounds


def test_bounds_from_values_and_degenerate_flag() -> None:
    """Derive bounds from the data and flag flat series."""

    assert Bounds.of([3, 5, 2]) == Bounds(2.0, 5.0)
    assert Bounds.of([]) is None
    assert Bounds(4.0, 4.0).is_degenerate
    assert not Bounds(1.0, 4.0).is_degenerate


def test_bounds_reject_inverted_range() -> None:
    """Refuse bounds whose max is below min."""

    with pytest.raises(ValueError):
        Bounds(2.0, 1.0)


def test_supplied_bounds_widen_but_never_narrow() -> None:
    """Explicit bounds grow to cover the data extent."""

    assert resolve_bounds([3, 5, 2], Bounds(0.0, 4.0)) == Bounds(0.0, 5.0)
    assert resolve_bounds([3, 5, 2], Bounds(0.0, 10.0)) == Bounds(0.0, 10.0)
    assert resolve_bounds([], None) == Bounds(0.0, 0.0)


def test_series_bounds_use_min_and_max_y() -> None:
    """Series-level min_y/max_y act as supplied bounds."""

    series = SampleSeries.from_values([3, 5, 2], min_y=0, max_y=4)
    assert series.bounds() == Bounds(0.0, 5.0)

    only_min = SampleSeries.from_values([3, 5, 2], min_y=-10)
    assert only_min.bounds() == Bounds(2.0, 5.0)


def test_series_constructors_keep_labels() -> None:
    """Pairs keep their labels; number pairs are stringified."""

    plain = SampleSeries.from_values([1, 2.5])
    assert plain.values == [1.0, 2.5]
    assert plain.labels == ["", ""]
    assert not plain.labels_given

    pairs = SampleSeries.from_pairs([("a", 1), ("b", 2)])
    assert pairs[1] == Sample(2.0, "b")
    assert pairs.labels_given

    numbers = SampleSeries.from_number_pairs([(2019, 7), (2020, 9)])
    assert numbers.labels == ["2019", "2020"]
    assert len(numbers) == 2


def test_color_of_uses_callback() -> None:
    """Per-value colors come from the series callback."""

    series = SampleSeries.from_values([10, 40], color_for=lambda v: "green" if v > 30 else "red")
    assert series.color_of(0) == "red"
    assert series.color_of(1) == "green"
    assert SampleSeries.from_values([1]).color_of(0, default="blue") == "blue"


def test_draw_size_rejects_negative_dimensions() -> None:
    """Refuse negative canvas sizes."""

    with pytest.raises(ValueError):
        DrawSize(-1.0, 10.0)
