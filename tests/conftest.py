"""Shared fixtures for the geometry tests."""

from __future__ import annotations

import pytest

from chart_geometry.series import DrawSize, SampleSeries


@pytest.fixture
def size() -> DrawSize:
    """Return a 100x50 drawing area."""

    return DrawSize(100.0, 50.0)


@pytest.fixture
def weekly() -> SampleSeries:
    """Return a small labelled series."""

    return SampleSeries.from_pairs([("Mon", 3), ("Tue", 5), ("Wed", 2)])
