from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from .path import ORIGIN, Point
from .scale import Orientation, VerticalScale, step_width
from .series import Bounds, DrawSize, SampleSeries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatedSample:
    index: int
    point: Point
    label: str = ""
    value: float = 0.0

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    @property
    def found(self) -> bool:
        return self.index >= 0


NOT_FOUND = LocatedSample(-1, ORIGIN)


def nearest_index(count: int, touch_x: float, width: float) -> int:
    """
    Index of the sample whose rendered x is closest to `touch_x`.

    Ties go to the lower index. Returns -1 when fewer than two samples.
    """
    if count < 2:
        return -1
    xs = np.arange(count, dtype=np.float64) * step_width(count, width)
    # argmin returns the first minimum
    return int(np.argmin(np.abs(xs - touch_x)))


def locate(
    series: Union[SampleSeries, Sequence[float]],
    touch_x: float,
    size: DrawSize,
    *,
    bounds: Optional[Bounds] = None,
    offset: Optional[float] = None,
    orientation: Orientation = Orientation.SCREEN,
) -> LocatedSample:
    """Snap a touch to the nearest sample by index; NOT_FOUND for short series."""
    if not isinstance(series, SampleSeries):
        series = SampleSeries.from_values(series)
    values = series.values
    idx = nearest_index(len(values), touch_x, size.width)
    if idx < 0:
        logger.debug("cannot locate touch on a series of %d sample(s)", len(values))
        return NOT_FOUND
    if bounds is None and series.min_y is not None and series.max_y is not None:
        bounds = series.bounds()
    vs = VerticalScale.for_values(values, size.height, bounds=bounds, offset=offset, orientation=orientation)
    x = idx * step_width(len(values), size.width)
    s = series[idx]
    return LocatedSample(idx, Point(x, vs.value_to_px(s.value)), s.label, s.value)


class NearestSampleLocator:
    def __init__(
        self,
        series: SampleSeries,
        size: DrawSize,
        *,
        bounds: Optional[Bounds] = None,
        offset: Optional[float] = None,
        orientation: Orientation = Orientation.SCREEN,
    ) -> None:
        self.series = series
        self.size = size
        self.bounds = bounds
        self.offset = offset
        self.orientation = orientation

    @property
    def step_width(self) -> float:
        return step_width(len(self.series), self.size.width)

    def locate(self, touch_x: float) -> LocatedSample:
        return locate(
            self.series, touch_x, self.size,
            bounds=self.bounds, offset=self.offset, orientation=self.orientation,
        )
