from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bezier import DEFAULT_STEPS
from .builder import build_path
from .locate import LocatedSample, locate
from .measure import PathMeasurer
from .path import Point
from .scale import Orientation
from .series import Bounds, DrawSize, SampleSeries


def format_readout(sample: LocatedSample, value_format: str = "%.1f", *, show_label: bool = True) -> str:
    """Magnifier text: the label on its own line (when there is one) above the value."""
    if not sample.found:
        return ""
    value = value_format % sample.value
    if show_label and sample.label:
        return f"{sample.label}\n{value}"
    return value


@dataclass(frozen=True)
class ProbeResult:
    touch: Point
    # on the drawn path, from the arc-length search
    indicator: Point
    # snapped to the nearest sample, drives the readout
    sample: LocatedSample
    readout: str


class ChartProbe:
    """
    Drag state for one line chart.

    Each drag replaces the previous touch. The indicator dot and the readout
    come from two separate queries (path geometry vs. sample index) and can
    disagree slightly on curved paths.
    """

    def __init__(
        self,
        series: SampleSeries,
        size: DrawSize,
        *,
        curved: bool = False,
        bounds: Optional[Bounds] = None,
        offset: Optional[float] = None,
        orientation: Orientation = Orientation.SCREEN,
        value_format: str = "%.1f",
        curve_steps: int = DEFAULT_STEPS,
        exact_points: bool = False,
    ) -> None:
        self.series = series
        self.size = size
        self.bounds = bounds if bounds is not None else series.bounds()
        self.offset = offset
        self.orientation = orientation
        self.value_format = value_format
        self.exact_points = exact_points
        self.path = build_path(
            series.values, size, curved=curved, bounds=self.bounds, offset=offset, orientation=orientation
        )
        self.measurer = PathMeasurer(self.path, curve_steps=curve_steps)
        self.current: Optional[ProbeResult] = None

    @property
    def active(self) -> bool:
        return self.current is not None

    def drag(self, x: float, y: float = 0.0) -> ProbeResult:
        sample = locate(
            self.series, x, self.size, bounds=self.bounds, offset=self.offset, orientation=self.orientation
        )
        indicator = self.measurer.point_at_x(x, exact=self.exact_points)
        self.current = ProbeResult(
            Point(float(x), float(y)),
            indicator,
            sample,
            format_readout(sample, self.value_format, show_label=self.series.labels_given),
        )
        return self.current

    def end(self) -> None:
        self.current = None
