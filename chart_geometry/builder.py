from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .errors import InsufficientSamplesError
from .path import Point, RenderedPath
from .scale import Orientation, VerticalScale, step_width
from .series import Bounds, DrawSize, resolve_bounds

logger = logging.getLogger(__name__)


class CloseEdge(str, Enum):
    BOTTOM = "bottom"
    TOP = "top"
    X_AXIS = "x_axis"


def close_edge(values: Sequence[float]) -> CloseEdge:
    if not any(v < 0 for v in values):
        return CloseEdge.BOTTOM
    if not any(v > 0 for v in values):
        return CloseEdge.TOP
    return CloseEdge.X_AXIS


def close_height(values: Sequence[float], size: DrawSize, *, bounds: Optional[Bounds] = None) -> float:
    """
    Height (measured up from the data minimum) at which a fill path closes.

    Non-negative data closes at the bottom, all-negative data at the top and
    mixed data on the x-axis.
    """
    edge = close_edge(values)
    if edge == CloseEdge.BOTTOM:
        return 0.0
    if edge == CloseEdge.TOP:
        return float(size.height)
    b = resolve_bounds(values, bounds)
    if b.is_degenerate:
        return 0.0
    return (0.0 - b.min) / b.span * size.height


def knot_points(
    values: Sequence[float],
    size: DrawSize,
    *,
    bounds: Optional[Bounds] = None,
    offset: Optional[float] = None,
    orientation: Orientation = Orientation.SCREEN,
) -> List[Point]:
    """Rendered position of every sample."""
    if not values:
        return []
    dx = step_width(len(values), size.width)
    vs = VerticalScale.for_values(values, size.height, bounds=bounds, offset=offset, orientation=orientation)
    return [Point(i * dx, vs.value_to_px(v)) for i, v in enumerate(values)]


def _control_point(mid: Point, end: Point) -> Point:
    # halfway between mid and end horizontally, level with end
    return Point((mid.x + end.x) / 2, end.y)


def _trace(path: RenderedPath, knots: List[Point], curved: bool) -> None:
    p1 = knots[0]
    for p2 in knots[1:]:
        if curved:
            m = p1.midpoint(p2)
            path.quad_to(m, _control_point(m, p1))
            path.quad_to(p2, _control_point(m, p2))
        else:
            path.line_to(*p2)
        p1 = p2


def build_path(
    values: Sequence[float],
    size: DrawSize,
    *,
    curved: bool = False,
    bounds: Optional[Bounds] = None,
    offset: Optional[float] = None,
    orientation: Orientation = Orientation.SCREEN,
) -> RenderedPath:
    """
    Open line-chart path through every sample, spread evenly across the width.

    Fewer than two samples give an empty path. Curved paths pass through each
    knot with a horizontal tangent and join the halves of each span at the
    span midpoint.
    """
    path = RenderedPath()
    if len(values) < 2:
        logger.debug("not drawing a path for %d sample(s)", len(values))
        return path
    knots = knot_points(values, size, bounds=bounds, offset=offset, orientation=orientation)
    path.move_to(*knots[0])
    _trace(path, knots, curved)
    return path


def build_closed_path(
    values: Sequence[float],
    size: DrawSize,
    *,
    curved: bool = False,
    bounds: Optional[Bounds] = None,
    offset: Optional[float] = None,
    orientation: Orientation = Orientation.SCREEN,
) -> RenderedPath:
    path = build_path(values, size, curved=curved, bounds=bounds, offset=offset, orientation=orientation)
    if path.is_empty:
        return path
    vs = VerticalScale.for_values(values, size.height, bounds=bounds, offset=offset, orientation=orientation)
    if close_edge(values) == CloseEdge.X_AXIS:
        # zero line the knots are drawn against, offset included
        y = vs.value_to_px(0.0)
    else:
        y = vs.height_to_px(close_height(values, size, bounds=vs.bounds))
    path.line_to(size.width, y)
    path.line_to(0.0, y)
    path.close()
    return path


@dataclass
class PathBuilder:
    """Bundles the layout inputs shared by the open and filled paths of one chart."""
    size: DrawSize
    curved: bool = False
    bounds: Optional[Bounds] = None
    offset: Optional[float] = None
    orientation: Orientation = Orientation.SCREEN

    def build(self, values: Sequence[float]) -> RenderedPath:
        return build_path(
            values, self.size, curved=self.curved, bounds=self.bounds,
            offset=self.offset, orientation=self.orientation,
        )

    def build_closed(self, values: Sequence[float]) -> RenderedPath:
        return build_closed_path(
            values, self.size, curved=self.curved, bounds=self.bounds,
            offset=self.offset, orientation=self.orientation,
        )

    def knots(self, values: Sequence[float]) -> List[Point]:
        return knot_points(values, self.size, bounds=self.bounds, offset=self.offset, orientation=self.orientation)

    def scale(self, values: Sequence[float]) -> VerticalScale:
        return VerticalScale.for_values(
            values, self.size.height, bounds=self.bounds, offset=self.offset, orientation=self.orientation
        )

    def require_drawable(self, values: Sequence[float]) -> None:
        if len(values) < 2:
            raise InsufficientSamplesError(len(values))
