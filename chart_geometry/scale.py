from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .series import Bounds, DrawSize, resolve_bounds

logger = logging.getLogger(__name__)


class Orientation(str, Enum):
    # y grows downwards, data minimum sits on the bottom edge
    SCREEN = "screen"
    # y=0 is the data minimum; mirror of SCREEN
    MATH = "math"


def step_width(count: int, width: float) -> float:
    """Horizontal spacing between consecutive samples, 0 for fewer than two."""
    if count < 2:
        return 0.0
    return width / (count - 1)


@dataclass(frozen=True)
class VerticalScale:
    bounds: Bounds
    height: float
    # value drawn at the baseline; defaults to bounds.min
    offset: Optional[float] = None
    orientation: Orientation = Orientation.SCREEN

    @classmethod
    def for_values(
        cls,
        values: Sequence[float],
        height: float,
        *,
        bounds: Optional[Bounds] = None,
        offset: Optional[float] = None,
        orientation: Orientation = Orientation.SCREEN,
    ) -> "VerticalScale":
        b = resolve_bounds(values, bounds)
        if b.is_degenerate:
            logger.debug("flat bounds %s; vertical scale collapses to 0", b)
        return cls(b, float(height), offset, Orientation(orientation))

    @property
    def base(self) -> float:
        return self.bounds.min if self.offset is None else self.offset

    @property
    def step_height(self) -> float:
        """Pixels per unit of value; 0 when the bounds are flat."""
        if self.bounds.is_degenerate:
            return 0.0
        return self.height / self.bounds.span

    def height_to_px(self, h: float) -> float:
        # h is measured upwards from the baseline
        if self.orientation == Orientation.MATH:
            return h
        return self.height - h

    def px_to_height(self, p: float) -> float:
        if self.orientation == Orientation.MATH:
            return p
        return self.height - p

    def value_to_px(self, v: float) -> float:
        return self.height_to_px((v - self.base) * self.step_height)

    def px_to_value(self, p: float) -> float:
        if self.bounds.is_degenerate:
            return self.base
        return self.base + self.px_to_height(p) / self.step_height


def vertical_scale(
    values: Sequence[float],
    size: DrawSize,
    *,
    bounds: Optional[Bounds] = None,
    offset: Optional[float] = None,
    orientation: Orientation = Orientation.SCREEN,
) -> VerticalScale:
    return VerticalScale.for_values(values, size.height, bounds=bounds, offset=offset, orientation=orientation)
