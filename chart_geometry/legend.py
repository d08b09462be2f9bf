from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .path import RenderedPath
from .scale import Orientation, VerticalScale
from .series import Bounds

TOTAL_STEPS = 4


@dataclass(frozen=True)
class Legend:
    """Horizontal y-axis guide lines, evenly spaced between the bounds."""
    bounds: Bounds
    height: float
    total_steps: int = TOTAL_STEPS
    orientation: Orientation = Orientation.SCREEN

    def __post_init__(self) -> None:
        if self.total_steps < 1:
            raise ValueError("total_steps must be >= 1")

    @property
    def scale(self) -> VerticalScale:
        return VerticalScale(self.bounds, self.height, None, self.orientation)

    def step_value(self, step: int) -> float:
        return self.bounds.min + step * self.bounds.span / self.total_steps

    def step_values(self) -> List[float]:
        return [self.step_value(i) for i in range(self.total_steps + 1)]

    def step_y(self, step: int) -> float:
        if self.bounds.is_degenerate:
            return self.scale.height_to_px(0.0)
        return self.scale.height_to_px(step / self.total_steps * self.height)

    @property
    def shows_x_axis(self) -> bool:
        return self.bounds.spans_zero

    def x_axis_y(self) -> Optional[float]:
        if not self.shows_x_axis:
            return None
        return self.scale.value_to_px(0.0)

    def line(self, y: float, length: float) -> RenderedPath:
        return RenderedPath().move_to(0.0, y).line_to(length, y)

    def lines(self, length: float) -> List[RenderedPath]:
        return [self.line(self.step_y(i), length) for i in range(self.total_steps + 1)]

    def labels(self, fmt: str = "%.2f") -> List[str]:
        return [fmt % v for v in self.step_values()]
