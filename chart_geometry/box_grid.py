from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .series import Color, ColorFn


class GridIndex(NamedTuple):
    section: int
    box: int

    @property
    def valid(self) -> bool:
        return self.section >= 0 and self.box >= 0


INVALID = GridIndex(-1, -1)


@dataclass(frozen=True)
class BoxGridLayout:
    """
    Geometry of a box chart: sections stacked top to bottom, each a title band
    followed by rows of equally wide boxes.
    """
    width: float
    boxes_per_row: int
    box_height: float
    title_height: float = 0.0
    column_spacing: float = 0.0
    row_spacing: float = 0.0
    section_spacing: float = 0.0

    def __post_init__(self) -> None:
        if self.boxes_per_row < 1:
            raise ValueError("boxes_per_row must be >= 1")
        if self.width <= 0 or self.box_height <= 0:
            raise ValueError("width and box_height must be > 0")
        if self.column_spacing * (self.boxes_per_row - 1) >= self.width:
            raise ValueError("column spacing leaves no room for boxes")

    @property
    def box_width(self) -> float:
        return (self.width - self.column_spacing * (self.boxes_per_row - 1)) / self.boxes_per_row

    def rows(self, count: int) -> int:
        return int(math.ceil(count / self.boxes_per_row)) if count > 0 else 0

    def section_height(self, count: int) -> float:
        n = self.rows(count)
        if n == 0:
            return self.title_height
        return self.title_height + n * self.box_height + (n - 1) * self.row_spacing

    def section_tops(self, counts: Sequence[int]) -> List[float]:
        tops: List[float] = []
        y = 0.0
        for c in counts:
            tops.append(y)
            y += self.section_height(c) + self.section_spacing
        return tops

    def box_rect(self, counts: Sequence[int], section: int, box: int) -> Tuple[float, float, float, float]:
        """(x0, y0, x1, y1) of a box, for drawing and for tests."""
        if not (0 <= section < len(counts)) or not (0 <= box < counts[section]):
            raise IndexError(f"no box {box} in section {section}")
        row, col = divmod(box, self.boxes_per_row)
        x0 = col * (self.box_width + self.column_spacing)
        y0 = self.section_tops(counts)[section] + self.title_height + row * (self.box_height + self.row_spacing)
        return (x0, y0, x0 + self.box_width, y0 + self.box_height)


def _column_at(x: float, layout: BoxGridLayout) -> Optional[int]:
    bw = layout.box_width
    for col in range(layout.boxes_per_row):
        left = col * (bw + layout.column_spacing)
        right = left + bw
        if right > x:
            return col if x >= left else None
    return None


def _row_at(y: float, rows: int, layout: BoxGridLayout) -> Optional[int]:
    for row in range(rows):
        top = row * (layout.box_height + layout.row_spacing)
        bottom = top + layout.box_height
        if bottom > y:
            return row if y >= top else None
    return None


def locate_box(point: Tuple[float, float], counts: Sequence[int], layout: BoxGridLayout) -> GridIndex:
    """
    Which (section, box) a touch lands in.

    Spacing gaps, title bands, empty slots of a short last row and anything
    outside the grid give INVALID.
    """
    x, y = point
    if x < 0 or y < 0:
        return INVALID
    col = _column_at(x, layout)
    if col is None:
        return INVALID

    for section, (top, count) in enumerate(zip(layout.section_tops(counts), counts)):
        bottom = top + layout.section_height(count)
        if y >= bottom:
            continue
        local_y = y - top - layout.title_height
        if local_y < 0:
            return INVALID
        row = _row_at(local_y, layout.rows(count), layout)
        if row is None:
            return INVALID
        box = row * layout.boxes_per_row + col
        return GridIndex(section, box) if box < count else INVALID
    return INVALID


def box_colors(values: Sequence[float], color_for: ColorFn) -> List[Color]:
    return [color_for(float(v)) for v in values]
