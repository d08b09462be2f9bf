from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .series import Color


@dataclass(frozen=True)
class GradientColor:
    start: Color
    end: Color

    def stops(self) -> Tuple[Color, Color]:
        return (self.start, self.end)


@dataclass(frozen=True)
class LineStyle:
    axis_color: Color = "#DEDEDE"
    stroke_width: int = 3
    legend_text_color: Color = "#A3A3A3"


@dataclass(frozen=True)
class ChartStyle:
    """
    Colors for one chart. Line charts carry an extra LineStyle rather than
    being a different style type.
    """
    accent_color: Color
    gradient: GradientColor
    text_color: Color
    drop_shadow_color: Color = "#C0C0C0"
    background_color: Optional[Color] = None
    line: Optional[LineStyle] = None
    dark_mode: Optional["ChartStyle"] = None

    @classmethod
    def with_second_color(cls, accent: Color, second: Color, text: Color, **kw) -> "ChartStyle":
        return cls(accent, GradientColor(accent, second), text, **kw)

    @property
    def line_style(self) -> LineStyle:
        return self.line or LineStyle()

    def with_line(self, line: LineStyle) -> "ChartStyle":
        return replace(self, line=line)

    def for_scheme(self, dark: bool) -> "ChartStyle":
        if dark:
            return self.dark_mode or LINE_VIEW_DARK_MODE
        return self


LINE_VIEW_DARK_MODE = ChartStyle(
    accent_color="#F46766",
    gradient=GradientColor("#F46766", "#FFBA73"),
    text_color="#FFFFFF",
    drop_shadow_color="#FFFFFF",
    background_color="#000000",
    line=LineStyle(axis_color="#5A5A5A", legend_text_color="#8E8E93"),
)

LINE_CHART_STYLE_ONE = ChartStyle(
    accent_color="#F46766",
    gradient=GradientColor("#F46766", "#FFBA73"),
    text_color="#000000",
    background_color="#FFFFFF",
    line=LineStyle(),
    dark_mode=LINE_VIEW_DARK_MODE,
)

BAR_CHART_STYLE_ORANGE = ChartStyle(
    accent_color="#FF9500",
    gradient=GradientColor("#FF9500", "#FFCC00"),
    text_color="#000000",
    background_color="#FFFFFF",
)

PRESETS: Dict[str, ChartStyle] = {
    "line_chart_style_one": LINE_CHART_STYLE_ONE,
    "line_view_dark_mode": LINE_VIEW_DARK_MODE,
    "bar_chart_style_orange": BAR_CHART_STYLE_ORANGE,
}


def get_style(name: str) -> ChartStyle:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown style preset: {name}") from None
