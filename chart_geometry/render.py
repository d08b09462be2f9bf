from __future__ import annotations

from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .bezier import DEFAULT_STEPS, flatten
from .builder import build_closed_path, build_path, knot_points
from .config import ChartSettings
from .legend import Legend
from .path import Close, Move, RenderedPath
from .probe import ChartProbe
from .series import DrawSize, SampleSeries
from .style import ChartStyle, get_style

# Width reserved left of the plot for the legend labels.
LEGEND_OFFSET = 50
PAD = 10


def path_to_polyline(path: RenderedPath, *, steps: int = DEFAULT_STEPS, dx: float = 0.0, dy: float = 0.0) -> List[Tuple[float, float]]:
    """Flatten a path to image-space vertices; curves become `steps` chords each."""
    out: List[Tuple[float, float]] = []
    for start, e, _ in path.segments():
        if isinstance(e, Move):
            if not out:
                out.append((e.to.x + dx, e.to.y + dy))
            continue
        if isinstance(e, Close):
            continue
        pts = flatten(start, e, steps=steps)
        out.extend((float(x) + dx, float(y) + dy) for x, y in pts[1:])
    return out


def render_line_chart(
    series: SampleSeries,
    size: DrawSize,
    *,
    settings: Optional[ChartSettings] = None,
    style: Optional[ChartStyle] = None,
    touch_x: Optional[float] = None,
    dark: bool = False,
) -> Image.Image:
    """
    Rasterise a line chart preview: legend lines, optional fill, the line,
    knot dots and, when `touch_x` is given, the indicator and magnifier.

    `size` is the plot area; the image adds the legend gutter and padding.
    """
    settings = settings or ChartSettings()
    style = (style or get_style(settings.style)).for_scheme(dark)
    line = style.line_style
    bounds = series.bounds()

    ox, oy = LEGEND_OFFSET + PAD, PAD * 3
    img_w = int(round(size.width + ox + PAD + settings.magnifier_width / 2))
    img_h = int(round(size.height + oy + PAD))
    img = Image.new("RGB", (max(1, img_w), max(1, img_h)), style.background_color or "#FFFFFF")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    legend = Legend(bounds, size.height, settings.legend_steps)
    for ypx, label in zip([legend.step_y(i) for i in range(legend.total_steps + 1)], legend.labels()):
        draw.line([(ox, ypx + oy), (ox + size.width, ypx + oy)], fill=line.axis_color, width=1)
        draw.text((PAD, ypx + oy - 6), label, fill=line.legend_text_color, font=font)
    axis_y = legend.x_axis_y()
    if axis_y is not None:
        draw.line([(ox, axis_y + oy), (ox + size.width, axis_y + oy)], fill=line.axis_color, width=3)

    values = series.values
    if settings.fill:
        closed = build_closed_path(values, size, curved=settings.curved, bounds=bounds)
        poly = path_to_polyline(closed, steps=settings.curve_steps, dx=ox, dy=oy)
        if len(poly) >= 3:
            draw.polygon(poly, fill=style.gradient.end)

    path = build_path(values, size, curved=settings.curved, bounds=bounds)
    poly = path_to_polyline(path, steps=settings.curve_steps, dx=ox, dy=oy)
    if len(poly) >= 2:
        draw.line(poly, fill=style.accent_color, width=line.stroke_width, joint="curve")

    r = 3
    for i, k in enumerate(knot_points(values, size, bounds=bounds)):
        color = series.color_of(i, default=style.accent_color)
        draw.ellipse([k.x + ox - r, k.y + oy - r, k.x + ox + r, k.y + oy + r], fill=color)

    if touch_x is not None and len(values) >= 2:
        probe = ChartProbe(
            series, size, curved=settings.curved, bounds=bounds, value_format=settings.value_format,
            curve_steps=settings.curve_steps, exact_points=settings.exact_points,
        )
        res = probe.drag(touch_x)
        half = settings.magnifier_width / 2
        mx = res.sample.x + ox
        draw.rounded_rectangle(
            [mx - half, oy - PAD * 2, mx + half, oy + size.height],
            radius=12, outline=style.accent_color, width=2,
        )
        if res.readout:
            left, _, right, _ = draw.multiline_textbbox((0, 0), res.readout, font=font)
            draw.multiline_text(
                (mx - (right - left) / 2, oy - PAD), res.readout, fill=style.text_color, font=font, align="center"
            )
        ir = 5
        ix, iy = res.indicator.x + ox, res.indicator.y + oy
        draw.ellipse([ix - ir, iy - ir, ix + ir, iy + ir], outline=style.text_color, width=2)
    return img
