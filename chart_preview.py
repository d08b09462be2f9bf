import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

from chart_geometry.config import config_path, load_settings
from chart_geometry.errors import InsufficientSamplesError
from chart_geometry.render import render_line_chart
from chart_geometry.series import DrawSize, SampleSeries


def parse_size(s: str) -> Tuple[float, float]:
    try:
        w, h = s.lower().split("x", 1)
        return float(w), float(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {s!r}") from None


def parse_sample(s: str) -> Tuple[str, float]:
    # "label=value" or a bare value
    label, _, v = s.rpartition("=")
    try:
        return label, float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected VALUE or LABEL=VALUE, got {s!r}") from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Render a line chart preview to PNG")
    p.add_argument("samples", nargs="+", type=parse_sample, help="values, or label=value pairs")
    p.add_argument("--out", "-o", default="chart.png", help="output PNG path")
    p.add_argument("--size", type=parse_size, default=(300.0, 240.0), help="plot area as WIDTHxHEIGHT")
    p.add_argument("--curved", action=argparse.BooleanOptionalAction, default=None, help="draw quadratic curves")
    p.add_argument("--fill", action=argparse.BooleanOptionalAction, default=None, help="fill the area under the line")
    p.add_argument("--touch-x", type=float, default=None, help="show the magnifier at this x")
    p.add_argument("--min", dest="min_y", type=float, default=None)
    p.add_argument("--max", dest="max_y", type=float, default=None)
    p.add_argument("--dark", action="store_true")
    p.add_argument("--verbose", "-v", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    pairs = args.samples
    labelled = any(lbl for lbl, _ in pairs)
    if labelled:
        series = SampleSeries.from_pairs(pairs, min_y=args.min_y, max_y=args.max_y)
    else:
        series = SampleSeries.from_values([v for _, v in pairs], min_y=args.min_y, max_y=args.max_y)
    if len(series) < 2:
        raise InsufficientSamplesError(len(series))

    settings = load_settings()
    logging.getLogger(__name__).debug("settings from %s: %s", config_path(), settings)
    if args.curved is not None:
        settings = replace(settings, curved=args.curved)
    if args.fill is not None:
        settings = replace(settings, fill=args.fill)

    img = render_line_chart(series, DrawSize(*args.size), settings=settings, touch_x=args.touch_x, dark=args.dark)
    out = Path(args.out)
    img.save(out)
    print(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
