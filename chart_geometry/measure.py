from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .bezier import DEFAULT_STEPS, evaluate, flatten, segment_length, solve_t_for_x
from .errors import MalformedPathError
from .path import ORIGIN, Close, Line, Move, Point, RenderedPath

logger = logging.getLogger(__name__)

# Total width of the window trimmed around a fraction in point_at_fraction.
TRIM_WINDOW = 0.001


class PathMeasurer:
    """
    Arc-length queries over a built path.

    Curve lengths are chord sums over `curve_steps` samples per segment; the
    same density is used for every query so that lengths stay comparable.
    """

    def __init__(self, path: RenderedPath, *, curve_steps: int = DEFAULT_STEPS) -> None:
        if curve_steps < 1:
            raise ValueError("curve_steps must be >= 1")
        self.path = path
        self.curve_steps = int(curve_steps)
        self._total = None
        self._polyline = None

    # ---------- lengths ----------

    def total_length(self) -> float:
        if self._total is None:
            total = 0.0
            for start, e, sub_start in self.path.segments():
                if isinstance(e, Move):
                    continue
                if isinstance(e, Close):
                    if sub_start is not None:
                        total += start.distance(sub_start)
                    continue
                total += segment_length(start, e, steps=self.curve_steps)
            self._total = total
        return self._total

    def length_until(self, max_x: float) -> float:
        """
        Length walked along the path until it first passes `max_x`.

        The crossing segment contributes only the part left of `max_x`. If the
        path never passes `max_x` the whole length is returned.
        """
        ret = 0.0
        for start, e, _ in self.path.segments():
            if isinstance(e, Move):
                if e.to.x > max_x:
                    break
                continue
            if isinstance(e, Close):
                raise MalformedPathError("Closed subpaths cannot be measured by x position")
            if e.to.x > max_x:
                t = solve_t_for_x(start, e, max_x, steps=self.curve_steps)
                ret += segment_length(start, e, t_end=t, steps=self.curve_steps)
                break
            ret += segment_length(start, e, steps=self.curve_steps)
        return ret

    # ---------- points ----------

    def _flattened(self) -> Tuple[np.ndarray, np.ndarray]:
        """Polyline of the whole path with cumulative arc length per vertex."""
        if self._polyline is None:
            pts: List[np.ndarray] = []
            for start, e, sub_start in self.path.segments():
                if isinstance(e, Move):
                    continue
                if isinstance(e, Close):
                    if sub_start is None:
                        continue
                    seg = flatten(start, Line(sub_start))
                else:
                    seg = flatten(start, e, steps=self.curve_steps)
                pts.append(seg if not pts else seg[1:])
            if not pts:
                first = self.path.end_points()[:1] or [ORIGIN]
                poly = np.array(first, dtype=np.float64)
            else:
                poly = np.vstack(pts)
            cum = np.concatenate([[0.0], np.cumsum(np.sqrt((np.diff(poly, axis=0) ** 2).sum(axis=1)))])
            self._polyline = (poly, cum)
        return self._polyline

    def _point_at_length(self, s: float) -> np.ndarray:
        poly, cum = self._flattened()
        return np.array([np.interp(s, cum, poly[:, 0]), np.interp(s, cum, poly[:, 1])])

    def _trimmed(self, lo: float, hi: float) -> np.ndarray:
        poly, cum = self._flattened()
        total = cum[-1]
        s0, s1 = lo * total, hi * total
        inner = poly[(cum > s0) & (cum < s1)]
        return np.vstack([self._point_at_length(s0), inner, self._point_at_length(s1)])

    def point_at_fraction(self, t: float, *, exact: bool = False) -> Point:
        """
        Point at fraction `t` (clamped to 0..1) of the path length.

        By default this is the bounding-box centre of the stretch of path
        within TRIM_WINDOW around `t`, pinned inside the path near both ends.
        exact=True returns the on-path point at that length instead.
        """
        if self.path.is_empty:
            return ORIGIN
        t = min(1.0, max(0.0, float(t)))
        poly, cum = self._flattened()
        if cum[-1] == 0:
            return Point(float(poly[0, 0]), float(poly[0, 1]))
        if exact:
            x, y = self._point_at_length(t * cum[-1])
            return Point(float(x), float(y))

        half = TRIM_WINDOW / 2
        if t >= 1 - TRIM_WINDOW:
            lo, hi = 1 - TRIM_WINDOW, 1.0
        elif t <= TRIM_WINDOW:
            lo, hi = 0.0, TRIM_WINDOW
        else:
            lo, hi = t - half, t + half
        piece = self._trimmed(lo, hi)
        mins, maxs = piece.min(axis=0), piece.max(axis=0)
        return Point(float((mins[0] + maxs[0]) / 2), float((mins[1] + maxs[1]) / 2))

    def point_at_x(self, x: float, *, exact: bool = False) -> Point:
        total = self.total_length()
        if total == 0:
            logger.debug("zero-length path; no point for x=%s", x)
            return ORIGIN
        return self.point_at_fraction(self.length_until(x) / total, exact=exact)

    def y_at_x(self, x: float) -> float:
        """y of the first path point reaching `x`, evaluated on the segment itself."""
        if self.path.is_closed:
            raise MalformedPathError("Closed subpaths cannot be measured by x position")
        for start, e, _ in self.path.segments():
            if isinstance(e, Move):
                if e.to.x >= x:
                    return e.to.y
                continue
            if e.to.x >= x:
                t = solve_t_for_x(start, e, x, steps=self.curve_steps)
                return float(evaluate(start, e, np.array([t]))[0, 1])
        ends = self.path.end_points()
        return ends[-1].y if ends else 0.0
