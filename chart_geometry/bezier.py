from __future__ import annotations

from typing import Tuple

import numpy as np

from .path import Close, CubicCurve, Element, Line, Move, Point, QuadCurve

DEFAULT_STEPS = 100


def quad_points(p0: Tuple[float, float], c: Tuple[float, float], p1: Tuple[float, float], ts: np.ndarray) -> np.ndarray:
    t = np.asarray(ts, dtype=np.float64)[:, None]
    a, b, d = np.asarray(p0, float), np.asarray(c, float), np.asarray(p1, float)
    u = 1.0 - t
    return u * u * a + 2.0 * u * t * b + t * t * d


def cubic_points(
    p0: Tuple[float, float],
    c1: Tuple[float, float],
    c2: Tuple[float, float],
    p1: Tuple[float, float],
    ts: np.ndarray,
) -> np.ndarray:
    t = np.asarray(ts, dtype=np.float64)[:, None]
    a, b, c, d = (np.asarray(p, float) for p in (p0, c1, c2, p1))
    u = 1.0 - t
    return u ** 3 * a + 3.0 * u * u * t * b + 3.0 * u * t * t * c + t ** 3 * d


def evaluate(start: Point, e: Element, ts: np.ndarray) -> np.ndarray:
    """Points on the segment that starts at `start`, at parameters `ts` (0..1)."""
    ts = np.asarray(ts, dtype=np.float64)
    if isinstance(e, QuadCurve):
        return quad_points(start, e.control, e.to, ts)
    if isinstance(e, CubicCurve):
        return cubic_points(start, e.control1, e.control2, e.to, ts)
    if isinstance(e, Line):
        a, b = np.asarray(start, float), np.asarray(e.to, float)
        return a + ts[:, None] * (b - a)
    raise ValueError(f"Cannot evaluate element of type {type(e).__name__}")


def polyline_length(pts: np.ndarray) -> float:
    if len(pts) < 2:
        return 0.0
    return float(np.sqrt((np.diff(pts, axis=0) ** 2).sum(axis=1)).sum())


def segment_length(start: Point, e: Element, *, t_end: float = 1.0, steps: int = DEFAULT_STEPS) -> float:
    """
    Arc length of a segment from t=0 to t=t_end.

    Lines are exact; curves sum the chords of `steps` evenly spaced samples,
    so more steps only ever tighten the estimate.
    """
    if isinstance(e, (Move, Close)):
        return 0.0
    if isinstance(e, Line):
        return start.distance(e.to) * t_end
    ts = np.linspace(0.0, t_end, max(1, int(steps)) + 1)
    return polyline_length(evaluate(start, e, ts))


def solve_t_for_x(start: Point, e: Element, x: float, *, steps: int = DEFAULT_STEPS, iterations: int = 50) -> float:
    """
    Parameter of the first point on the segment whose x reaches `x`.

    Coarse sampling brackets the first crossing, bisection refines it.
    Returns 1.0 if the segment never reaches `x`.
    """
    if isinstance(e, Line):
        dx = e.to.x - start.x
        if dx == 0:
            return 0.0 if x <= start.x else 1.0
        return float(min(1.0, max(0.0, (x - start.x) / dx)))

    ts = np.linspace(0.0, 1.0, max(2, int(steps)) + 1)
    xs = evaluate(start, e, ts)[:, 0]
    hits = np.nonzero(xs >= x)[0]
    if len(hits) == 0:
        return 1.0
    i = int(hits[0])
    if i == 0:
        return 0.0
    lo, hi = float(ts[i - 1]), float(ts[i])
    for _ in range(iterations):
        mid = (lo + hi) / 2
        if evaluate(start, e, np.array([mid]))[0, 0] < x:
            lo = mid
        else:
            hi = mid
    return hi


def flatten(start: Point, e: Element, *, steps: int = DEFAULT_STEPS) -> np.ndarray:
    """Polyline approximation of a segment, including its start point."""
    if isinstance(e, Line):
        return np.array([start, e.to], dtype=np.float64)
    ts = np.linspace(0.0, 1.0, max(1, int(steps)) + 1)
    return evaluate(start, e, ts)
