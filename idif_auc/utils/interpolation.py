"""
Linear interpolation and interval clipping for sampled curves.
"""

from typing import Sequence, Union

import numpy as np

from idif_auc.errors import EmptyCurveError
from idif_auc.models.curve import Curve, Point, as_curve

CurveLike = Union[Curve, Sequence[Point]]


def _line_through(p0: Point, p1: Point, t: float, anchor: Point) -> float:
    slope = (p1.activity - p0.activity) / (p1.time - p0.time)
    return anchor.activity + slope * (t - anchor.time)


def value_at(curve: CurveLike, t: float) -> float:
    """Evaluate a curve at time t.

    Sample times return the stored activity exactly. Times outside the
    sampled range are extrapolated along the first (or last) segment.
    A single-point curve is treated as constant.

    Args:
        curve: Curve with strictly increasing times.
        t: Time to evaluate at.

    Returns:
        Activity at t.

    Raises:
        EmptyCurveError: If the curve has no points.
    """
    curve = as_curve(curve)
    points = curve.points
    if not points:
        raise EmptyCurveError("Cannot interpolate: empty curve")

    first, last = points[0], points[-1]
    if t == first.time:
        return first.activity
    if t == last.time:
        return last.activity
    if len(points) == 1:
        return first.activity

    if t < first.time:
        return _line_through(first, points[1], t, anchor=first)
    if t > last.time:
        return _line_through(points[-2], last, t, anchor=last)

    # times[idx - 1] < t <= times[idx]
    idx = int(np.searchsorted(curve.times, t, side='left'))
    p0, p1 = points[idx - 1], points[idx]
    if p1.time == t:
        return p1.activity
    if p0.time == p1.time:
        return p0.activity
    fraction = (t - p0.time) / (p1.time - p0.time)
    return p0.activity + (p1.activity - p0.activity) * fraction


def clip(curve: CurveLike, a: float, b: float) -> Curve:
    """Restrict a curve to [a, b] with points exactly at both boundaries.

    Boundary points reuse the first/last sample when they coincide with it,
    otherwise they are interpolated (or extrapolated) with value_at.
    The caller guarantees a < b.

    Raises:
        EmptyCurveError: If the curve has no points.
    """
    curve = as_curve(curve)
    points = curve.points
    if not points:
        raise EmptyCurveError("Cannot clip: empty curve")

    start = points[0] if a == curve.start_time else Point(a, value_at(curve, a))
    end = points[-1] if b == curve.end_time else Point(b, value_at(curve, b))
    inner = [p for p in points if a < p.time < b]

    clipped = {}
    for p in [start] + inner + [end]:
        clipped.setdefault(p.time, p)
    return curve.with_points(clipped[t] for t in sorted(clipped))
