"""
End-time matching for the Real and Combined curves.

The two acquisitions rarely stop at the same moment. Both curves are cut
back to the earlier final time so that every window compares like with like.
"""

import logging

from idif_auc.errors import EmptyCurveError
from idif_auc.models.curve import Curve, MatchedCurvePair, Point, as_curve
from idif_auc.utils.interpolation import CurveLike, value_at

logger = logging.getLogger(__name__)


def conform_to_end_time(curve: CurveLike, end_time: float) -> Curve:
    """Make end_time the final sample of a curve.

    Longer curves are truncated to the samples at or before end_time and,
    if none sits exactly on it, get an interpolated point there. Shorter
    curves are extended with a single extrapolated point.

    Args:
        curve: Curve with strictly increasing times.
        end_time: Required final sample time.

    Returns:
        New curve ending exactly at end_time.
    """
    curve = as_curve(curve)
    if not curve.points:
        raise EmptyCurveError(f"Cannot match end time: empty {curve.label or 'curve'}")

    last = curve.end_time
    if last == end_time:
        return curve

    if last > end_time:
        kept = [p for p in curve if p.time <= end_time]
        if not kept or kept[-1].time != end_time:
            kept.append(Point(end_time, value_at(curve, end_time)))
    else:
        logger.debug(
            "Extending %s from %g to %g min by extrapolation",
            curve.label or 'curve', last, end_time,
        )
        kept = list(curve.points) + [Point(end_time, value_at(curve, end_time))]

    return curve.with_points(sorted(kept, key=lambda p: p.time))


def match_end_times(real: CurveLike, combined: CurveLike) -> MatchedCurvePair:
    """Truncate both curves to their common (earlier) end time.

    The curve that already ends at the common end time is returned as-is;
    the other one is truncated and gets an interpolated final point.

    Raises:
        EmptyCurveError: If either curve has no points.
    """
    real = as_curve(real)
    combined = as_curve(combined)
    for curve in (real, combined):
        if not curve.points:
            raise EmptyCurveError(f"Cannot match end times: empty {curve.label or 'curve'}")

    common_end_time = min(real.end_time, combined.end_time)
    real_matched = conform_to_end_time(real, common_end_time)
    combined_matched = conform_to_end_time(combined, common_end_time)

    # min() above means neither curve is ever extended here
    assert real_matched.end_time == combined_matched.end_time == common_end_time

    logger.debug(
        "Matched end time %g min (Real ended at %g, Combined at %g)",
        common_end_time, real.end_time, combined.end_time,
    )
    return MatchedCurvePair(
        real=real_matched,
        combined=combined_matched,
        common_end_time=common_end_time,
    )
