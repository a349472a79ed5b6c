"""
Unit Tests for linear interpolation and clipping.
"""

import pytest

from idif_auc.errors import EmptyCurveError
from idif_auc.models.curve import Curve, Point
from idif_auc.utils.interpolation import clip, value_at


def pairs(curve):
    return [(p.time, p.activity) for p in curve]


class TestValueAt:
    """Evaluation inside and outside the sampled range."""

    def test_forward_extrapolation(self, ramp):
        assert value_at(ramp, 15) == 15

    def test_backward_extrapolation(self):
        curve = Curve.from_pairs([(1, 2), (3, 6), (4, 0)])
        assert value_at(curve, 0) == pytest.approx(0.0)

    def test_forward_uses_last_segment(self, triangle):
        assert value_at(triangle, 12) == pytest.approx(-4.0)

    def test_midpoint(self, triangle):
        assert value_at(triangle, 2.5) == 5.0
        assert value_at(triangle, 7.5) == 5.0

    def test_exact_at_every_sample(self):
        curve = Curve.from_pairs([(0, 0.1), (0.1, 0.3), (0.7, 0.2), (1.3, 0.9), (2.0, 0.7)])
        for p in curve:
            assert value_at(curve, p.time) == p.activity

    def test_linear_between_adjacent_samples(self):
        curve = Curve.from_pairs([(0, 1), (2, 5), (6, -3)])
        for t in (2.5, 3.0, 4.2, 5.9):
            expected = 5 + (-3 - 5) * (t - 2) / (6 - 2)
            assert value_at(curve, t) == pytest.approx(expected)

    def test_accepts_point_list(self):
        assert value_at([Point(0, 0), Point(10, 10)], 4) == pytest.approx(4)

    def test_single_point_is_constant(self):
        curve = Curve.from_pairs([(3, 7)])
        assert value_at(curve, 0) == 7
        assert value_at(curve, 10) == 7

    def test_empty_curve(self):
        with pytest.raises(EmptyCurveError):
            value_at(Curve(), 1.0)


class TestClip:
    """Clipping to [a, b] with boundary points."""

    def test_interior_window(self, triangle):
        clipped = clip(triangle, 2.5, 7.5)
        assert pairs(clipped) == [(2.5, 5.0), (5, 10), (7.5, 5.0)]

    def test_full_range_reuses_samples(self, triangle):
        assert pairs(clip(triangle, 0, 10)) == pairs(triangle)

    def test_extends_past_last_sample(self, ramp):
        assert pairs(clip(ramp, 0, 15)) == [(0, 0), (10, 10), (15, 15)]

    def test_boundary_on_interior_sample(self, triangle):
        assert pairs(clip(triangle, 5, 10)) == [(5, 10), (10, 0)]

    def test_always_contains_boundaries(self, real_curve):
        for a, b in [(0, 3.3), (1.1, 19.9), (10, 25), (-2, 4)]:
            times = [p.time for p in clip(real_curve, a, b)]
            assert times[0] == a
            assert times[-1] == b
            assert times == sorted(set(times))

    def test_keeps_label_and_source(self, triangle):
        clipped = clip(triangle, 1, 9)
        assert clipped.label == "Real"
        assert len(triangle) == 3

    def test_empty_curve(self):
        with pytest.raises(EmptyCurveError):
            clip(Curve(), 0, 1)
