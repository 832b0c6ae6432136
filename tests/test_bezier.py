import numpy as np
import pytest

from bezier_elevation.bezier import (
    BezierCurve,
    curve_segment_count,
    elevate_degree,
    elevate_degree_by,
    sample_curve,
)
from bezier_elevation.de_casteljau import evaluate
from bezier_elevation.geometry import Point

T_VALUES = np.linspace(0.0, 1.0, 21)


def test_evaluate_endpoints_are_exact(wavy):
    assert evaluate(wavy, 0.0) == wavy[0]
    assert evaluate(wavy, 1.0) == wavy[-1]


def test_evaluate_line_midpoint():
    assert evaluate((Point(0, 0), Point(10, 20)), 0.5) == pytest.approx((5.0, 10.0))


def test_evaluate_quadratic():
    polygon = (Point(0, 0), Point(1, 2), Point(2, 0))
    # B(0.5) = 0.25*P0 + 0.5*P1 + 0.25*P2
    assert evaluate(polygon, 0.5) == pytest.approx((1.0, 1.0))


def test_de_casteljau_matches_bernstein(wavy):
    curve = BezierCurve(wavy)
    for t in T_VALUES:
        assert evaluate(wavy, t) == pytest.approx(tuple(curve.point(t)), rel=1e-12, abs=1e-9)
        assert curve.evaluate(t) == pytest.approx(curve.point(t), rel=1e-12, abs=1e-9)


def test_elevate_once_uses_alpha_weights(triangle):
    elevated = elevate_degree(triangle)
    assert len(elevated) == 4
    assert elevated[0] == Point(0.0, 0.0)
    assert elevated[1] == pytest.approx((20.0 / 3.0, 0.0))
    assert elevated[2] == pytest.approx((10.0, 10.0 / 3.0))
    assert elevated[3] == Point(10.0, 10.0)


def test_elevation_keeps_endpoints(wavy):
    elevated = elevate_degree(wavy)
    assert elevated[0] == wavy[0]
    assert elevated[-1] == wavy[-1]


def test_elevation_preserves_curve(wavy):
    elevated = elevate_degree(wavy)
    for t in T_VALUES:
        assert evaluate(elevated, t) == pytest.approx(evaluate(wavy, t), rel=1e-9)


def test_repeated_elevation_preserves_curve(wavy):
    chain = elevate_degree_by(wavy, 5)
    for polygon in chain:
        for t in T_VALUES:
            assert evaluate(polygon, t) == pytest.approx(evaluate(wavy, t), rel=1e-9)


def test_elevation_lengths(wavy):
    chain = elevate_degree_by(wavy, 4)
    assert [len(p) for p in chain] == [6, 7, 8, 9]


def test_elevate_zero_steps_is_empty(wavy):
    assert elevate_degree_by(wavy, 0) == ()


def test_negative_steps_rejected(wavy):
    with pytest.raises(ValueError):
        elevate_degree_by(wavy, -1)
    with pytest.raises(ValueError):
        BezierCurve(wavy).elevate_degree_by(-2)


def test_degenerate_polygon_is_not_elevated():
    assert elevate_degree((Point(3, 4),)) == (Point(3, 4),)


def test_bezier_curve_elevation_matches_polygon_elevation(wavy):
    curve = BezierCurve(wavy).elevate_degree_by(2)
    assert curve.degree == 6
    np.testing.assert_allclose(curve.control_points, np.array(elevate_degree_by(wavy, 2)[-1]))


def test_bezier_curve_rejects_flat_input():
    with pytest.raises(ValueError):
        BezierCurve([1.0, 2.0, 3.0])


def test_curve_segment_count():
    assert curve_segment_count(1) == 40
    assert curve_segment_count(2) == 80
    assert curve_segment_count(16) == 640


def test_sample_curve_spans_endpoints(wavy):
    samples = sample_curve(wavy)
    assert samples.shape == (curve_segment_count(len(wavy)) + 1, 2)
    assert tuple(samples[0]) == wavy[0]
    assert tuple(samples[-1]) == wavy[-1]


def test_sample_degenerate_polygon_is_empty():
    assert sample_curve((Point(1, 1),)).shape == (0, 2)
