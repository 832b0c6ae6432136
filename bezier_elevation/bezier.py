"""
Bézier curve degree elevation and sampling.
"""

from typing import Sequence, Tuple

import numpy as np
from scipy.special import comb

from . import constants
from .de_casteljau import evaluate
from .geometry import Point, Polygon, as_array, as_polygon
from .matrices import get_E_matrix


def elevate_degree(polygon: Sequence[Point]) -> Polygon:
    """
    Elevate a degree-n control polygon to degree n+1.

    The returned polygon has one more point and describes the identical curve.
    Polygons with fewer than 2 points are returned unchanged.

    Args:
        polygon: n+1 control points

    Returns:
        n+2 control points
    """
    if len(polygon) < 2:
        return tuple(polygon)
    P = as_array(polygon)
    return as_polygon(get_E_matrix(P.shape[0] - 1) @ P)


def elevate_degree_by(polygon: Sequence[Point], steps: int) -> Tuple[Polygon, ...]:
    """
    Apply `elevate_degree` `steps` times.

    Returns:
        Tuple of the intermediate polygons; entry k has len(polygon) + k + 1 points
    """
    if steps < 0:
        raise ValueError(f"elevation steps cannot be negative, got {steps}")

    chain = []
    current = tuple(polygon)
    for _ in range(steps):
        current = elevate_degree(current)
        chain.append(current)
    return tuple(chain)


def curve_segment_count(point_count: int) -> int:
    """Number of straight segments used to draw a curve with `point_count` control points."""
    return max(constants.MIN_CURVE_SEGMENTS, point_count * constants.SEGMENTS_PER_POINT)


def sample_curve(polygon: Sequence[Point]) -> np.ndarray:
    """
    Sample the curve at curve_segment_count(len(polygon)) uniform steps.

    Returns:
        (segments + 1, 2) array from the first to the last control point,
        or an empty (0, 2) array for degenerate polygons
    """
    if len(polygon) < 2:
        return np.zeros((0, 2))
    ts = np.linspace(0.0, 1.0, curve_segment_count(len(polygon)) + 1)
    return np.array([evaluate(polygon, t) for t in ts])


class BezierCurve:
    """
    A Bézier curve defined by control points.

    Attributes:
        control_points (np.ndarray): Control points of shape (N+1, dim)
        degree (int): Degree of the curve (N)
        dimension (int): Spatial dimension
    """

    def __init__(self, control_points):
        P = np.array(control_points, dtype=float)
        if P.ndim != 2:
            raise ValueError("control_points must be (N+1, dim)")
        self.control_points = P
        self.degree = P.shape[0] - 1
        self.dimension = P.shape[1]

    def point(self, tau):
        """Evaluate the curve at tau using the Bernstein basis."""
        N, d = self.degree, self.dimension
        out = np.zeros(d)
        for i in range(N + 1):
            b = comb(N, i) * (tau ** i) * ((1 - tau) ** (N - i))
            out += b * self.control_points[i]
        return out

    def evaluate(self, tau):
        """Evaluate the curve at tau with de Casteljau's algorithm."""
        W = self.control_points
        for _ in range(self.degree):
            W = (1 - tau) * W[:-1] + tau * W[1:]
        return W[0].copy()

    def sample(self, num=200):
        ts = np.linspace(0.0, 1.0, num)
        P = np.array([self.point(t) for t in ts])
        return ts, P

    def elevate_degree(self) -> 'BezierCurve':
        return BezierCurve(get_E_matrix(self.degree) @ self.control_points)

    def elevate_degree_by(self, steps: int) -> 'BezierCurve':
        if steps < 0:
            raise ValueError(f"elevation steps cannot be negative, got {steps}")

        result = self
        for _ in range(steps):
            result = result.elevate_degree()
        return result

    def __repr__(self) -> str:
        return f"BezierCurve(degree={self.degree}, dimension={self.dimension})"
