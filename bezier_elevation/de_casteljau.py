"""
De Casteljau evaluation of Bézier curves.
"""

from typing import Sequence

from .geometry import Point, as_array


def evaluate(polygon: Sequence[Point], t: float) -> Point:
    """
    Evaluate the Bézier curve of `polygon` at parameter t in [0, 1].

    The polygon must hold at least 2 points. t = 0 and t = 1 return the first
    and last control point exactly.

    Args:
        polygon: Control points
        t: Curve parameter

    Returns:
        Point on the curve
    """
    if t <= 0.0:
        return Point(float(polygon[0][0]), float(polygon[0][1]))
    if t >= 1.0:
        return Point(float(polygon[-1][0]), float(polygon[-1][1]))

    W = as_array(polygon)
    for _ in range(1, W.shape[0]):
        W = (1 - t) * W[:-1] + t * W[1:]
    return Point(float(W[0, 0]), float(W[0, 1]))
