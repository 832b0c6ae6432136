"""
Planar point primitives: clamping, distances, hit-testing and coordinate transforms.

All coordinates are in canvas pixel space with the origin in the top-left
corner and y growing downwards.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

from . import constants


class Point(NamedTuple):
    """Immutable 2D coordinate in canvas pixels."""
    x: float
    y: float


Polygon = Tuple[Point, ...]


def as_array(polygon: Sequence[Point]) -> np.ndarray:
    """Control polygon as a (len, 2) float array."""
    return np.array(polygon, dtype=float).reshape(-1, 2)


def as_polygon(array) -> Polygon:
    """Convert a (len, 2) array back into a tuple of Points."""
    return tuple(Point(float(x), float(y)) for x, y in np.asarray(array, dtype=float))


def clamp_point(point: Point, width: float, height: float) -> Point:
    """Clamp a point into [0, width] x [0, height]."""
    return Point(
        min(max(float(point.x), 0.0), float(width)),
        min(max(float(point.y), 0.0), float(height)),
    )


def segment_length_squared(a: Point, b: Point) -> float:
    """Squared Euclidean distance between a and b."""
    dx = b.x - a.x
    dy = b.y - a.y
    return dx * dx + dy * dy


def nearest_point_index(polygon: Sequence[Point], probe: Point, radius: float) -> Optional[int]:
    """
    Find the first control point within `radius` of `probe`.

    Points are scanned in ascending index order, so overlapping points
    resolve to the lowest index.

    Args:
        polygon: Control points
        probe: Query position
        radius: Hit radius in pixels

    Returns:
        Index of the first point with distance <= radius, or None
    """
    r_squared = radius * radius
    for i, p in enumerate(polygon):
        if segment_length_squared(p, probe) <= r_squared:
            return i
    return None


def default_fan_out(count: int, width: float, height: float) -> Polygon:
    """
    Deterministic default layout: `count` points evenly spaced on a diagonal
    running from the lower left towards the upper right of the canvas.
    """
    pts = []
    for i in range(count):
        t = i / (count - 1) if count > 1 else 0.0
        pts.append(Point(
            width * (constants.FAN_X_START + constants.FAN_X_SPAN * t),
            height * (constants.FAN_Y_START + constants.FAN_Y_SPAN * t),
        ))
    return tuple(pts)


class SurfaceTransform(NamedTuple):
    """
    Maps host-surface coordinates onto canvas pixels.

    The host reports pointer positions in its own (logical) units, with
    the drawable area occupying `logical_width` x `logical_height` starting at
    (`left`, `top`). The canvas has a fixed pixel size; the mapping is a pure
    size-ratio scale.
    """
    left: float
    top: float
    logical_width: float
    logical_height: float
    canvas_width: float
    canvas_height: float

    def to_canvas(self, client_x: float, client_y: float) -> Optional[Point]:
        # Collapsed surfaces (e.g. a hidden window) have no meaningful mapping
        if self.logical_width == 0 or self.logical_height == 0:
            return None
        scale_x = self.canvas_width / self.logical_width
        scale_y = self.canvas_height / self.logical_height
        return Point((client_x - self.left) * scale_x, (client_y - self.top) * scale_y)
