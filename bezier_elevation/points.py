"""
Point Set Manager: owns the ordered control polygon and its mutations.
"""

import logging

from . import constants
from .geometry import Point, Polygon, clamp_point, default_fan_out, segment_length_squared

logger = logging.getLogger(__name__)


def clamp_count(count) -> int:
    """Round and clamp a requested point count into [MIN_POINTS, MAX_POINTS]."""
    return max(constants.MIN_POINTS, min(constants.MAX_POINTS, int(round(count))))


class PointSet:
    """
    Ordered control polygon bounded to [MIN_POINTS, MAX_POINTS] points.

    The polygon is held as a tuple of immutable Points and is only ever
    replaced, never edited in place, so readers always see a consistent
    polygon.
    """

    def __init__(self, width: float, height: float, count: int = constants.DEFAULT_POINT_COUNT):
        self.width = width
        self.height = height
        self._points: Polygon = default_fan_out(clamp_count(count), width, height)

    @property
    def polygon(self) -> Polygon:
        return self._points

    def __len__(self):
        return len(self._points)

    def reset(self, count: int = constants.DEFAULT_POINT_COUNT):
        """Replace the polygon with the default fan-out of `count` points."""
        self._points = default_fan_out(clamp_count(count), self.width, self.height)
        logger.info("Reset control polygon to %d points", len(self._points))

    def resize(self, count) -> bool:
        """
        Change the number of control points.

        Shrinking drops trailing points. Growing repeatedly inserts the
        midpoint of the currently longest segment.

        Returns:
            True if the polygon changed
        """
        n = clamp_count(count)
        current = len(self._points)
        if n == current:
            logger.debug("Resize to %d points is a no-op", n)
            return False

        if n < current:
            self._points = self._points[:n]
        else:
            while len(self._points) < n:
                if len(self._points) < 2:
                    self._points = default_fan_out(n, self.width, self.height)
                    break
                self._insert_at_longest_segment()

        logger.info("Resized control polygon from %d to %d points", current, len(self._points))
        return True

    def move(self, index: int, point: Point) -> bool:
        """
        Replace point `index` with `point` clamped into the canvas.

        Out-of-range indices are ignored.

        Returns:
            True if a point was replaced
        """
        if not 0 <= index < len(self._points):
            logger.debug("Ignoring move of invalid point index %s", index)
            return False
        pts = list(self._points)
        pts[index] = clamp_point(point, self.width, self.height)
        self._points = tuple(pts)
        return True

    def _longest_segment_index(self) -> int:
        # Strict comparison keeps the lowest index among equally long segments
        best_idx = 0
        max_len_sq = 0.0
        for i in range(len(self._points) - 1):
            len_sq = segment_length_squared(self._points[i], self._points[i + 1])
            if len_sq > max_len_sq:
                max_len_sq = len_sq
                best_idx = i
        return best_idx

    def _insert_at_longest_segment(self):
        i = self._longest_segment_index()
        a = self._points[i]
        b = self._points[i + 1]
        mid = Point((a.x + b.x) / 2, (a.y + b.y) / 2)
        self._points = self._points[:i + 1] + (mid,) + self._points[i + 1:]
