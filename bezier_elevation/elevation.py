"""
Elevation Pipeline: derives the chain of degree-elevated polygons.
"""

import logging
from typing import Tuple

from . import constants
from .bezier import elevate_degree_by
from .geometry import Polygon

logger = logging.getLogger(__name__)


class ElevationPipeline:
    """
    Holds the requested elevation level and the history derived from a base polygon.

    history[k] is the base polygon elevated k+1 times. The history is a pure
    function of (base polygon, level) and is always rebuilt from scratch.
    """

    def __init__(self, max_level: int = constants.DEFAULT_MAX_LEVEL):
        self.max_level = max(0, int(max_level))
        self.level = 0
        self.history: Tuple[Polygon, ...] = ()
        self._base: Polygon = ()

    def _clamp(self, level) -> int:
        return max(0, min(self.max_level, int(round(level))))

    def set_level(self, level):
        """
        Clamp and store the requested level.

        A base polygon with fewer than 2 points forces the level to 0.
        """
        if len(self._base) < 2:
            self.level = 0
        else:
            self.level = self._clamp(level)
        logger.info("Elevation level set to %d (requested %s)", self.level, level)

    def rebuild(self, base: Polygon) -> Tuple[Polygon, ...]:
        """
        Recompute the whole history for `base` at the current level.

        Returns:
            The new history
        """
        self._base = tuple(base)
        if len(self._base) < 2:
            self.level = 0
            self.history = ()
            return self.history

        self.level = self._clamp(self.level)
        self.history = elevate_degree_by(self._base, self.level)
        return self.history

    @property
    def base_degree(self) -> int:
        return max(len(self._base) - 1, 0)

    @property
    def elevated_degree(self) -> int:
        return self.base_degree + len(self.history)
