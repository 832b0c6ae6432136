"""
Textual outputs: coordinate listing, status text and control states.
"""

from typing import NamedTuple, Sequence

from . import constants
from .geometry import Point


def format_number(value, format_spec='.1f'):
    """Format a coordinate for display."""
    return format(value, format_spec)


def format_coordinates(points: Sequence[Point]) -> str:
    """One `P{index}: (x, y)` line per control point, in index order."""
    return "\n".join(
        f"P{i}: ({format_number(p.x)}, {format_number(p.y)})" for i, p in enumerate(points)
    )


def status_text(snapshot) -> str:
    """Describe the base degree, elevation step count and resulting degree."""
    base_degree = snapshot.base_degree
    steps = len(snapshot.history)
    if steps == 0:
        return f"Base degree: {base_degree}. Use the slider to set the elevation level."
    return f"Base degree: {base_degree}. Elevations: {steps}. Current degree: {base_degree + steps}."


class ControlsView(NamedTuple):
    """Enabled flags, labels and values for the editor's controls."""
    point_count: int
    level: int
    elevation_enabled: bool
    toggle_elevated_enabled: bool
    base_toggle_label: str
    elevated_toggle_label: str


def controls_view(snapshot) -> ControlsView:
    can_elevate = len(snapshot.points) >= constants.MIN_POINTS
    has_elevations = len(snapshot.history) > 0
    return ControlsView(
        point_count=len(snapshot.points),
        level=snapshot.level,
        elevation_enabled=can_elevate,
        toggle_elevated_enabled=can_elevate and has_elevations,
        base_toggle_label="Hide original curve" if snapshot.show_base else "Show original curve",
        elevated_toggle_label="Hide elevated curve" if snapshot.show_elevated else "Show elevated curve",
    )
