"""
Editor configuration and command-line parsing.
"""

import argparse
import logging
from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class EditorConfig:
    """
    Startup configuration for a CurveEditor.

    Attributes:
        width, height: Canvas size in pixels; points are clamped into it
        max_level: Highest elevation level accepted by the level control
        default_point_count: Number of points created on startup and reset
        press_radius: Hit radius used when a pointer is pressed
        hover_radius: Hit radius used for hover feedback
        grid_spacing: Spacing of the decorative background grid
        initial_page: Page shown on startup
    """
    width: float = constants.DEFAULT_WIDTH
    height: float = constants.DEFAULT_HEIGHT
    max_level: int = constants.DEFAULT_MAX_LEVEL
    default_point_count: int = constants.DEFAULT_POINT_COUNT
    press_radius: float = constants.PRESS_RADIUS
    hover_radius: float = constants.HOVER_RADIUS
    grid_spacing: int = constants.GRID_SPACING
    initial_page: str = constants.PLAYGROUND_PAGE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        if self.max_level < 0:
            raise ValueError(f"max_level must be >= 0, got {self.max_level}")
        if not constants.MIN_POINTS <= self.default_point_count <= constants.MAX_POINTS:
            raise ValueError(
                f"default_point_count must be in [{constants.MIN_POINTS}, {constants.MAX_POINTS}], "
                f"got {self.default_point_count}"
            )
        if self.press_radius <= 0 or self.hover_radius <= 0:
            raise ValueError("hit radii must be positive")
        if self.grid_spacing <= 0:
            raise ValueError(f"grid_spacing must be positive, got {self.grid_spacing}")
        if self.initial_page not in constants.PAGES:
            raise ValueError(f"unknown page {self.initial_page!r}, expected one of {constants.PAGES}")


def build_parser():
    """Command-line parser for the editor launcher."""
    parser = argparse.ArgumentParser(
        description='Interactive Bézier curve degree elevation editor',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--width', type=float, default=constants.DEFAULT_WIDTH,
                        help='Canvas width in pixels')
    parser.add_argument('--height', type=float, default=constants.DEFAULT_HEIGHT,
                        help='Canvas height in pixels')
    parser.add_argument('--max-level', type=int, default=constants.DEFAULT_MAX_LEVEL,
                        help='Maximum number of degree elevation steps')
    parser.add_argument('--points', type=int, default=constants.DEFAULT_POINT_COUNT,
                        help='Number of control points created on startup and reset')
    parser.add_argument('--page', choices=constants.PAGES, default=constants.PLAYGROUND_PAGE,
                        help='Page shown on startup')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    parser.add_argument('--log-file', default=None,
                        help='Optional file to write logs to')
    return parser


def config_from_args(args):
    """Build an EditorConfig from a parsed argparse namespace."""
    return EditorConfig(
        width=args.width,
        height=args.height,
        max_level=args.max_level,
        default_point_count=args.points,
        initial_page=args.page,
    )


def log_level_from_args(args):
    return getattr(logging, args.log_level)
