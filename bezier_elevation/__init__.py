"""
Bézier Curve Degree Elevation Editor

This package implements an interactive editor for single open Bézier curves:
the user drags a small set of control points and sees the curve together with
its degree-elevated control polygons. The geometry kernel (de Casteljau
evaluation, degree elevation, hit-testing), the point set and elevation
pipeline and the pointer state machine are independent of matplotlib, which
is only used by the renderer and the window front end.
"""

from .geometry import (
    Point,
    SurfaceTransform,
    as_array,
    as_polygon,
    clamp_point,
    default_fan_out,
    nearest_point_index,
    segment_length_squared
)
from .de_casteljau import evaluate
from .bezier import (
    BezierCurve,
    curve_segment_count,
    elevate_degree,
    elevate_degree_by,
    sample_curve
)
from .matrices import (
    get_E_matrix,
    get_elevation_matrix,
    clear_matrix_cache,
    get_cache_info,
    precompute_elevation_matrices
)
from .points import PointSet, clamp_count
from .elevation import ElevationPipeline
from .interaction import (
    IDLE,
    InteractionState,
    Phase,
    PointerEvent,
    PointerKind,
    Transition,
    transition
)
from .editor import CurveEditor, EditorSnapshot
from .readout import ControlsView, controls_view, format_coordinates, status_text
from .config import EditorConfig, build_parser, config_from_args
from .logging_config import setup_logging
from . import constants

__all__ = [
    # Geometry
    'Point',
    'SurfaceTransform',
    'as_array',
    'as_polygon',
    'clamp_point',
    'default_fan_out',
    'nearest_point_index',
    'segment_length_squared',

    # Curves
    'evaluate',
    'BezierCurve',
    'curve_segment_count',
    'elevate_degree',
    'elevate_degree_by',
    'sample_curve',

    # Matrix functions
    'get_E_matrix',
    'get_elevation_matrix',
    'clear_matrix_cache',
    'get_cache_info',
    'precompute_elevation_matrices',

    # State
    'PointSet',
    'clamp_count',
    'ElevationPipeline',
    'CurveEditor',
    'EditorSnapshot',

    # Interaction
    'IDLE',
    'InteractionState',
    'Phase',
    'PointerEvent',
    'PointerKind',
    'Transition',
    'transition',

    # Readout
    'ControlsView',
    'controls_view',
    'format_coordinates',
    'status_text',

    # Configuration
    'EditorConfig',
    'build_parser',
    'config_from_args',
    'setup_logging',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
