"""
Fixed parameters and palette for the Bézier elevation editor.
"""

# Control polygon size bounds (degree 1 .. 15)
MIN_POINTS = 2
MAX_POINTS = 16
DEFAULT_POINT_COUNT = 4

# Elevation steps
DEFAULT_MAX_LEVEL = 5

# Canvas size in pixels
DEFAULT_WIDTH = 1400
DEFAULT_HEIGHT = 900

# Hit radii in canvas pixels
PRESS_RADIUS = 24.0
HOVER_RADIUS = 20.0

GRID_SPACING = 60

# Curve sampling: max(MIN_CURVE_SEGMENTS, len(polygon) * SEGMENTS_PER_POINT)
MIN_CURVE_SEGMENTS = 40
SEGMENTS_PER_POINT = 40

# Default fan-out layout as fractions of the canvas size
FAN_X_START, FAN_X_SPAN = 0.1, 0.8
FAN_Y_START, FAN_Y_SPAN = 0.8, -0.6

# Pages
PLAYGROUND_PAGE = "playground"
THEORY_PAGE = "theory"
PAGES = (PLAYGROUND_PAGE, THEORY_PAGE)

# Colours (matplotlib RGBA tuples / hex strings)
PALETTE = {
    'control_polygon': '#111111',
    'control_point': '#111111',
    'control_point_outline': '#e0e0e0',
    'base_curve': '#111111',
    'elevated_polygon': (244 / 255, 194 / 255, 194 / 255, 0.9),
    'elevated_curve_steps': (
        (255 / 255, 182 / 255, 193 / 255, 0.95),
        (248 / 255, 180 / 255, 193 / 255, 0.9),
        (244 / 255, 194 / 255, 194 / 255, 0.85),
        (240 / 255, 180 / 255, 190 / 255, 0.8),
    ),
    'elevated_point': '#d48a8a',
    'highlight': '#f5f5f5',
    'grid': (0.0, 0.0, 0.0, 0.08),
    'label': (0.0, 0.0, 0.0, 0.7),
}
