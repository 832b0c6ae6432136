"""
Bézier Curve Degree Elevation Editor

This script opens the interactive editor from the bezier_elevation package.
Drag the control points of a Bézier curve and compare the curve with its
degree-elevated control polygons.

Key Features:
    - 2 to 16 draggable control points (curve degree 1 to 15)
    - Up to --max-level successive degree elevation steps, each drawn with
      its own dashed polygon and curve
    - Reset to the default layout, hide/show the original or elevated curves
    - Live coordinate listing and degree summary

Usage:
    Run the editor with default settings:
        python Bezier_Elevation_Editor.py

    Larger canvas, more elevation steps:
        python Bezier_Elevation_Editor.py --width 1800 --height 1000 --max-level 8

    Show help:
        python Bezier_Elevation_Editor.py --help
"""

import sys

from bezier_elevation.app import main


if __name__ == '__main__':
    sys.exit(main())
