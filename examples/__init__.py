"""
Usage examples for the bezier_elevation package.

Included examples:
- basic_usage.py: evaluating a curve and drawing its degree elevation chain
- elevation_convergence.py: how fast elevated polygons approach the curve

Run with:
    python examples/basic_usage.py
    python examples/elevation_convergence.py
"""

__all__ = []
