#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Elevated control polygons converge to the curve they describe.

For each elevation step the distance from every elevated control point to
the curve is estimated against a dense curve sample; the maximum shrinks
roughly like 1/n.
"""

import numpy as np
import plotly.graph_objects as go
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bezier_elevation import BezierCurve, Point, elevate_degree_by


def polygon_to_curve_distance(polygon, dense):
    P = np.array(polygon)
    diffs = P[:, None, :] - dense[None, :, :]
    return np.sqrt((diffs ** 2).sum(axis=2)).min(axis=1).max()


def convergence_demo(max_steps=40):
    print("=== Elevation convergence ===")

    polygon = (Point(0, 0), Point(10, 40), Point(50, -20), Point(70, 30))
    _, dense = BezierCurve(polygon).sample(2000)

    steps = np.arange(1, max_steps + 1)
    distances = []
    for elevated in elevate_degree_by(polygon, max_steps):
        distances.append(polygon_to_curve_distance(elevated, dense))
    for k in (1, 5, 10, 20, 40):
        if k <= max_steps:
            print(f"after {k:2d} steps: max distance {distances[k - 1]:.4f}")

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=steps, y=distances,
        mode='lines+markers', name='max polygon-to-curve distance',
        line=dict(color='crimson', width=2)
    ))
    fig.update_layout(
        title="Convergence of elevated control polygons",
        xaxis_title="Elevation steps",
        yaxis_title="Distance",
        yaxis_type="log",
        width=700,
        height=500
    )
    fig.show()


if __name__ == "__main__":
    convergence_demo()
