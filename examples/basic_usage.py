#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Basic usage: evaluate a Bézier curve and show its degree elevation chain.
"""

import numpy as np
import plotly.graph_objects as go
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bezier_elevation import Point, elevate_degree_by, evaluate, sample_curve
from bezier_elevation.visualization import elevated_step_color


def rgba(color):
    """Matplotlib RGBA tuple to a plotly colour string."""
    r, g, b, a = color
    return f"rgba({int(r * 255)}, {int(g * 255)}, {int(b * 255)}, {a})"


def evaluation_example():
    """Evaluate a cubic curve at a few parameters."""
    print("=== Curve evaluation ===")

    polygon = (Point(0, 0), Point(20, 60), Point(60, 60), Point(80, 0))
    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        p = evaluate(polygon, t)
        print(f"t={t:.2f}: ({p.x:.3f}, {p.y:.3f})")


def elevation_chain_example(levels=4):
    """Plot a cubic curve together with its elevated control polygons."""
    print("\n=== Degree elevation chain ===")

    polygon = (Point(0, 0), Point(20, 60), Point(60, 60), Point(80, 0))
    chain = elevate_degree_by(polygon, levels)

    fig = go.Figure()

    base = np.array(polygon)
    curve = sample_curve(polygon)
    fig.add_trace(go.Scatter(
        x=curve[:, 0], y=curve[:, 1],
        mode='lines', name='Bézier curve',
        line=dict(color='black', width=3)
    ))
    fig.add_trace(go.Scatter(
        x=base[:, 0], y=base[:, 1],
        mode='markers+lines', name=f'Degree {len(polygon) - 1}',
        line=dict(color='black', dash='dash'),
        marker=dict(color='black', size=10)
    ))

    for step, elevated in enumerate(chain):
        P = np.array(elevated)
        print(f"Step {step + 1}: degree {len(elevated) - 1}, {len(elevated)} control points")
        fig.add_trace(go.Scatter(
            x=P[:, 0], y=P[:, 1],
            mode='markers+lines', name=f'Degree {len(elevated) - 1}',
            line=dict(color=rgba(elevated_step_color(step)), dash='dot'),
            marker=dict(size=7)
        ))

    fig.update_layout(
        title="Degree elevation of a cubic Bézier curve",
        xaxis_title="X",
        yaxis_title="Y",
        showlegend=True,
        width=800,
        height=550
    )

    fig.show()


if __name__ == "__main__":
    evaluation_example()
    elevation_chain_example()
