"""
Matplotlib rendering of the editor state.

The axes are set up in canvas pixel space (origin top-left, y down) so
control points can be plotted directly. Rendering only reads the snapshot.
"""

import numpy as np

from .bezier import sample_curve
from .constants import GRID_SPACING, PALETTE


def setup_canvas_axes(ax, width, height):
    """Configure `ax` as a width x height pixel canvas."""
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('auto')
    ax.set_xticks([]); ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_edgecolor("0.85")


def draw_grid(ax, width, height, spacing=GRID_SPACING, color=PALETTE['grid']):
    """Dashed decorative grid; lines at every `spacing` pixels, borders excluded."""
    for x in np.arange(spacing, width, spacing):
        ax.plot([x, x], [0, height], color=color, lw=1, linestyle=(0, (4, 16)))
    for y in np.arange(spacing, height, spacing):
        ax.plot([0, width], [y, y], color=color, lw=1, linestyle=(0, (4, 16)))


def draw_control_polygon(ax, points, color=PALETTE['control_polygon'], dash=(10, 8)):
    if len(points) < 2:
        return None
    P = np.asarray(points, dtype=float)
    line, = ax.plot(P[:, 0], P[:, 1], color=color, lw=2, linestyle=(0, dash),
                    solid_joinstyle='round', dash_joinstyle='round')
    return line


def draw_bezier_curve(ax, points, color, width=3.0):
    """Curve drawn as straight segments between uniform de Casteljau samples."""
    samples = sample_curve(points)
    if samples.shape[0] == 0:
        return None
    line, = ax.plot(samples[:, 0], samples[:, 1], color=color, lw=width,
                    solid_capstyle='round', solid_joinstyle='round')
    return line


def draw_control_points(ax, points, color, outline=None, highlight=None, size=10,
                        hover_index=None, active_index=None):
    """
    Plot control points with `P{index}` labels.

    The dragged point is drawn largest, a hovered one slightly larger than the
    rest; both get a halo when `highlight` is given.
    """
    for index, pt in enumerate(points):
        is_active = index == active_index
        is_hover = index == hover_index
        r = size + 3 if is_active else size + 2 if is_hover else size

        if highlight is not None and (is_active or is_hover):
            ax.plot(pt.x, pt.y, 'o', ms=r + 4, color=highlight, zorder=3)

        ax.plot(pt.x, pt.y, 'o', ms=r, color=color, zorder=4,
                markeredgecolor=outline if outline is not None else color,
                markeredgewidth=2 if outline is not None else 0)
        ax.annotate(f"P{index}", (pt.x, pt.y), xytext=(r + 4, 0), textcoords='offset points',
                    va='center', fontsize=10, color=PALETTE['label'], zorder=5)


def elevated_step_color(step_index, palette=PALETTE):
    """Curve colour for elevation step `step_index`; steps past the palette reuse its last colour."""
    steps = palette['elevated_curve_steps']
    return steps[min(step_index, len(steps) - 1)]


def render_scene(ax, snapshot, palette=PALETTE, grid_spacing=GRID_SPACING):
    """
    Draw grid, base curve and elevated curves for `snapshot` onto `ax`.

    Args:
        ax: Matplotlib axes used as the canvas
        snapshot: EditorSnapshot to draw
        palette: Colour mapping (see constants.PALETTE)
        grid_spacing: Grid spacing in canvas pixels
    """
    ax.cla()
    setup_canvas_axes(ax, snapshot.width, snapshot.height)
    draw_grid(ax, snapshot.width, snapshot.height, grid_spacing, palette['grid'])

    if snapshot.show_base:
        draw_control_polygon(ax, snapshot.points, palette['control_polygon'])
        draw_bezier_curve(ax, snapshot.points, palette['base_curve'], 3.5)
        draw_control_points(
            ax, snapshot.points,
            color=palette['control_point'],
            outline=palette['control_point_outline'],
            highlight=palette['highlight'],
            size=10,
            hover_index=snapshot.hover_index,
            active_index=snapshot.dragging_index,
        )

    if snapshot.show_elevated and snapshot.history:
        for step, elevated in enumerate(snapshot.history):
            draw_control_polygon(ax, elevated, palette['elevated_polygon'], dash=(6, 6))
            draw_bezier_curve(ax, elevated, elevated_step_color(step, palette), 2.5)
            draw_control_points(
                ax, elevated,
                color=palette['elevated_point'],
                outline=palette['control_point_outline'],
                size=8,
            )


THEORY_TEXT = (
    "Degree elevation\n\n"
    "A degree-n curve with control points $P_0 \\ldots P_n$ is rewritten with n+2 points:\n\n"
    "$Q_0 = P_0$,   $Q_{n+1} = P_n$\n"
    "$Q_i = \\frac{i}{n+1} P_{i-1} + \\left(1 - \\frac{i}{n+1}\\right) P_i$,   $1 \\leq i \\leq n$\n\n"
    "The curve is unchanged; only its control polygon gains a point.\n"
    "Repeated elevation makes the polygon converge to the curve."
)


def render_theory(ax, snapshot):
    """Explanatory page shown instead of the canvas."""
    ax.cla()
    setup_canvas_axes(ax, snapshot.width, snapshot.height)
    ax.text(0.05, 0.9, THEORY_TEXT, transform=ax.transAxes, va='top', ha='left', fontsize=13)
