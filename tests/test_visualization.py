import matplotlib.pyplot as plt
import numpy as np
import pytest

from bezier_elevation.bezier import sample_curve
from bezier_elevation.constants import PALETTE
from bezier_elevation.interaction import PointerEvent, PointerKind
from bezier_elevation.visualization import (
    draw_bezier_curve,
    draw_grid,
    elevated_step_color,
    render_scene,
    render_theory,
)

# 1400 x 900 canvas, 60px spacing: 23 vertical + 14 horizontal lines
GRID_LINES = 37


def rendered_axes(editor):
    fig, ax = plt.subplots()
    render_scene(ax, editor.snapshot())
    return ax


def test_grid_skips_borders():
    fig, ax = plt.subplots()
    draw_grid(ax, 300, 200, spacing=60)
    # x = 60..240, y = 60..180
    assert len(ax.lines) == 4 + 3


def test_curve_line_uses_samples(wavy):
    fig, ax = plt.subplots()
    line = draw_bezier_curve(ax, wavy, 'k')
    np.testing.assert_allclose(np.column_stack(line.get_data()), sample_curve(wavy))


def test_degenerate_curve_is_not_drawn():
    fig, ax = plt.subplots()
    assert draw_bezier_curve(ax, (), 'k') is None
    assert len(ax.lines) == 0


def test_step_colors_clamp_to_palette():
    steps = PALETTE['elevated_curve_steps']
    assert elevated_step_color(0) == steps[0]
    assert elevated_step_color(len(steps) - 1) == steps[-1]
    assert elevated_step_color(len(steps) + 3) == steps[-1]


def test_base_scene(editor):
    ax = rendered_axes(editor)
    # polygon, curve and one marker per control point
    assert len(ax.lines) == GRID_LINES + 2 + 4
    assert [t.get_text() for t in ax.texts] == ["P0", "P1", "P2", "P3"]


def test_scene_with_elevation(editor):
    editor.set_level(2)
    ax = rendered_axes(editor)
    assert len(ax.lines) == GRID_LINES + (2 + 4) + (2 + 5) + (2 + 6)


@pytest.mark.parametrize("toggle, expected", [
    ("toggle_base", GRID_LINES + (2 + 5) + (2 + 6)),
    ("toggle_elevated", GRID_LINES + 2 + 4),
])
def test_toggles_hide_layers(editor, toggle, expected):
    editor.set_level(2)
    history = editor.snapshot().history
    getattr(editor, toggle)()
    assert len(rendered_axes(editor).lines) == expected
    assert editor.snapshot().history == history


def test_hovered_point_gets_halo(editor):
    p = editor.snapshot().points[2]
    editor.handle_pointer(PointerEvent(PointerKind.MOVE, 1, p.x, p.y))
    assert editor.snapshot().hover_index == 2
    assert len(rendered_axes(editor).lines) == GRID_LINES + 2 + 4 + 1


def test_theory_page(editor):
    fig, ax = plt.subplots()
    render_theory(ax, editor.snapshot())
    assert "Degree elevation" in ax.texts[0].get_text()
