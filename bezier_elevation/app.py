"""
Matplotlib front end for the curve editor.

Wires figure pointer events, sliders, buttons and the page selector to a
CurveEditor and redraws whenever the editor publishes a snapshot.
"""

import logging

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.widgets import Button, RadioButtons, Slider

from . import constants
from .config import build_parser, config_from_args, log_level_from_args
from .editor import CurveEditor
from .geometry import SurfaceTransform
from .interaction import PointerEvent, PointerKind
from .logging_config import setup_logging
from .matrices import precompute_elevation_matrices
from .readout import controls_view, format_coordinates, status_text
from .visualization import render_scene, render_theory

logger = logging.getLogger(__name__)

NON_INTERACTIVE_BACKENDS = {'agg', 'cairo', 'pdf', 'pgf', 'ps', 'svg', 'template'}

# Matplotlib reports a single mouse pointer
MOUSE_POINTER_ID = 1


def has_drawing_surface(backend=None):
    """True if the matplotlib backend provides an interactive window."""
    backend = (backend or matplotlib.get_backend()).lower()
    if backend.startswith('module://matplotlib_inline'):
        return False
    return backend not in NON_INTERACTIVE_BACKENDS


class EditorWindow:
    """
    Matplotlib figure hosting the editor canvas and its controls.

    Args:
        editor: CurveEditor to display and drive
        figure: Optional existing figure (a new one is created otherwise)
    """

    def __init__(self, editor, figure=None):
        self.editor = editor
        self.figure = figure if figure is not None else plt.figure(figsize=(14, 9))
        self._syncing = False
        self._pointer_inside = False

        fig = self.figure
        self.ax = fig.add_axes([0.02, 0.22, 0.66, 0.74])
        self.coords_ax = fig.add_axes([0.71, 0.40, 0.27, 0.56])
        self.coords_ax.axis('off')
        self.status_ax = fig.add_axes([0.02, 0.02, 0.66, 0.05])
        self.status_ax.axis('off')

        snapshot = editor.snapshot()
        config = editor.config

        self.count_slider = Slider(
            fig.add_axes([0.10, 0.14, 0.50, 0.03]), 'Points',
            constants.MIN_POINTS, constants.MAX_POINTS,
            valinit=len(snapshot.points), valstep=1
        )
        self.level_slider = Slider(
            fig.add_axes([0.10, 0.09, 0.50, 0.03]), 'Elevation',
            0, max(config.max_level, 1),
            valinit=snapshot.level, valstep=1
        )
        self.reset_button = Button(fig.add_axes([0.71, 0.30, 0.27, 0.05]), 'Reset points')
        self.base_button = Button(fig.add_axes([0.71, 0.24, 0.27, 0.05]), '')
        self.elevated_button = Button(fig.add_axes([0.71, 0.18, 0.27, 0.05]), '')
        self.page_selector = RadioButtons(
            fig.add_axes([0.71, 0.04, 0.27, 0.11]), constants.PAGES,
            active=constants.PAGES.index(editor.active_page)
        )

        self.count_slider.on_changed(self._on_count_changed)
        self.level_slider.on_changed(self._on_level_changed)
        self.reset_button.on_clicked(lambda _event: self.editor.reset())
        self.base_button.on_clicked(lambda _event: self.editor.toggle_base())
        self.elevated_button.on_clicked(lambda _event: self.editor.toggle_elevated())
        self.page_selector.on_clicked(self._on_page_selected)

        canvas = fig.canvas
        canvas.mpl_connect('button_press_event', self._on_press)
        canvas.mpl_connect('motion_notify_event', self._on_motion)
        canvas.mpl_connect('button_release_event', self._on_release)
        canvas.mpl_connect('figure_leave_event', self._on_leave)

        editor.add_render_listener(self.refresh)
        self.refresh(snapshot)

    # ------------------------------------------------------------------
    # Coordinate mapping
    # ------------------------------------------------------------------
    def surface_transform(self):
        """
        Map matplotlib display pixels (origin bottom-left) to canvas pixels.

        Display coordinates are first flipped to a top-left origin so the
        canvas axes rectangle can be described by its left/top corner.
        """
        fig_height = self.figure.bbox.height
        bbox = self.ax.bbox
        return SurfaceTransform(
            left=bbox.x0,
            top=fig_height - bbox.y1,
            logical_width=bbox.width,
            logical_height=bbox.height,
            canvas_width=self.editor.config.width,
            canvas_height=self.editor.config.height,
        )

    def _pointer_event(self, kind, event):
        fig_height = self.figure.bbox.height
        # Leave events may carry no position
        x = float(event.x) if event.x is not None else 0.0
        y = float(fig_height - event.y) if event.y is not None else 0.0
        return PointerEvent(
            kind=kind,
            pointer_id=MOUSE_POINTER_ID,
            x=x,
            y=y,
            buttons=1 if getattr(event, 'button', None) is not None else 0,
        )

    def _send(self, kind, event):
        self.editor.handle_pointer(self._pointer_event(kind, event), self.surface_transform())

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def _on_press(self, event):
        if event.inaxes is not self.ax or self.editor.active_page != constants.PLAYGROUND_PAGE:
            return
        self._send(PointerKind.DOWN, event)

    def _on_motion(self, event):
        if self.editor.active_page != constants.PLAYGROUND_PAGE:
            return
        inside = event.inaxes is self.ax
        if self.editor.interaction.dragging_index is not None:
            # Pointer is captured: keep following it outside the canvas
            self._send(PointerKind.MOVE, event)
            return
        if inside:
            self._pointer_inside = True
            self._send(PointerKind.MOVE, event)
        elif self._pointer_inside:
            self._pointer_inside = False
            self._send(PointerKind.LEAVE, event)

    def _on_release(self, event):
        if self.editor.interaction.dragging_index is None and event.inaxes is not self.ax:
            return
        self._send(PointerKind.UP, event)

    def _on_leave(self, event):
        self._pointer_inside = False
        self._send(PointerKind.LEAVE, event)

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------
    def _on_count_changed(self, value):
        if not self._syncing:
            self.editor.resize(value)

    def _on_level_changed(self, value):
        if not self._syncing:
            self.editor.set_level(value)

    def _on_page_selected(self, label):
        self.editor.set_active_page(label)
        if label != constants.PLAYGROUND_PAGE:
            render_theory(self.ax, self.editor.snapshot())
            self.figure.canvas.draw_idle()

    def refresh(self, snapshot):
        """Redraw the canvas and bring every control in line with `snapshot`."""
        if snapshot.active_page == constants.PLAYGROUND_PAGE:
            render_scene(self.ax, snapshot, grid_spacing=self.editor.config.grid_spacing)
            self.coords_ax.cla()
            self.coords_ax.axis('off')
            self.coords_ax.text(0.0, 1.0, format_coordinates(snapshot.points), va='top', ha='left',
                                family='monospace', fontsize=10, transform=self.coords_ax.transAxes)
        else:
            render_theory(self.ax, snapshot)

        self.status_ax.cla()
        self.status_ax.axis('off')
        self.status_ax.text(0.0, 0.5, status_text(snapshot), va='center', ha='left',
                            fontsize=11, transform=self.status_ax.transAxes)

        view = controls_view(snapshot)
        self._syncing = True
        try:
            if self.count_slider.val != view.point_count:
                self.count_slider.set_val(view.point_count)
            if self.level_slider.val != view.level:
                self.level_slider.set_val(view.level)
        finally:
            self._syncing = False

        self.level_slider.set_active(view.elevation_enabled)
        self.base_button.label.set_text(view.base_toggle_label)
        self.elevated_button.label.set_text(view.elevated_toggle_label)
        self.elevated_button.set_active(view.toggle_elevated_enabled)
        self.elevated_button.label.set_alpha(1.0 if view.toggle_elevated_enabled else 0.4)

        self.figure.canvas.draw_idle()


def main(argv=None):
    """
    Launch the interactive editor.

    Returns:
        Process exit status; 1 if no interactive drawing surface is available
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(log_level_from_args(args), args.log_file)

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    if not has_drawing_surface():
        logger.error("No interactive drawing surface (matplotlib backend %r); editor not started",
                     matplotlib.get_backend())
        return 1

    precompute_elevation_matrices(constants.MAX_POINTS - 1 + config.max_level)
    editor = CurveEditor(config)
    EditorWindow(editor)
    logger.info("Editor started with %d points, max elevation level %d",
                config.default_point_count, config.max_level)
    plt.show()
    return 0
