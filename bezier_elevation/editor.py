"""
CurveEditor: the explicitly owned editor state and its mutation API.

Every mutation goes through `apply_mutation`, which mutates, rebuilds the
elevation history and publishes a fresh immutable snapshot to the render
listeners. Listeners never observe a polygon whose history is stale.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from . import constants
from .config import EditorConfig
from .elevation import ElevationPipeline
from .geometry import Point, Polygon, SurfaceTransform
from .interaction import IDLE, Phase, PointerEvent, transition
from .points import PointSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorSnapshot:
    """Read-only view of the editor handed to renderers and readouts."""
    points: Polygon
    history: Tuple[Polygon, ...]
    level: int
    max_level: int
    show_base: bool
    show_elevated: bool
    hover_index: Optional[int]
    dragging_index: Optional[int]
    active_page: str
    width: float
    height: float

    @property
    def base_degree(self) -> int:
        return max(len(self.points) - 1, 0)

    @property
    def elevated_degree(self) -> int:
        return self.base_degree + len(self.history)


RenderListener = Callable[[EditorSnapshot], None]


class CurveEditor:
    """
    Control polygon, elevation pipeline, view toggles and interaction state.

    Args:
        config: Startup configuration (defaults to EditorConfig())
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.points = PointSet(self.config.width, self.config.height, self.config.default_point_count)
        self.pipeline = ElevationPipeline(self.config.max_level)
        self.interaction = IDLE
        self.show_base = True
        self.show_elevated = True
        self.active_page = self.config.initial_page
        self._listeners: List[RenderListener] = []

        self.pipeline.rebuild(self.points.polygon)
        self._snapshot = self._build_snapshot()

    # ------------------------------------------------------------------
    # Render listeners
    # ------------------------------------------------------------------
    def add_render_listener(self, listener: RenderListener):
        self._listeners.append(listener)

    def remove_render_listener(self, listener: RenderListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> EditorSnapshot:
        return self._snapshot

    def _build_snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            points=self.points.polygon,
            history=self.pipeline.history,
            level=self.pipeline.level,
            max_level=self.pipeline.max_level,
            show_base=self.show_base,
            show_elevated=self.show_elevated,
            hover_index=self.interaction.hover_index,
            dragging_index=self.interaction.dragging_index,
            active_page=self.active_page,
            width=self.config.width,
            height=self.config.height,
        )

    def render(self) -> EditorSnapshot:
        """Publish the current state to all listeners."""
        self._snapshot = self._build_snapshot()
        for listener in list(self._listeners):
            listener(self._snapshot)
        return self._snapshot

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def apply_mutation(self, mutate: Callable[[], object]) -> EditorSnapshot:
        """
        Run `mutate`, rebuild the elevation history and render.

        Args:
            mutate: Callable changing the point set, level or toggles

        Returns:
            The snapshot published after the rebuild
        """
        mutate()
        self.pipeline.rebuild(self.points.polygon)
        if self.interaction.index is not None and self.interaction.index >= len(self.points):
            # The hovered/dragged point no longer exists
            self.interaction = IDLE
        return self.render()

    def resize(self, count) -> EditorSnapshot:
        return self.apply_mutation(lambda: self.points.resize(count))

    def reset(self, count: Optional[int] = None) -> EditorSnapshot:
        if count is None:
            count = self.config.default_point_count
        return self.apply_mutation(lambda: self.points.reset(count))

    def move_point(self, index: int, point: Point) -> EditorSnapshot:
        return self.apply_mutation(lambda: self.points.move(index, point))

    def set_level(self, level) -> EditorSnapshot:
        return self.apply_mutation(lambda: self.pipeline.set_level(level))

    def toggle_base(self) -> EditorSnapshot:
        def flip():
            self.show_base = not self.show_base
        return self.apply_mutation(flip)

    def toggle_elevated(self) -> EditorSnapshot:
        def flip():
            self.show_elevated = not self.show_elevated
        return self.apply_mutation(flip)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def handle_pointer(self, event: PointerEvent,
                       surface: Optional[SurfaceTransform] = None,
                       can_capture: bool = True) -> EditorSnapshot:
        """
        Feed one pointer event through the interaction state machine.

        Args:
            event: Pointer event in host coordinates
            surface: Mapping from host coordinates to canvas pixels; when
                omitted the event coordinates are already canvas pixels
            can_capture: Whether the host supports pointer capture

        Returns:
            The current snapshot (re-rendered if the event required it)
        """
        if surface is None:
            position = Point(event.x, event.y)
        else:
            position = surface.to_canvas(event.x, event.y)

        previous = self.interaction
        step = transition(
            previous, event, position, self.points.polygon,
            press_radius=self.config.press_radius,
            hover_radius=self.config.hover_radius,
            can_capture=can_capture,
        )
        self.interaction = step.state

        if step.state.phase is Phase.DRAGGING and previous.phase is not Phase.DRAGGING:
            logger.debug("Drag started on P%d", step.state.index)
        elif previous.phase is Phase.DRAGGING and step.state.phase is not Phase.DRAGGING:
            logger.debug("Drag of P%d ended (%s)", previous.index, event.kind.value)

        if step.move is not None:
            index, target = step.move
            return self.move_point(index, target)
        if step.render:
            return self.render()
        return self._snapshot

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def set_active_page(self, page: str) -> bool:
        """
        Switch the active page; only entering the playground re-renders.

        Returns:
            False if `page` is not a known page
        """
        if page not in constants.PAGES:
            logger.debug("Ignoring unknown page %r", page)
            return False
        self.active_page = page
        if page == constants.PLAYGROUND_PAGE:
            self.render()
        else:
            self._snapshot = self._build_snapshot()
        return True
