"""
Pointer interaction as a pure state machine.

States are Idle, Hovering(index) and Dragging(index). `transition` maps
(state, event, position, polygon) to a new state plus the side effects the
owner has to carry out: an optional point move and whether to re-render.
Nothing here touches the polygon or a drawing surface.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from . import constants
from .geometry import Point, nearest_point_index


class PointerKind(Enum):
    DOWN = 'down'
    MOVE = 'move'
    UP = 'up'
    LEAVE = 'leave'
    CANCEL = 'cancel'


class Phase(Enum):
    IDLE = 'idle'
    HOVERING = 'hovering'
    DRAGGING = 'dragging'


@dataclass(frozen=True)
class PointerEvent:
    """
    Pointer input in host-surface coordinates.

    Attributes:
        kind: Event kind
        pointer_id: Identifier of the pointer (mouse, pen or touch contact)
        x, y: Position in the host surface's coordinate space
        buttons: Bitmask of pressed buttons, 0 when none is pressed
    """
    kind: PointerKind
    pointer_id: int
    x: float = 0.0
    y: float = 0.0
    buttons: int = 0


@dataclass(frozen=True)
class InteractionState:
    phase: Phase = Phase.IDLE
    index: Optional[int] = None
    pointer_id: Optional[int] = None
    captured: bool = False

    @property
    def dragging_index(self) -> Optional[int]:
        return self.index if self.phase is Phase.DRAGGING else None

    @property
    def hover_index(self) -> Optional[int]:
        # A dragged point is also the hovered one
        return self.index if self.phase is not Phase.IDLE else None


IDLE = InteractionState()


@dataclass(frozen=True)
class Transition:
    state: InteractionState
    move: Optional[Tuple[int, Point]] = None
    render: bool = False


def hovering(index: Optional[int]) -> InteractionState:
    if index is None:
        return IDLE
    return InteractionState(Phase.HOVERING, index)


def dragging(index: int, pointer_id: int, captured: bool = True) -> InteractionState:
    return InteractionState(Phase.DRAGGING, index, pointer_id, captured)


def transition(state: InteractionState,
               event: PointerEvent,
               position: Optional[Point],
               polygon: Sequence[Point],
               press_radius: float = constants.PRESS_RADIUS,
               hover_radius: float = constants.HOVER_RADIUS,
               can_capture: bool = True) -> Transition:
    """
    Advance the interaction state for one pointer event.

    Args:
        state: Current interaction state
        event: Incoming pointer event
        position: Event position already mapped to canvas pixels, or None when
            the surface cannot map it
        polygon: Current control polygon, used for hit-testing
        press_radius: Hit radius for presses
        hover_radius: Hit radius for hover feedback
        can_capture: Whether the host keeps delivering a pressed pointer's
            events after it leaves the surface

    Returns:
        Transition with the next state, an optional (index, position) move
        and a render flag
    """
    kind = event.kind

    if kind is PointerKind.DOWN:
        if position is None:
            return Transition(state)
        index = nearest_point_index(polygon, position, press_radius)
        if index is None:
            return Transition(IDLE, render=True)
        return Transition(dragging(index, event.pointer_id, can_capture), render=True)

    if kind is PointerKind.MOVE:
        if position is None:
            return Transition(state)
        if state.phase is Phase.DRAGGING:
            if state.pointer_id is not None and event.pointer_id != state.pointer_id:
                return Transition(state)
            return Transition(state, move=(state.index, position), render=True)
        if event.buttons:
            new_state = IDLE
        else:
            new_state = hovering(nearest_point_index(polygon, position, hover_radius))
        return Transition(new_state, render=new_state != state)

    if kind in (PointerKind.UP, PointerKind.CANCEL):
        if state.phase is Phase.DRAGGING:
            return Transition(IDLE, render=True)
        return Transition(state, render=True)

    if kind is PointerKind.LEAVE:
        if state.phase is Phase.DRAGGING and state.captured:
            return Transition(state)
        return Transition(IDLE, render=True)

    return Transition(state)
