"""
Drag Controller Module.

Translates pointer gestures on the rendering surface into placement offset
updates. The controller is a two-state machine, Idle or Dragging(session);
every pointer event is folded through `handle_pointer_event`, which returns
the next controller state together with the next placement.

Pixel deltas are converted to percent of the surface size captured at
pointer-down, so dragging across the full surface width moves the offset
across its full range whatever the surface's pixel size.
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from door_decal.placement import PlacementState, set_offset

logger = logging.getLogger(__name__)

# --- Pointer Events ---

@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float
    surface_width: float
    surface_height: float

@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float

@dataclass(frozen=True)
class PointerUp:
    pass

@dataclass(frozen=True)
class PointerLeave:
    pass

PointerEvent = Union[PointerDown, PointerMove, PointerUp, PointerLeave]

# --- Controller States ---

@dataclass(frozen=True)
class DragSession:
    """Snapshot taken at pointer-down; the surface does not resize mid-drag."""
    anchor_x: float
    anchor_y: float
    base_offset_x: float
    base_offset_y: float
    surface_width: float
    surface_height: float

    def offsets_at(self, x: float, y: float) -> Tuple[float, float]:
        """Unclamped offsets for a pointer at (x, y)."""
        dx = x - self.anchor_x
        dy = y - self.anchor_y
        return (
            self.base_offset_x + dx * (100.0 / self.surface_width),
            self.base_offset_y + dy * (100.0 / self.surface_height),
        )

@dataclass(frozen=True)
class Idle:
    pass

@dataclass(frozen=True)
class Dragging:
    session: DragSession

DragState = Union[Idle, Dragging]


def is_dragging(state: DragState) -> bool:
    return isinstance(state, Dragging)


def suppresses_text_selection(state: DragState) -> bool:
    """Text selection in the page is disabled for exactly as long as a drag lasts."""
    return is_dragging(state)


def _valid_surface(width: float, height: float) -> bool:
    return all(isinstance(v, (int, float)) and math.isfinite(v) and v > 0 for v in (width, height))


def start_drag(placement: PlacementState, event: PointerDown) -> DragState:
    if not _valid_surface(event.surface_width, event.surface_height):
        logger.debug(f"Ignoring pointer-down on an unsized surface ({event.surface_width}x{event.surface_height})")
        return Idle()
    return Dragging(DragSession(
        anchor_x=event.x,
        anchor_y=event.y,
        base_offset_x=placement.offset_x_pct,
        base_offset_y=placement.offset_y_pct,
        surface_width=float(event.surface_width),
        surface_height=float(event.surface_height),
    ))


def handle_pointer_event(
    state: DragState,
    placement: PlacementState,
    event: PointerEvent
) -> Tuple[DragState, PlacementState]:
    """
    Applies one pointer event.
    Idle only reacts to pointer-down; moves, releases and leaves are no-ops.
    While Dragging, a move updates the offsets and a release or leave ends the drag.
    A pointer-down during a drag re-anchors from the new position.
    """
    if isinstance(event, PointerDown):
        return start_drag(placement, event), placement

    if not isinstance(state, Dragging):
        return state, placement

    if isinstance(event, PointerMove):
        x, y = state.session.offsets_at(event.x, event.y)
        return state, set_offset(placement, x, y)

    if isinstance(event, (PointerUp, PointerLeave)):
        return Idle(), placement

    raise TypeError(f"Unsupported pointer event: {event!r}")


def _on_surface(x: float, y: float, width: float, height: float) -> bool:
    return 0 <= x <= width and 0 <= y <= height


def events_from_path(
    xs: Sequence[float],
    ys: Sequence[float],
    surface_width: float,
    surface_height: float
) -> List[PointerEvent]:
    """
    Converts a recorded pointer path (e.g. a lasso gesture drawn on the preview)
    into the event stream down, move..., up. A path that starts off the surface
    produces no events; one that exits the surface is cut at the exit point and
    ends with a leave instead of an up.
    """
    points = list(zip(xs, ys))
    if not points or not _on_surface(points[0][0], points[0][1], surface_width, surface_height):
        return []
    (x0, y0), rest = points[0], points[1:]
    events: List[PointerEvent] = [PointerDown(x0, y0, surface_width, surface_height)]
    for x, y in rest:
        if not _on_surface(x, y, surface_width, surface_height):
            events.append(PointerLeave())
            return events
        events.append(PointerMove(x, y))
    events.append(PointerUp())
    return events


def replay(
    state: DragState,
    placement: PlacementState,
    events: Sequence[PointerEvent]
) -> Tuple[DragState, PlacementState]:
    """Folds a sequence of pointer events in arrival order."""
    for event in events:
        state, placement = handle_pointer_event(state, placement, event)
    return state, placement
