import pytest
from door_decal.placement import PlacementState
from door_decal.drag import (
    Idle, Dragging, DragSession, PointerDown, PointerMove, PointerUp, PointerLeave,
    handle_pointer_event, events_from_path, replay, is_dragging, suppresses_text_selection
)

@pytest.fixture
def placement() -> PlacementState:
    return PlacementState()

def test_pointer_down_opens_session(placement):
    state, new_placement = handle_pointer_event(Idle(), placement, PointerDown(10, 20, 400, 800))
    assert new_placement == placement
    assert state == Dragging(DragSession(
        anchor_x=10, anchor_y=20, base_offset_x=50, base_offset_y=50,
        surface_width=400, surface_height=800
    ))
    assert is_dragging(state)
    assert suppresses_text_selection(state)

def test_pointer_move_converts_pixels_to_percent(placement):
    state, placement = handle_pointer_event(Idle(), placement, PointerDown(100, 100, 400, 800))
    state, placement = handle_pointer_event(state, placement, PointerMove(140, 20))
    # +40px of 400 -> +10%, -80px of 800 -> -10%
    assert placement.offset_x_pct == pytest.approx(60)
    assert placement.offset_y_pct == pytest.approx(40)
    assert is_dragging(state)

def test_moves_are_relative_to_the_drag_baseline(placement):
    """Each move is measured from pointer-down, not from the previous move."""
    state, placement = handle_pointer_event(Idle(), placement, PointerDown(0, 0, 200, 200))
    state, placement = handle_pointer_event(state, placement, PointerMove(20, 0))
    state, placement = handle_pointer_event(state, placement, PointerMove(40, 0))
    assert placement.offset_x_pct == pytest.approx(70)

@pytest.mark.parametrize("width", [50, 320, 421.5, 1920])
def test_drag_resolution_independence(width):
    """Dragging the full surface width moves the offset by 100 points before clamping."""
    session = DragSession(anchor_x=0, anchor_y=0, base_offset_x=0, base_offset_y=0, surface_width=width, surface_height=100)
    x, _ = session.offsets_at(width, 0)
    assert x == pytest.approx(100)
    x, _ = session.offsets_at(-width, 0)
    assert x == pytest.approx(-100)

def test_drag_clamps_offsets(placement):
    events = [PointerDown(0, 0, 100, 100), PointerMove(500, -500)]
    state, placement = replay(Idle(), placement, events)
    assert placement.offset_x_pct == 100
    assert placement.offset_y_pct == 0

@pytest.mark.parametrize("end_event", [PointerUp(), PointerLeave()])
def test_release_and_leave_end_the_drag(placement, end_event):
    state, placement = replay(Idle(), placement, [PointerDown(0, 0, 100, 100), PointerMove(10, 10), end_event])
    assert state == Idle()
    assert not suppresses_text_selection(state)
    moved = placement

    state, placement = handle_pointer_event(state, placement, PointerMove(90, 90))
    assert state == Idle()
    assert placement == moved

@pytest.mark.parametrize("event", [PointerMove(5, 5), PointerUp(), PointerLeave()])
def test_idle_ignores_everything_but_pointer_down(placement, event):
    state, new_placement = handle_pointer_event(Idle(), placement, event)
    assert state == Idle()
    assert new_placement is placement

@pytest.mark.parametrize("width, height", [(0, 100), (100, 0), (-5, 100), (float("nan"), 100), (float("inf"), 100)])
def test_pointer_down_on_unsized_surface_stays_idle(placement, width, height):
    state, _ = handle_pointer_event(Idle(), placement, PointerDown(0, 0, width, height))
    assert state == Idle()

def test_pointer_down_while_dragging_reanchors(placement):
    state, placement = replay(Idle(), placement, [PointerDown(0, 0, 100, 100), PointerMove(10, 0)])
    state, placement = handle_pointer_event(state, placement, PointerDown(50, 50, 100, 100))
    assert state.session.anchor_x == 50
    assert state.session.base_offset_x == pytest.approx(60)

def test_unknown_event_while_dragging_raises(placement):
    state, placement = handle_pointer_event(Idle(), placement, PointerDown(0, 0, 100, 100))
    with pytest.raises(TypeError):
        handle_pointer_event(state, placement, object())

def test_events_from_path():
    events = events_from_path([10, 20, 30], [10, 15, 20], 100, 200)
    assert events == [PointerDown(10, 10, 100, 200), PointerMove(20, 15), PointerMove(30, 20), PointerUp()]

def test_events_from_path_leaving_surface():
    """A gesture that exits the surface ends with a leave at the exit point."""
    events = events_from_path([10, 20, 150, 30], [10, 10, 10, 10], 100, 100)
    assert events == [PointerDown(10, 10, 100, 100), PointerMove(20, 10), PointerLeave()]

def test_events_from_path_off_surface_or_empty():
    assert events_from_path([], [], 100, 100) == []
    assert events_from_path([-10, 20], [10, 10], 100, 100) == []

def test_replayed_gesture_leaves_controller_idle(placement):
    events = events_from_path([0, 100], [0, 0], 400, 400)
    state, placement = replay(Idle(), placement, events)
    assert state == Idle()
    # A whole gesture is replayed per rerun, so text selection is never left disabled.
    assert not suppresses_text_selection(state)
    assert placement.offset_x_pct == pytest.approx(75)
