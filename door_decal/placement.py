"""
Placement State Module.

Holds how the artwork sits on the door: scale, opacity and the 2-D anchor offset.
Every update goes through a reducer that clamps into the field's range, so
sliders and drags can never produce an invalid render.
"""
import math
from dataclasses import dataclass, replace

from door_decal.config import (
    SCALE_RANGE, OPACITY_RANGE, OFFSET_RANGE,
    DEFAULT_SCALE, DEFAULT_OPACITY, DEFAULT_OFFSET_X, DEFAULT_OFFSET_Y
)

@dataclass(frozen=True)
class PlacementState:
    """
    Transform of the artwork over the rendering surface, in percent.
    Offsets are the anchor of the artwork's background placement as a
    percentage of the surface width/height.
    """
    scale_pct: float = DEFAULT_SCALE
    opacity_pct: float = DEFAULT_OPACITY
    offset_x_pct: float = DEFAULT_OFFSET_X
    offset_y_pct: float = DEFAULT_OFFSET_Y


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _clamped(current: float, value, bounds) -> float:
    """
    Clamps `value` into `bounds`. Unreadable input and NaN keep the current
    value; infinities clamp to the nearest bound.
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        return current
    if math.isnan(value):
        return current
    return clamp(value, *bounds)


def set_scale(state: PlacementState, value: float) -> PlacementState:
    return replace(state, scale_pct=_clamped(state.scale_pct, value, SCALE_RANGE))


def set_opacity(state: PlacementState, value: float) -> PlacementState:
    return replace(state, opacity_pct=_clamped(state.opacity_pct, value, OPACITY_RANGE))


def set_offset_x(state: PlacementState, value: float) -> PlacementState:
    return replace(state, offset_x_pct=_clamped(state.offset_x_pct, value, OFFSET_RANGE))


def set_offset_y(state: PlacementState, value: float) -> PlacementState:
    return replace(state, offset_y_pct=_clamped(state.offset_y_pct, value, OFFSET_RANGE))


def set_offset(state: PlacementState, x: float, y: float) -> PlacementState:
    """Moves the anchor on both axes at once."""
    return set_offset_y(set_offset_x(state, x), y)


def reset_placement() -> PlacementState:
    """Artwork centered, unscaled and fully opaque."""
    return PlacementState()
