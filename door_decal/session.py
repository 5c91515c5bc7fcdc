"""
Configurator Session Module.

A ConfiguratorSession owns everything the buyer has configured so far: raw
dimensions, unit, quantity, placement, the drag controller state and the active
artwork. It is an ordinary object passed by reference, so several configurators
can coexist and tests can build isolated fixtures. All mutation goes through the
pure reducers of the placement, drag and artwork modules.
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from door_decal import placement as placement_ops
from door_decal.artwork import ArtworkRef, apply_upload, default_artwork, select_sample
from door_decal.config import (
    DEFAULT_UNIT, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_QUANTITY, PRICE_PER_SQFT,
    SAMPLE_IMAGES, ASSET_BASE_URL
)
from door_decal.drag import DragState, Idle, PointerEvent, handle_pointer_event, is_dragging, replay
from door_decal.enums import LengthUnit
from door_decal.placement import PlacementState
from door_decal.preview import DoorDimensions, PreviewDescription, compose_preview
from door_decal.pricing import PriceQuote, coerce_quantity, quote

@dataclass
class ConfiguratorSession:
    width: Any = DEFAULT_WIDTH
    height: Any = DEFAULT_HEIGHT
    unit: LengthUnit = LengthUnit(DEFAULT_UNIT)
    quantity: int = DEFAULT_QUANTITY
    placement: PlacementState = field(default_factory=PlacementState)
    drag: DragState = field(default_factory=Idle)
    artwork: Optional[ArtworkRef] = None
    rate: float = PRICE_PER_SQFT
    catalog: Sequence[str] = SAMPLE_IMAGES
    asset_base_url: str = ASSET_BASE_URL

    def __post_init__(self):
        # The first design of this session's own catalog is active until the buyer picks another.
        if self.artwork is None:
            self.artwork = default_artwork(self.catalog)

    # --- Derived values ---

    @property
    def dimensions(self) -> DoorDimensions:
        return DoorDimensions.from_raw(self.width, self.height, self.unit)

    @property
    def quote(self) -> PriceQuote:
        dims = self.dimensions
        return quote(dims.width_ft, dims.height_ft, self.quantity, self.rate)

    @property
    def preview(self) -> PreviewDescription:
        return compose_preview(self.dimensions, self.placement, self.artwork, self.asset_base_url)

    @property
    def is_dragging(self) -> bool:
        return is_dragging(self.drag)

    # --- Measurement inputs ---

    def set_dimensions(self, width: Any, height: Any) -> None:
        self.width = width
        self.height = height

    def set_unit(self, unit) -> None:
        """Unknown tags are ignored; the unit is a closed enumeration."""
        resolved = LengthUnit.parse(unit)
        if resolved is not None:
            self.unit = resolved

    def set_quantity(self, quantity: Any) -> None:
        self.quantity = coerce_quantity(quantity)

    # --- Placement inputs ---

    def set_scale(self, value: float) -> None:
        self.placement = placement_ops.set_scale(self.placement, value)

    def set_opacity(self, value: float) -> None:
        self.placement = placement_ops.set_opacity(self.placement, value)

    def set_offset_x(self, value: float) -> None:
        self.placement = placement_ops.set_offset_x(self.placement, value)

    def set_offset_y(self, value: float) -> None:
        self.placement = placement_ops.set_offset_y(self.placement, value)

    def reset_design(self) -> None:
        self.placement = placement_ops.reset_placement()
        self.drag = Idle()

    def dispatch(self, event: PointerEvent) -> None:
        self.drag, self.placement = handle_pointer_event(self.drag, self.placement, event)

    def dispatch_all(self, events: Sequence[PointerEvent]) -> None:
        self.drag, self.placement = replay(self.drag, self.placement, events)

    # --- Artwork ---

    def select_sample(self, index: int) -> None:
        self.artwork = select_sample(index, self.catalog)

    def upload(self, uploaded_file: Any) -> bool:
        """Makes the uploaded file the active artwork. Returns False if it could not be read."""
        previous = self.artwork
        self.artwork = apply_upload(previous, uploaded_file)
        return self.artwork is not previous
