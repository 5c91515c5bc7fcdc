"""
Preview Composition Module.

Combines the door's proportions, the placement state and the active artwork into
a description the presentation layer can render. No validation happens here:
placement values are already clamped upstream.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from door_decal.config import (
    MIN_DOOR_AXIS_FT, MIN_ASPECT_RATIO, PREVIEW_MAX_WIDTH_PX, MIN_SURFACE_PX, ASSET_BASE_URL
)
from door_decal.enums import LengthUnit
from door_decal.units import to_feet
from door_decal.placement import PlacementState
from door_decal.artwork import ArtworkRef, CatalogArtwork, UploadedArtwork

@dataclass(frozen=True)
class DoorDimensions:
    """Door size in feet, derived from the raw form values on every change."""
    width_ft: float
    height_ft: float

    @classmethod
    def from_raw(cls, width: Any, height: Any, unit: Union[LengthUnit, str]) -> "DoorDimensions":
        return cls(to_feet(width, unit), to_feet(height, unit))

@dataclass(frozen=True)
class PreviewDescription:
    background: Optional[str]
    fit_size_pct: float
    anchor_x_pct: float
    anchor_y_pct: float
    opacity: float
    aspect_ratio: float


def door_aspect_ratio(dims: DoorDimensions) -> float:
    """Width / height of the preview, never thinner than MIN_ASPECT_RATIO."""
    width = max(dims.width_ft, MIN_DOOR_AXIS_FT)
    height = max(dims.height_ft, MIN_DOOR_AXIS_FT)
    return max(width / height, MIN_ASPECT_RATIO)


def artwork_url(artwork: Optional[ArtworkRef], asset_base_url: str = ASSET_BASE_URL) -> Optional[str]:
    if isinstance(artwork, UploadedArtwork):
        return artwork.data_uri
    if isinstance(artwork, CatalogArtwork):
        return f"{asset_base_url}{artwork.sample_id}"
    return None


def compose_preview(
    dims: DoorDimensions,
    placement: PlacementState,
    artwork: Optional[ArtworkRef],
    asset_base_url: str = ASSET_BASE_URL
) -> PreviewDescription:
    return PreviewDescription(
        background=artwork_url(artwork, asset_base_url),
        fit_size_pct=placement.scale_pct,
        anchor_x_pct=placement.offset_x_pct,
        anchor_y_pct=placement.offset_y_pct,
        opacity=placement.opacity_pct / 100.0,
        aspect_ratio=door_aspect_ratio(dims),
    )


def surface_size_px(desc: PreviewDescription, max_width_px: float = PREVIEW_MAX_WIDTH_PX) -> Tuple[float, float]:
    """
    Pixel size of the rendering surface for a preview capped at `max_width_px` wide.
    Very wide doors are floored at MIN_SURFACE_PX tall so the surface can still be drawn.
    """
    return float(max_width_px), max(max_width_px / desc.aspect_ratio, float(MIN_SURFACE_PX))


def surface_css(desc: PreviewDescription, dragging: bool = False) -> str:
    """
    Inline CSS for the vinyl surface. The artwork is fitted to `fit_size_pct` of
    the surface width keeping its own aspect ratio, and anchored at the offsets.
    Transitions are disabled mid-drag so the artwork follows the pointer.
    """
    rules = [
        "background-repeat: no-repeat",
        f"background-size: {desc.fit_size_pct:g}% auto",
        f"background-position: {desc.anchor_x_pct:g}% {desc.anchor_y_pct:g}%",
        f"opacity: {desc.opacity:g}",
    ]
    if desc.background:
        rules.insert(0, f"background-image: url('{desc.background}')")
    if dragging:
        rules.append("transition: none")
    else:
        rules.append("transition: background-size 0.1s, background-position 0.1s, opacity 0.1s")
    return "; ".join(rules) + ";"
