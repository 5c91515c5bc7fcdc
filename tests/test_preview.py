import pytest
from door_decal.preview import (
    DoorDimensions, PreviewDescription, door_aspect_ratio, compose_preview,
    artwork_url, surface_css, surface_size_px
)
from door_decal.placement import PlacementState
from door_decal.artwork import CatalogArtwork, UploadedArtwork

def test_door_dimensions_from_raw():
    dims = DoorDimensions.from_raw(36, 74, "in")
    assert dims.width_ft == 3.0
    assert dims.height_ft == pytest.approx(74 / 12)

def test_aspect_ratio():
    assert door_aspect_ratio(DoorDimensions(3, 6)) == pytest.approx(0.5)
    assert door_aspect_ratio(DoorDimensions(6, 3)) == pytest.approx(2.0)

def test_aspect_ratio_degenerate_input():
    """Zero axes are floored at 0.1 ft, thin doors at an aspect of 0.3."""
    assert door_aspect_ratio(DoorDimensions(0, 0)) == pytest.approx(1.0)
    assert door_aspect_ratio(DoorDimensions(5, 0)) == pytest.approx(50.0)
    assert door_aspect_ratio(DoorDimensions(0, 5)) == pytest.approx(0.3)
    assert door_aspect_ratio(DoorDimensions(1, 10)) == pytest.approx(0.3)

def test_compose_preview_catalog():
    placement = PlacementState(scale_pct=150, opacity_pct=80, offset_x_pct=25, offset_y_pct=75)
    desc = compose_preview(DoorDimensions(3, 6), placement, CatalogArtwork(1, "2.png"), asset_base_url="/static/")
    assert desc == PreviewDescription(
        background="/static/2.png", fit_size_pct=150, anchor_x_pct=25,
        anchor_y_pct=75, opacity=0.8, aspect_ratio=0.5
    )

def test_compose_preview_upload_and_none():
    upload = UploadedArtwork("data:image/png;base64,AAAA", "x.png")
    desc = compose_preview(DoorDimensions(3, 6), PlacementState(), upload)
    assert desc.background == "data:image/png;base64,AAAA"
    assert artwork_url(None) is None
    assert compose_preview(DoorDimensions(3, 6), PlacementState(), None).background is None

def test_surface_css():
    desc = PreviewDescription("/static/1.png", 120, 30, 60, 0.9, 0.5)
    css = surface_css(desc)
    assert "background-image: url('/static/1.png')" in css
    assert "background-size: 120% auto" in css
    assert "background-position: 30% 60%" in css
    assert "opacity: 0.9" in css
    assert "transition: background-size" in css

def test_surface_css_while_dragging_and_without_artwork():
    desc = PreviewDescription(None, 100, 50, 50, 1.0, 0.5)
    css = surface_css(desc, dragging=True)
    assert "background-image" not in css
    assert "transition: none" in css

def test_surface_size_px():
    desc = PreviewDescription(None, 100, 50, 50, 1.0, 0.5)
    assert surface_size_px(desc, 420) == (420.0, 840.0)

def test_surface_size_px_floors_height():
    desc = PreviewDescription(None, 100, 50, 50, 1.0, 100.0)
    assert surface_size_px(desc, 420) == (420.0, 10.0)
