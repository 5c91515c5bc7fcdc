import pytest
import plotly.graph_objects as go
from door_decal.plotting import create_drag_surface_figure, create_surface_shapes
from door_decal.preview import PreviewDescription, surface_size_px

@pytest.fixture
def sample_preview() -> PreviewDescription:
    return PreviewDescription(
        background="app/static/1.png", fit_size_pct=100, anchor_x_pct=25,
        anchor_y_pct=75, opacity=1.0, aspect_ratio=0.5
    )

def test_create_surface_shapes_smoke(sample_preview):
    """Smoke test to ensure create_surface_shapes runs without errors."""
    shapes = create_surface_shapes(sample_preview, 420, 840)
    assert isinstance(shapes, list)
    assert all(isinstance(s, dict) for s in shapes)

def test_anchor_crosshair_position(sample_preview):
    shapes = create_surface_shapes(sample_preview, 400, 800)
    lines = [s for s in shapes if s["type"] == "line"]
    vertical, horizontal = lines[0], lines[1]
    assert vertical["x0"] == vertical["x1"] == pytest.approx(100)
    assert horizontal["y0"] == horizontal["y1"] == pytest.approx(600)

def test_artwork_extent_follows_background_position():
    """A half-width artwork anchored at 100% sits against the right edge."""
    desc = PreviewDescription(None, 50, 100, 50, 1.0, 1.0)
    lines = [s for s in create_surface_shapes(desc, 400, 400) if s["type"] == "line"]
    left, right = lines[2], lines[3]
    assert left["x0"] == pytest.approx(200)
    assert right["x0"] == pytest.approx(400)

def test_create_drag_surface_figure(sample_preview):
    fig = create_drag_surface_figure(sample_preview, 420, 840)
    assert isinstance(fig, go.Figure)
    assert fig.layout.dragmode == "lasso"
    assert tuple(fig.layout.xaxis.range) == (0, 420)
    # y grows downwards like screen pixels
    assert tuple(fig.layout.yaxis.range) == (840, 0)
    anchor = next(t for t in fig.data if t.name == "anchor")
    assert anchor.x[0] == pytest.approx(105)
    assert anchor.y[0] == pytest.approx(630)

@pytest.mark.parametrize("aspect_ratio", [42.5, 100.0, 4200.0])
def test_very_wide_door_still_draws(aspect_ratio):
    """A 10 ft x 0 ft door mid-edit must not collapse the surface below plotly's minimum size."""
    desc = PreviewDescription(None, 100, 50, 50, 1.0, aspect_ratio)
    width, height = surface_size_px(desc)
    fig = create_drag_surface_figure(desc, width, height)
    assert fig.layout.height >= 10
    assert tuple(fig.layout.yaxis.range) == (height, 0)

def test_surface_is_selectable_everywhere(sample_preview):
    fig = create_drag_surface_figure(sample_preview, 100, 60)
    grid = next(t for t in fig.data if t.name == "surface")
    assert min(grid.x) == 0 and max(grid.x) == 100
    assert min(grid.y) == 0 and max(grid.y) == 60
