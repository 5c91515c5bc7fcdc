"""
Plotting and Visualization Module.
Draws the interactive drag surface: the vinyl area of the door in surface pixel
coordinates, the handle, and the current anchor of the artwork. A lasso gesture
drawn on this figure is replayed through the drag controller.
"""
import plotly.graph_objects as go
from typing import List, Dict, Any, Optional

from door_decal.config import DEFAULT_THEME, PreviewTheme
from door_decal.preview import PreviewDescription

# Spacing of the invisible markers that make the whole surface selectable.
_GRID_STEP_PX = 20

# ==============================================================================
# --- Private Helper Functions for Shape Creation ---
# ==============================================================================

def _draw_surface(width: float, height: float, theme: PreviewTheme) -> List[Dict[str, Any]]:
    """Door panel with its border and the handle on the right edge."""
    handle_width, handle_height = 8, 48
    handle_x1 = width - 16
    handle_y0 = height / 2 - handle_height / 2
    return [
        dict(
            type="rect", x0=0, y0=0, x1=width, y1=height,
            line=dict(color=theme.border_color, width=4), fillcolor=theme.door_color, layer='below'
        ),
        dict(
            type="rect", x0=handle_x1 - handle_width, y0=handle_y0, x1=handle_x1, y1=handle_y0 + handle_height,
            line_width=0, fillcolor=theme.handle_color, layer='below'
        ),
    ]

def _draw_anchor(desc: PreviewDescription, width: float, height: float, theme: PreviewTheme) -> List[Dict[str, Any]]:
    """Crosshair through the anchor and the horizontal extent of the fitted artwork."""
    anchor_x = width * desc.anchor_x_pct / 100.0
    anchor_y = height * desc.anchor_y_pct / 100.0

    # Same rule as CSS background-position: the anchor point of the artwork
    # lines up with the same relative point of the surface.
    art_width = width * desc.fit_size_pct / 100.0
    art_left = (width - art_width) * desc.anchor_x_pct / 100.0

    crosshair = dict(color=theme.anchor_color, width=1, dash='dot')
    extent = dict(color=theme.anchor_color, width=1, dash='dash')
    return [
        dict(type="line", x0=anchor_x, y0=0, x1=anchor_x, y1=height, line=crosshair, opacity=0.6),
        dict(type="line", x0=0, y0=anchor_y, x1=width, y1=anchor_y, line=crosshair, opacity=0.6),
        dict(type="line", x0=art_left, y0=0, x1=art_left, y1=height, line=extent, opacity=0.3),
        dict(type="line", x0=art_left + art_width, y0=0, x1=art_left + art_width, y1=height, line=extent, opacity=0.3),
    ]

def _selectable_grid(width: float, height: float) -> go.Scatter:
    xs, ys = [], []
    for x in range(0, int(width) + 1, _GRID_STEP_PX):
        for y in range(0, int(height) + 1, _GRID_STEP_PX):
            xs.append(x)
            ys.append(y)
    return go.Scatter(
        x=xs, y=ys, mode='markers', marker=dict(size=2, opacity=0),
        hoverinfo='skip', showlegend=False, name='surface'
    )

# ==============================================================================
# --- Public API Functions ---
# ==============================================================================

def create_surface_shapes(desc: PreviewDescription, width: float, height: float, theme: Optional[PreviewTheme] = None) -> List[Dict[str, Any]]:
    theme = theme or DEFAULT_THEME
    return _draw_surface(width, height, theme) + _draw_anchor(desc, width, height, theme)

def create_drag_surface_figure(
    desc: PreviewDescription,
    width: float,
    height: float,
    theme: Optional[PreviewTheme] = None
) -> go.Figure:
    """
    Builds the drag surface figure. Axes are in surface pixels with y growing
    downwards, so selection coordinates can be fed to the drag controller as-is.
    """
    theme = theme or DEFAULT_THEME
    fig = go.Figure()
    fig.add_trace(_selectable_grid(width, height))
    fig.add_trace(go.Scatter(
        x=[width * desc.anchor_x_pct / 100.0], y=[height * desc.anchor_y_pct / 100.0],
        mode='markers', marker=dict(color=theme.anchor_color, size=12, symbol='cross-thin', line=dict(width=2, color=theme.anchor_color)),
        name='anchor', showlegend=False,
        hovertemplate=f"X: {desc.anchor_x_pct:.0f}%<br>Y: {desc.anchor_y_pct:.0f}%<extra></extra>"
    ))
    fig.update_layout(
        shapes=create_surface_shapes(desc, width, height, theme),
        xaxis=dict(range=[0, width], visible=False, fixedrange=True),
        yaxis=dict(range=[height, 0], visible=False, fixedrange=True, scaleanchor="x", scaleratio=1),
        width=int(width), height=int(round(height)),
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor=theme.frame_color, paper_bgcolor=theme.background_color,
        dragmode='lasso', showlegend=False
    )
    return fig
