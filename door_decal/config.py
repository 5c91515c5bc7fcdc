"""
Configuration and Styling Module.

This module contains all configuration and styling variables for the configurator,
including the pricing rate, unit factors, placement ranges, the sample catalog
and the colour theme used by the preview.
"""
from dataclasses import dataclass
from pathlib import Path

# --- Pricing ---
# Price of printed vinyl in Dominican Pesos (RD$) per square foot.
PRICE_PER_SQFT = 99
CURRENCY_CODE = "DOP"
CURRENCY_LOCALE = "es_DO"
CURRENCY_FALLBACK_PREFIX = "RD$"
# Relative tolerance for treating a total as whole before rounding up.
PRICE_WHOLE_TOLERANCE = 1e-9

# --- Unit Factors ---
INCHES_PER_FOOT = 12.0
CM_PER_FOOT = 30.48

# --- Default Door (36 x 74 in) ---
DEFAULT_UNIT = "in"
DEFAULT_WIDTH = 36.0
DEFAULT_HEIGHT = 74.0
DEFAULT_QUANTITY = 1

# --- Placement Ranges (percent) ---
SCALE_RANGE = (50.0, 200.0)
OPACITY_RANGE = (50.0, 100.0)
OFFSET_RANGE = (0.0, 100.0)

DEFAULT_SCALE = 100.0
DEFAULT_OPACITY = 100.0
DEFAULT_OFFSET_X = 50.0
DEFAULT_OFFSET_Y = 50.0

# --- Preview Geometry ---
# Each door axis is floored before dividing so degenerate input never divides by zero.
MIN_DOOR_AXIS_FT = 0.1
# Thinner doors than this are stretched so the preview stays renderable.
MIN_ASPECT_RATIO = 0.3
PREVIEW_MAX_WIDTH_PX = 420
# Plotly rejects figures smaller than this on either side.
MIN_SURFACE_PX = 10
# Padding of the frame around the vinyl surface, in pixels.
FRAME_PADDING_PX = 12

# --- Artwork Catalog ---
# Sample designs served by the static asset store.
SAMPLE_IMAGES = ("1.png", "2.png", "3.png", "4.png", "5.png")
ASSET_BASE_URL = "app/static/"
UPLOAD_TYPES = ["png", "jpg", "jpeg", "webp"]


@dataclass
class PreviewTheme:
    """Colours used to draw the door silhouette and the drag surface."""
    frame_color: str = '#D4D4D4'
    door_color: str = '#FAFAFA'
    border_color: str = '#A3A3A3'
    handle_color: str = '#A3A3A3'
    anchor_color: str = '#171717'
    background_color: str = '#FFFFFF'
    text_color: str = '#171717'


DEFAULT_THEME = PreviewTheme()

# --- Assets ---
ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
