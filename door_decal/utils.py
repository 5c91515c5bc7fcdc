import logging
import streamlit as st
import pandas as pd
from typing import Sequence

from door_decal.config import DEFAULT_THEME
from door_decal.pricing import PriceQuote, format_rd

logger = logging.getLogger(__name__)

def load_css(file_path: str) -> None:
    """Loads a CSS file and injects it into the Streamlit app."""
    try:
        with open(file_path) as f:
            css = f.read()
    except FileNotFoundError:
        logger.warning(f"Stylesheet not found: {file_path}")
        return

    # Define CSS variables from Python config
    css_variables = f"""
    <style>
        :root {{
            --frame-color: {DEFAULT_THEME.frame_color};
            --door-color: {DEFAULT_THEME.door_color};
            --border-color: {DEFAULT_THEME.border_color};
            --text-color: {DEFAULT_THEME.text_color};
        }}
        {css}
    </style>
    """
    st.markdown(css_variables, unsafe_allow_html=True)

def gesture_token(xs: Sequence[float], ys: Sequence[float]) -> str:
    """
    Identifies a recorded gesture so a rerun does not replay it twice.
    """
    return str(hash((tuple(xs), tuple(ys))))

def format_magnitude(value) -> str:
    """Shows a raw form value without trailing zeros ('36', '91.44')."""
    try:
        return f"{float(value):g}"
    except (TypeError, ValueError):
        return "0"

def build_summary_table(width, height, unit_label: str, price: PriceQuote) -> pd.DataFrame:
    """
    Rows of the order summary panel. 'Precio' is the price of one decal
    (area x rate); 'Total' includes the quantity.
    """
    rows = [
        {"Concepto": "Ancho", "Valor": f"{format_magnitude(width)} {unit_label}"},
        {"Concepto": "Alto", "Valor": f"{format_magnitude(height)} {unit_label}"},
        {"Concepto": "Área", "Valor": f"{price.area_sqft:.2f} ft²"},
        {"Concepto": "Precio", "Valor": format_rd(price.area_price)},
        {"Concepto": "Cantidad", "Valor": str(price.quantity)},
        {"Concepto": "Total", "Valor": format_rd(price.total)},
    ]
    return pd.DataFrame(rows, columns=["Concepto", "Valor"])
