import streamlit as st

from door_decal.state import SessionStore
from door_decal.config import PRICE_PER_SQFT, PreviewTheme, DEFAULT_THEME
from door_decal.pricing import format_rd
from door_decal.documentation import render_faq, render_specifications
from door_decal.views.panels import (
    render_dimensions_panel, render_design_picker, render_adjustments,
    render_total_bar, render_preview, render_summary
)

class ViewManager:
    """
    Lays out one configurator page: the form column on the left and the
    preview column on the right. Panels only read and write through the store.
    """
    def __init__(self, store: SessionStore, theme_config: PreviewTheme = None):
        self.store = store
        self.theme_config = theme_config or DEFAULT_THEME

    def render_header(self):
        c1, c2 = st.columns([4, 1])
        with c1:
            st.title("DecoraPuertas")
            st.caption(f"Vinil adhesivo a la medida · {format_rd(PRICE_PER_SQFT)}/ft²")
        # Contact has no backend; kept as a visual placeholder.
        c2.button("Contactar", key=self.store.key("contact"), disabled=True)

    def render_footer(self):
        st.divider()
        st.caption("© DecoraPuertas. Todos los derechos reservados. Hecho con ❤ en RD.")

    def render(self):
        self.render_header()
        config_col, preview_col = st.columns(2, gap="large")

        with config_col:
            render_dimensions_panel(self.store)
            render_design_picker(self.store)
            render_adjustments(self.store)
            render_total_bar(self.store)

        with preview_col:
            render_preview(self.store, theme_config=self.theme_config)
            render_summary(self.store)
            render_specifications()
            render_faq()

        self.render_footer()
