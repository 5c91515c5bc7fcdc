import streamlit as st
from typing import Any, Optional, Tuple, List

from door_decal.state import SessionStore
from door_decal.enums import LengthUnit
from door_decal.artwork import UploadedArtwork, is_active_sample
from door_decal.config import (
    SCALE_RANGE, OPACITY_RANGE, OFFSET_RANGE, PRICE_PER_SQFT, UPLOAD_TYPES, PreviewTheme
)
from door_decal.drag import events_from_path, suppresses_text_selection
from door_decal.preview import artwork_url, surface_css, surface_size_px
from door_decal.plotting import create_drag_surface_figure
from door_decal.pricing import format_rd
from door_decal.utils import build_summary_table, gesture_token

def _sync_widget(key: str, value: Any):
    """Pushes the session value into a widget's key before the widget is drawn."""
    st.session_state[key] = value

def render_dimensions_panel(store: SessionStore):
    session = store.session
    k = store.key

    _sync_widget(k("unit"), session.unit.value)
    _sync_widget(k("width"), session.width)
    _sync_widget(k("height"), session.height)
    _sync_widget(k("quantity"), session.quantity)

    def on_unit_change():
        store.session.set_unit(st.session_state[k("unit")])

    def on_size_change():
        store.session.set_dimensions(st.session_state[k("width")], st.session_state[k("height")])

    def on_quantity_change():
        store.session.set_quantity(st.session_state[k("quantity")])

    with st.container(border=True):
        st.subheader("Dimensiones de tu puerta")
        c1, c2, c3 = st.columns(3)
        c1.selectbox("Unidad", LengthUnit.values(), format_func=lambda v: LengthUnit(v).label, key=k("unit"), on_change=on_unit_change)
        c2.number_input("Ancho", min_value=0.0, step=1.0, key=k("width"), on_change=on_size_change)
        c3.number_input("Alto", min_value=0.0, step=1.0, key=k("height"), on_change=on_size_change)

        q1, q2, q3 = st.columns(3)
        q1.number_input("Cantidad", min_value=1, step=1, key=k("quantity"), on_change=on_quantity_change)

        price = session.quote
        q2.metric("Área estimada", f"{price.area_sqft:.2f} ft²")
        q3.metric("Precio total", format_rd(price.total))
        st.caption(f"* El precio se calcula a {format_rd(PRICE_PER_SQFT)} por pie cuadrado. El acabado no incluye instalación.")

def render_design_picker(store: SessionStore):
    session = store.session

    def on_sample_click(i):
        def cb(): store.session.select_sample(i)
        return cb

    with st.container(border=True):
        st.subheader("Elige un diseño o sube el tuyo")
        cols = st.columns(3, gap="small")
        for i, sample_id in enumerate(session.catalog):
            col = cols[i % 3]
            is_active = is_active_sample(session.artwork, i)
            col.markdown(
                f"<img src='{session.asset_base_url}{sample_id}' alt='Muestra {i + 1}' class='sample-thumb' style='width:100%;height:7rem;object-fit:cover;border-radius:12px;'>",
                unsafe_allow_html=True
            )
            col.button(f"Muestra {i + 1}", key=store.key(f"sample_btn_{i}"), type="primary" if is_active else "secondary", use_container_width=True, on_click=on_sample_click(i))

        uploaded_file = st.file_uploader("Subir tu diseño (PNG / JPG)", type=UPLOAD_TYPES, key=store.key("uploader"))
        store.accept_upload(uploaded_file)

        if store.upload_failed:
            st.warning("No pudimos leer el archivo. Se mantiene el diseño anterior.")
        if isinstance(store.session.artwork, UploadedArtwork):
            st.caption("Usando tu diseño cargado.")

def render_adjustments(store: SessionStore):
    session = store.session
    k = store.key
    placement = session.placement

    _sync_widget(k("scale"), float(placement.scale_pct))
    _sync_widget(k("opacity"), float(placement.opacity_pct))
    _sync_widget(k("offset_x"), float(placement.offset_x_pct))
    _sync_widget(k("offset_y"), float(placement.offset_y_pct))

    def make_callback(setter_name, key):
        def cb(): getattr(store.session, setter_name)(st.session_state[key])
        return cb

    with st.container(border=True):
        st.subheader("Ajustes del diseño en la puerta")
        c1, c2 = st.columns(2)
        c1.slider("Escala (%)", min_value=SCALE_RANGE[0], max_value=SCALE_RANGE[1], step=1.0, format="%.0f%%", key=k("scale"), on_change=make_callback("set_scale", k("scale")))
        c2.slider("Opacidad (%)", min_value=OPACITY_RANGE[0], max_value=OPACITY_RANGE[1], step=1.0, format="%.0f%%", key=k("opacity"), on_change=make_callback("set_opacity", k("opacity")))
        c1.slider("Posición X (%)", min_value=OFFSET_RANGE[0], max_value=OFFSET_RANGE[1], step=1.0, format="%.0f%%", key=k("offset_x"), on_change=make_callback("set_offset_x", k("offset_x")))
        c2.slider("Posición Y (%)", min_value=OFFSET_RANGE[0], max_value=OFFSET_RANGE[1], step=1.0, format="%.0f%%", key=k("offset_y"), on_change=make_callback("set_offset_y", k("offset_y")))
        st.button("Restablecer diseño", key=k("reset_design"), on_click=lambda: store.session.reset_design())
        st.caption("Tip: también puedes arrastrar el diseño directamente sobre la puerta en el preview.")

def render_total_bar(store: SessionStore):
    price = store.session.quote
    with st.container(border=True):
        c1, c2, c3 = st.columns([2, 1, 1])
        c1.metric("Total estimado", format_rd(price.total))
        # Checkout is not part of this tool; the buttons are placeholders.
        c2.button("Agregar al carrito", key=store.key("add_to_cart"), disabled=True, use_container_width=True)
        c3.button("Solicitar instalación", key=store.key("request_install"), disabled=True, use_container_width=True)

def door_preview_html(store: SessionStore) -> str:
    session = store.session
    desc = session.preview
    return (
        f"<div class='door-frame' style='aspect-ratio: {desc.aspect_ratio:.4f};'>"
        "<div class='door-panel'>"
        "<div class='door-handle'></div>"
        f"<div class='vinyl-surface' style=\"{surface_css(desc, dragging=session.is_dragging)}\"></div>"
        "</div></div>"
    )

def extract_lasso_path(event) -> Optional[Tuple[List[float], List[float]]]:
    """Returns the (xs, ys) of the most recent lasso drawn on a plotly chart, if any."""
    if not event:
        return None
    selection = event.get("selection") if hasattr(event, "get") else getattr(event, "selection", None)
    lassos = (selection or {}).get("lasso") or []
    if not lassos:
        return None
    last = lassos[-1]
    xs, ys = list(last.get("x") or []), list(last.get("y") or [])
    if not xs or len(xs) != len(ys):
        return None
    return xs, ys

def render_preview(store: SessionStore, theme_config: PreviewTheme = None):
    session = store.session
    desc = session.preview

    with st.container(border=True):
        st.subheader("Preview en tu puerta")
        # Lasso gestures are replayed whole and end Idle, so this only fires for a
        # session driven by live pointer events between reruns.
        if suppresses_text_selection(session.drag):
            st.markdown("<style>body { user-select: none; -webkit-user-select: none; }</style>", unsafe_allow_html=True)

        st.markdown(door_preview_html(store), unsafe_allow_html=True)
        st.caption("La proporción del preview se ajusta automáticamente a las dimensiones que ingreses.")

        st.markdown("##### Arrastra para mover el diseño")
        width, height = surface_size_px(desc)
        fig = create_drag_surface_figure(desc, width, height, theme=theme_config)
        event = st.plotly_chart(
            fig, key=store.key("drag_surface"), on_select="rerun", selection_mode="lasso",
            use_container_width=False, config={"displayModeBar": False}
        )

        path = extract_lasso_path(event)
        if path and store.accept_gesture(gesture_token(*path)):
            session.dispatch_all(events_from_path(path[0], path[1], width, height))
            st.rerun()

def render_summary(store: SessionStore):
    session = store.session
    price = session.quote

    with st.container(border=True):
        st.markdown("#### Resumen")
        table = build_summary_table(session.width, session.height, session.unit.value, price)
        st.dataframe(table, hide_index=True, use_container_width=True)

        st.markdown(f"**Total: {format_rd(price.total)}**")
        st.caption(f"Incluye {price.quantity} unidad(es). Impuestos/aplicaciones adicionales se calculan al finalizar la compra.")
        st.button("Continuar compra", key=store.key("checkout"), disabled=True)

        url = artwork_url(session.artwork, session.asset_base_url)
        if url:
            st.markdown(
                f"<img src='{url}' alt='{session.artwork.label}' style='max-width:160px;border-radius:8px;'>",
                unsafe_allow_html=True
            )
            st.caption(session.artwork.label)
