"""
Main Application File for the DecoraPuertas Door Decal Configurator.
The buyer enters door dimensions, picks or uploads artwork, positions it over
a preview of the door and sees the price update live.
"""
import logging
import streamlit as st

from door_decal.config import ASSETS_DIR
from door_decal.state import SessionStore
from door_decal.utils import load_css
from door_decal.views.manager import ViewManager

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ==============================================================================
# --- STREAMLIT APP MAIN LOGIC ---
# ==============================================================================

def main() -> None:
    """
    Main function to configure and run the Streamlit application.
    """
    # --- App Configuration ---
    st.set_page_config(layout="wide", page_title="DecoraPuertas · Vinil para puertas")

    load_css(str(ASSETS_DIR / "styles.css"))

    # --- Initialize Session State ---
    store = SessionStore()

    ViewManager(store).render()

if __name__ == '__main__':
    main()
