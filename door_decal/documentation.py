"""
Documentation Module.

This module contains:
1. The frequently asked questions shown under the preview.
2. The product specification bullet list.
Both are loaded from the assets folder so copy can change without code changes.
"""
import streamlit as st
import json
from pathlib import Path
from typing import List, Dict

from door_decal.config import ASSETS_DIR

@st.cache_data
def load_faq(path: str = str(ASSETS_DIR / "faq.json")) -> List[Dict[str, str]]:
    """Loads the FAQ entries as a list of {'question', 'answer'} dicts."""
    try:
        faq_path = Path(path)
        if faq_path.exists():
            with open(faq_path, "r", encoding="utf-8") as f:
                entries = json.load(f)
            return [e for e in entries if e.get("question") and e.get("answer")]
        return []
    except (OSError, ValueError):
        return []

@st.cache_data
def load_specifications(path: str = str(ASSETS_DIR / "specs.md")) -> str:
    """Loads the product specification Markdown."""
    try:
        specs_path = Path(path)
        if specs_path.exists():
            with open(specs_path, "r", encoding="utf-8") as f:
                return f.read()
        return ""
    except OSError:
        return ""

def render_faq():
    """Renders the FAQ as one expander per question."""
    st.subheader("Preguntas frecuentes")
    entries = load_faq()
    if not entries:
        st.info("No hay preguntas frecuentes disponibles.")
        return
    for entry in entries:
        with st.expander(entry["question"]):
            st.markdown(entry["answer"])

def render_specifications():
    specs = load_specifications()
    if specs:
        st.markdown("#### Especificaciones")
        st.markdown(specs)
