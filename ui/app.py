"""Streamlit entrypoint: streamlit run ui/app.py

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""
from __future__ import annotations

import os, sys

import streamlit as st

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
for p in (ROOT, os.path.join(ROOT, "src")):
    if p not in sys.path:
        sys.path.insert(0, p)

from solvesquare import __version__
from ui.solver_panel import render_solver_panel

st.set_page_config(page_title="SolveSquare", layout="centered")
st.title(f"SolveSquare v{__version__}")
render_solver_panel()
