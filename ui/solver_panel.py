# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from __future__ import annotations
import streamlit as st

from solvesquare.evaluator import Evaluator, EvalResult
from solvesquare.models import Coefficients, InfiniteRoots, NoRoots, OneRoot, TwoRoots
from solvesquare.presenter import format_root, format_summary


def _equation_latex(c: Coefficients) -> str:
    return f"{format_root(c.a)}x^2 + ({format_root(c.b)})x + ({format_root(c.c)}) = 0"


def _get_evaluator() -> Evaluator:
    # one memoizing evaluator per browser session
    ev = st.session_state.get("solvesquare_evaluator")
    if ev is None:
        ev = Evaluator(label="ui")
        st.session_state["solvesquare_evaluator"] = ev
    return ev


def show_result(res: EvalResult) -> None:
    if not res.ok or res.result is None:
        st.error(res.message or "Could not solve this equation.")
        return
    r = res.result
    if isinstance(r, InfiniteRoots):
        st.info("Every real number is a root (the equation reads 0 = 0).")
    elif isinstance(r, NoRoots):
        st.warning("This equation has no real roots.")
    elif isinstance(r, OneRoot):
        st.success(f"One root: x = {format_root(r.value)}")
    elif isinstance(r, TwoRoots):
        st.success(f"Two roots: x1 = {format_root(r.value1)}, x2 = {format_root(r.value2)}")
    st.caption(format_summary(r))
    if res.residuals:
        st.json({k: float(v) for k, v in res.residuals.items()}, expanded=False)


def render_solver_panel() -> None:
    st.markdown("## Roots of Ax² + Bx + C = 0")
    cols = st.columns(3)
    a = cols[0].number_input("A", value=1.0, format="%g")
    b = cols[1].number_input("B", value=0.0, format="%g")
    c = cols[2].number_input("C", value=-1.0, format="%g")

    coeffs = Coefficients(a=float(a), b=float(b), c=float(c))
    st.latex(_equation_latex(coeffs))

    if st.button("Solve"):
        show_result(_get_evaluator().evaluate(coeffs))
