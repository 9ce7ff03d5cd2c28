"""
FastAPI service wrapper for the quadratic solver.

Optional alongside the CLI and the Streamlit UI (which import the package
directly); it exposes the same evaluator over HTTP.

Run: uvicorn api:app

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""
from __future__ import annotations

import math
import os, sys
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

ROOT = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from solvesquare import __version__
from solvesquare.evaluator import Evaluator
from solvesquare.models import Coefficients
from solvesquare.presenter import format_summary

app = FastAPI(title="SolveSquare API", version=__version__)
evaluator = Evaluator(label="api")


class CoefficientsSpec(BaseModel):
    a: float = Field(..., allow_inf_nan=False, description="Coefficient of x^2")
    b: float = Field(..., allow_inf_nan=False, description="Coefficient of x")
    c: float = Field(..., allow_inf_nan=False, description="Constant term")


class SolveResponse(BaseModel):
    kind: str
    count: int
    roots: List[float]
    summary: str
    residual_norm: Optional[float] = None


def _finite_or_none(x: float) -> Optional[float]:
    return float(x) if math.isfinite(x) else None


def _json_safe(obj: Any) -> Any:
    """Replace non-finite floats with their repr so the detail stays valid JSON."""
    if isinstance(obj, float) and not math.isfinite(obj):
        return repr(obj)
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    return str(obj)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # the default handler echoes the offending input, which may be NaN
    return JSONResponse(status_code=422, content={"detail": _json_safe(exc.errors())})


@app.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@app.post("/solve", response_model=SolveResponse)
def solve_endpoint(spec: CoefficientsSpec):
    res = evaluator.evaluate(Coefficients(**spec.model_dump()))
    if not res.ok or res.result is None:
        raise HTTPException(status_code=422, detail=res.message)
    result = res.result
    return {
        "kind": result.kind.value,
        "count": result.count,
        "roots": list(result.roots),
        "summary": format_summary(result),
        "residual_norm": _finite_or_none(Evaluator.residual_norm(res.residuals)),
    }
