"""SolveSquare: real roots of a*x^2 + b*x + c = 0.

The solver core lives in ``solvers.quadratic``; everything else (collector,
presenter, config, CLI, HTTP API, UI) feeds it coefficients and renders
what it returns.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

__version__ = "1.0.0"

from .models import (
    INFINITE_ROOTS,
    Coefficients,
    InfiniteRoots,
    NoRoots,
    OneRoot,
    RootKind,
    RootResult,
    TwoRoots,
)
from .solvers import EPSILON, InvalidInput, solve, solve_linear

__all__ = [
    "__version__",
    "INFINITE_ROOTS",
    "Coefficients",
    "InfiniteRoots",
    "NoRoots",
    "OneRoot",
    "RootKind",
    "RootResult",
    "TwoRoots",
    "EPSILON",
    "InvalidInput",
    "solve",
    "solve_linear",
]
