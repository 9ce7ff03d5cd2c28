# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from .quadratic import EPSILON, discriminant, is_approx_zero, solve, solve_linear
from .errors import ConfigError, InputAborted, InvalidInput, RootOverflow, SolveSquareError

__all__ = [
    "EPSILON",
    "discriminant",
    "is_approx_zero",
    "solve",
    "solve_linear",
    "ConfigError",
    "InputAborted",
    "InvalidInput",
    "RootOverflow",
    "SolveSquareError",
]
