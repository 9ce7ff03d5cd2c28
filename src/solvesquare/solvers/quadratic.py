from __future__ import annotations

"""Quadratic equation solver.

Finds the real roots of ``a*x^2 + b*x + c = 0``. A vanishing leading
coefficient drops the problem to the linear case ``b*x + c = 0``.

All "is it zero?" decisions go through :func:`is_approx_zero`, a symmetric
band of one machine epsilon around zero. A discriminant that rounding has
pushed just below zero still counts as zero, so nearly tangent parabolas are
reported as one root rather than none.

This module raises nothing. It is total over finite inputs; non-finite
inputs are the caller's business (see ``evaluator.core``).

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

import math

import numpy as np

from ..models.roots import InfiniteRoots, NoRoots, OneRoot, RootResult, TwoRoots

# Smallest relative spacing of IEEE-754 binary64 (2.220446049250313e-16).
EPSILON: float = float(np.finfo(np.float64).eps)


def is_approx_zero(x: float) -> bool:
    return abs(x) < EPSILON


def discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def solve_linear(b: float, c: float) -> RootResult:
    """Roots of ``b*x + c = 0``."""
    if is_approx_zero(b):
        if is_approx_zero(c):
            return InfiniteRoots()
        return NoRoots()
    return OneRoot(-c / b)


def solve(a: float, b: float, c: float) -> RootResult:
    """Roots of ``a*x^2 + b*x + c = 0``.

    Returns
    -------
    NoRoots | InfiniteRoots | OneRoot | TwoRoots
        ``TwoRoots`` holds ``(-b - sqrt(d)) / 2a`` then ``(-b + sqrt(d)) / 2a``,
        swapped when ``a < 0`` so that ``value1 <= value2`` always.
    """
    if is_approx_zero(a):
        return solve_linear(b, c)

    d = discriminant(a, b, c)
    if d < 0 and not is_approx_zero(d):
        return NoRoots()
    if is_approx_zero(d):
        return OneRoot(-b / (2 * a))

    sq = math.sqrt(d)
    x1 = (-b - sq) / (2 * a)
    x2 = (-b + sq) / (2 * a)
    if x1 > x2:
        x1, x2 = x2, x1
    return TwoRoots(x1, x2)
