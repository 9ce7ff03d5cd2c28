from __future__ import annotations

"""Text renderings of a RootResult.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

import json

from .models.roots import InfiniteRoots, NoRoots, OneRoot, RootResult, TwoRoots

EQUATION_HEADER = "#--- Let's find roots for equation Ax^2 + Bx + C = 0:"


def format_root(x: float) -> str:
    # %g like printf("%lg"); + 0.0 folds -0.0 into 0.0
    return f"{x + 0.0:g}"


def format_summary(result: RootResult) -> str:
    if isinstance(result, InfiniteRoots):
        return "infinite roots"
    if isinstance(result, NoRoots):
        return "no roots"
    if isinstance(result, OneRoot):
        return f"one root: {format_root(result.value)}"
    if isinstance(result, TwoRoots):
        return f"two roots: {format_root(result.value1)}, {format_root(result.value2)}"
    raise TypeError(f"not a root result: {result!r}")


def format_console(result: RootResult) -> str:
    if isinstance(result, InfiniteRoots):
        return "#--- This equation has infinite number of roots"
    if isinstance(result, NoRoots):
        return "#--- This equation has no roots"
    if isinstance(result, OneRoot):
        return f"#--- This equation has one root:\nx = {format_root(result.value)}"
    if isinstance(result, TwoRoots):
        return (
            "#--- This equation has two roots:\n"
            f"x1 = {format_root(result.value1)}\n"
            f"x2 = {format_root(result.value2)}"
        )
    raise TypeError(f"not a root result: {result!r}")


def format_json(result: RootResult) -> str:
    return json.dumps(result.to_dict(), sort_keys=True)


FORMATTERS = {
    "console": format_console,
    "summary": format_summary,
    "json": format_json,
}


def render(result: RootResult, fmt: str = "console") -> str:
    try:
        fn = FORMATTERS[fmt]
    except KeyError:
        raise ValueError(f"unknown output format {fmt!r}; expected one of {sorted(FORMATTERS)}") from None
    return fn(result)


def banner(version: str) -> str:
    return f"#--- SolveSquare v{version} by GavYur\n\n{EQUATION_HEADER}"
