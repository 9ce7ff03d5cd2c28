# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from .coefficients import Coefficients
from .roots import (
    INFINITE_ROOTS,
    InfiniteRoots,
    NoRoots,
    OneRoot,
    RootKind,
    RootResult,
    TwoRoots,
    root_result_from_dict,
)

__all__ = [
    "Coefficients",
    "INFINITE_ROOTS",
    "InfiniteRoots",
    "NoRoots",
    "OneRoot",
    "RootKind",
    "RootResult",
    "TwoRoots",
    "root_result_from_dict",
]
