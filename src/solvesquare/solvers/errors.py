# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from __future__ import annotations

from typing import Any


class SolveSquareError(RuntimeError):
    pass


class InvalidInput(SolveSquareError, ValueError):
    """A coefficient that cannot be solved for (unparsable or non-finite)."""

    def __init__(self, name: str, value: Any, reason: str = "not a finite real number"):
        self.name = str(name)
        self.value = value
        self.reason = str(reason)
        super().__init__(f"{self.name}={value!r}: {self.reason}")


class InputAborted(SolveSquareError):
    """The input collector ran out of tries (or input)."""


class RootOverflow(SolveSquareError, OverflowError):
    """Finite coefficients whose roots do not fit in a double."""

    def __init__(self, roots: Any):
        self.roots = tuple(roots)
        super().__init__(f"roots overflow double precision: {self.roots!r}")


class ConfigError(SolveSquareError, ValueError):
    pass
