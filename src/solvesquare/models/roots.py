from __future__ import annotations

"""Root classification for one solve.

A result is exactly one of four frozen variants. Callers dispatch on the
variant type (or on ``kind``); the integer ``count`` is kept only for
presenters that want the classic "number of roots" view, with
``INFINITE_ROOTS`` standing in for the identically-zero equation.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

INFINITE_ROOTS = -1


class RootKind(str, Enum):
    NONE = "none"
    INFINITE = "infinite"
    ONE = "one"
    TWO = "two"


@dataclass(frozen=True)
class NoRoots:
    kind = RootKind.NONE
    count = 0

    @property
    def roots(self) -> Tuple[float, ...]:
        return ()

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count, "roots": []}


@dataclass(frozen=True)
class InfiniteRoots:
    """Every real number is a root (the equation reads 0 = 0)."""

    kind = RootKind.INFINITE
    count = INFINITE_ROOTS

    @property
    def roots(self) -> Tuple[float, ...]:
        return ()

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count, "roots": []}


@dataclass(frozen=True)
class OneRoot:
    value: float

    kind = RootKind.ONE
    count = 1

    @property
    def roots(self) -> Tuple[float, ...]:
        return (self.value,)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count, "roots": [float(self.value)]}


@dataclass(frozen=True)
class TwoRoots:
    # value1 <= value2 for real coefficients
    value1: float
    value2: float

    kind = RootKind.TWO
    count = 2

    @property
    def roots(self) -> Tuple[float, ...]:
        return (self.value1, self.value2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "count": self.count,
            "roots": [float(self.value1), float(self.value2)],
        }


RootResult = Union[NoRoots, InfiniteRoots, OneRoot, TwoRoots]


def root_result_from_dict(d: Dict[str, Any]) -> RootResult:
    """Rebuild a result from its ``to_dict`` form."""
    kind = RootKind(str(d.get("kind", "")))
    roots = [float(v) for v in (d.get("roots") or [])]
    if kind is RootKind.NONE:
        return NoRoots()
    if kind is RootKind.INFINITE:
        return InfiniteRoots()
    if kind is RootKind.ONE:
        if len(roots) != 1:
            raise ValueError(f"'one' result needs exactly 1 root, got {len(roots)}")
        return OneRoot(roots[0])
    if len(roots) != 2:
        raise ValueError(f"'two' result needs exactly 2 roots, got {len(roots)}")
    return TwoRoots(roots[0], roots[1])
