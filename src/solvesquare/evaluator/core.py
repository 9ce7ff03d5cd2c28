# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional
import logging
import math
import time

from ..models.coefficients import Coefficients
from ..models.roots import RootResult
from ..solvers.errors import InvalidInput, RootOverflow
from ..solvers.quadratic import solve
from .cache_key import sha256_cache_key

logger = logging.getLogger(__name__)


@dataclass
class EvalResult:
    """Result from one evaluator pass over a set of coefficients."""

    inp: Coefficients
    result: Optional[RootResult]
    elapsed_s: float
    ok: bool = True
    message: str = ""
    residuals: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inputs": self.inp.to_dict(),
            "result": self.result.to_dict() if self.result is not None else None,
            "elapsed_s": float(self.elapsed_s),
            "ok": bool(self.ok),
            "message": self.message,
            "residuals": dict(self.residuals),
        }


def _detached(res: EvalResult) -> EvalResult:
    # inp and result are frozen; only residuals is shared state
    return replace(res, residuals=dict(res.residuals))


def validate_coefficients(inp: Coefficients) -> None:
    """Raise InvalidInput on the first non-finite coefficient."""
    for name, v in (("a", inp.a), ("b", inp.b), ("c", inp.c)):
        if not math.isfinite(v):
            raise InvalidInput(name, v)


class Evaluator:
    """The one seam between callers (CLI, API, UI) and the solver.

    Validates finiteness, calls ``solvers.quadratic.solve``, attaches
    residuals of every root and memoizes (LRU) by a SHA-256 key of the
    coefficients. The cache is an acceleration feature only; it must not
    change results.
    """

    def __init__(self, *, label: str = "solve", cache_enabled: bool = True, cache_max: int = 256):
        self.label = str(label)
        self._cache_enabled = bool(cache_enabled)
        self._cache_max = int(cache_max)

        # least recently used first
        self._cache: OrderedDict[str, EvalResult] = OrderedDict()

        self._cache_hits = 0
        self._cache_misses = 0
        self._cache_evictions = 0

    def cache_stats(self) -> Dict[str, Any]:
        return {
            "enabled": self._cache_enabled,
            "max": self._cache_max,
            "size": len(self._cache),
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "evictions": self._cache_evictions,
        }

    def reset_cache_stats(self) -> None:
        self._cache_hits = 0
        self._cache_misses = 0
        self._cache_evictions = 0

    def clear_cache(self) -> None:
        self._cache.clear()

    def evaluate(self, inp: Coefficients, *, strict: bool = False) -> EvalResult:
        """Solve ``inp`` and attach residuals.

        Non-finite coefficients give ``ok=False`` and no result, or raise
        ``InvalidInput`` when ``strict`` is set. Finite coefficients whose
        roots overflow to inf/nan give ``ok=False`` with the raw result
        attached, or raise ``RootOverflow`` when ``strict`` is set.

        Every call returns a fresh ``EvalResult``; cached entries are never
        handed out directly.
        """
        t0 = time.perf_counter()

        cache_key = sha256_cache_key(inp)
        if self._cache_enabled and cache_key in self._cache:
            self._cache_hits += 1
            self._cache.move_to_end(cache_key)
            return _detached(self._cache[cache_key])
        self._cache_misses += 1

        try:
            validate_coefficients(inp)
        except InvalidInput as e:
            logger.warning("%s: rejected %s", self.label, e)
            if strict:
                raise
            return EvalResult(
                inp=inp,
                result=None,
                elapsed_s=time.perf_counter() - t0,
                ok=False,
                message=f"invalid input: {e}",
            )

        result = solve(inp.a, inp.b, inp.c)
        if not all(math.isfinite(x) for x in result.roots):
            err = RootOverflow(result.roots)
            logger.warning("%s: a=%r b=%r c=%r -> %s", self.label, inp.a, inp.b, inp.c, err)
            if strict:
                raise err
            return EvalResult(
                inp=inp,
                result=result,
                elapsed_s=time.perf_counter() - t0,
                ok=False,
                message=str(err),
            )

        res = EvalResult(
            inp=inp,
            result=result,
            elapsed_s=time.perf_counter() - t0,
            residuals=self.residuals(inp, result),
        )
        logger.debug("%s: a=%r b=%r c=%r -> %s %s", self.label, inp.a, inp.b, inp.c, result.kind.value, result.roots)

        if self._cache_enabled:
            self._cache[cache_key] = res
            if len(self._cache) > self._cache_max:
                self._cache_evictions += 1
                self._cache.popitem(last=False)
            return _detached(res)

        return res

    @staticmethod
    def residuals(inp: Coefficients, result: RootResult) -> Dict[str, float]:
        """p(x) = a*x^2 + b*x + c at every root, keyed x1, x2."""
        r: Dict[str, float] = {}
        for i, x in enumerate(result.roots, start=1):
            r[f"x{i}"] = inp.a * x * x + inp.b * x + inp.c
        return r

    @staticmethod
    def residual_norm(residuals: Dict[str, float]) -> float:
        s = 0.0
        n = 0
        for v in residuals.values():
            if math.isfinite(v):
                s += float(v) * float(v)
                n += 1
        if n == 0:
            return float("inf")
        return math.sqrt(s / n)

    @staticmethod
    def verify(inp: Coefficients, result: RootResult, rel_tol: float = 1e-9) -> bool:
        """True when every root satisfies the equation to within rel_tol.

        The tolerance scales with |a|x^2 + |b||x| + |c|, the size of the
        terms that cancel at a root.
        """
        for x in result.roots:
            if not math.isfinite(x):
                return False
            p = inp.a * x * x + inp.b * x + inp.c
            scale = abs(inp.a) * x * x + abs(inp.b) * abs(x) + abs(inp.c)
            if abs(p) > rel_tol * max(scale, 1.0):
                return False
        return True
