from __future__ import annotations

"""
Deterministic cache keys for evaluator memoization.

Keys must be identical across Python processes and hash seeds, so they are
built from canonical JSON (sorted keys, repr() float tokens) hashed with
SHA-256. 0.0 and -0.0 give distinct keys on purpose: their roots print
differently.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

from dataclasses import asdict, is_dataclass
from typing import Any
import hashlib
import json
import math


def _canon(x: Any) -> Any:
    """Canonicalize to JSON-safe primitives with stable float handling."""
    if is_dataclass(x) and not isinstance(x, type):
        return _canon(asdict(x))

    if isinstance(x, dict):
        return {str(k): _canon(v) for k, v in x.items()}

    if isinstance(x, (list, tuple)):
        return [_canon(v) for v in x]

    # bool before int/float: bool is an int subclass
    if x is None or isinstance(x, (bool, str)):
        return x

    if isinstance(x, float):
        if math.isnan(x):
            return "NaN"
        if math.isinf(x):
            return "Infinity" if x > 0 else "-Infinity"
        return repr(float(x))

    if isinstance(x, int):
        # ints hash the same as the equal float so a=1 and a=1.0 share a slot
        return repr(float(x))

    # numpy scalars
    if hasattr(x, "item"):
        return _canon(x.item())

    return str(x)


def canonical_json(obj: Any) -> str:
    """Return canonical JSON string for obj (sorted keys, no whitespace)."""
    return json.dumps(_canon(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def sha256_cache_key(inp: Any) -> str:
    """SHA-256 hex digest of the canonical JSON of ``inp``."""
    return hashlib.sha256(canonical_json(inp).encode("utf-8")).hexdigest()
