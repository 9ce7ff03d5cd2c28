"""Evaluator layer.

The single choke-point between the outer surfaces (CLI, HTTP API, UI) and
the solver. Callers hand over a ``Coefficients`` and get back an
``EvalResult``; none of them call ``solvers.quadratic.solve`` directly.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

from .core import Evaluator, EvalResult, validate_coefficients
from .cache_key import canonical_json, sha256_cache_key

__all__ = ["Evaluator", "EvalResult", "validate_coefficients", "canonical_json", "sha256_cache_key"]
