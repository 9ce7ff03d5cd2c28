# © 2026 SolveSquare contributors. GPL-3.0-or-later.
from __future__ import annotations
from dataclasses import dataclass
import math

@dataclass(frozen=True)
class Coefficients:
    # Equation a*x^2 + b*x + c = 0
    a: float
    b: float
    c: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.as_tuple())

    def scaled(self, k: float) -> "Coefficients":
        """Same equation multiplied through by k (same roots for k != 0)."""
        return Coefficients(a=self.a * k, b=self.b * k, c=self.c * k)

    def to_dict(self) -> dict:
        """Return JSON-serializable dict of coefficients."""
        from dataclasses import asdict
        return asdict(self)

    @staticmethod
    def from_dict(d: dict) -> "Coefficients":
        """Construct Coefficients from a dict (ignores unknown keys)."""
        fields = {f.name for f in Coefficients.__dataclass_fields__.values()}  # type: ignore
        clean = {k: float(v) for k, v in (d or {}).items() if k in fields}
        return Coefficients(**clean)
