from __future__ import annotations

"""Interactive coefficient input with a bounded retry budget.

``read`` is called with the prompt and returns one line (``input`` by
default); ``write`` receives status lines (``print`` by default). Both are
injectable so that the CLI, tests and other front ends share the same loop.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

import logging
import math
from typing import Callable, Dict, Mapping, Optional

from .models.coefficients import Coefficients
from .solvers.errors import InputAborted, InvalidInput

logger = logging.getLogger(__name__)

ERR_INPUT_TRIES = 3
COEFFICIENT_NAMES = ("A", "B", "C")

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def prompt_for(name: str) -> str:
    return f"#--- Enter a real-number value for {name}> "


def parse_real(text: str, name: str = "value") -> float:
    """Parse one real number, rejecting empty, NaN and infinite input."""
    s = (text or "").strip()
    if not s:
        raise InvalidInput(name, text, "empty input")
    try:
        v = float(s)
    except ValueError as e:
        raise InvalidInput(name, text, "not a real number") from e
    if not math.isfinite(v):
        raise InvalidInput(name, text, "not a finite real number")
    return v


def read_coefficient(
    name: str,
    *,
    read: Reader = input,
    write: Writer = print,
    max_tries: int = ERR_INPUT_TRIES,
) -> float:
    """Prompt for ``name`` until it parses, at most ``max_tries`` times.

    Raises InputAborted when the budget is spent or input ends.
    """
    tries = 0
    while tries < max_tries:
        try:
            line = read(prompt_for(name))
        except EOFError as e:
            raise InputAborted(f"input ended while reading {name}") from e
        try:
            return parse_real(line, name)
        except InvalidInput as e:
            tries += 1
            logger.info("bad input for %s (%d/%d): %s", name, tries, max_tries, e.reason)
            if tries < max_tries:
                write("#--- Incorrect input! Let's try again!")
            else:
                write("#--- Incorrect input! That was last try :(")
    raise InputAborted(f"no valid value for {name} after {max_tries} tries")


def collect_coefficients(
    *,
    read: Reader = input,
    write: Writer = print,
    max_tries: int = ERR_INPUT_TRIES,
    preset: Optional[Mapping[str, Optional[float]]] = None,
) -> Coefficients:
    """Collect A, B, C in order; names already present in ``preset`` are not prompted.

    ``preset`` keys are matched case-insensitively (``a`` or ``A``).
    """
    given = {str(k).upper(): v for k, v in (preset or {}).items() if v is not None}
    values: Dict[str, float] = {}
    for name in COEFFICIENT_NAMES:
        if name in given:
            v = float(given[name])
            if not math.isfinite(v):
                raise InvalidInput(name, given[name])
            values[name] = v
        else:
            values[name] = read_coefficient(name, read=read, write=write, max_tries=max_tries)
    return Coefficients(a=values["A"], b=values["B"], c=values["C"])
