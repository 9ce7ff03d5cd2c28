from __future__ import annotations

"""SolveSquare CLI.

Usage
-----
python -m solvesquare                       # prompts for A, B and C
python -m solvesquare --a 1 --b 0 --c -1    # no prompts
python -m solvesquare --b 2 --format summary --config settings.yaml

Coefficients not given as flags are prompted for, with the retry budget
from the settings (three tries by default).

Exit codes: 0 report printed, 1 input rejected or abandoned, 2 bad settings.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from . import __version__
from .collector import collect_coefficients
from .config import OUTPUT_FORMATS, LOG_LEVELS, load_settings, with_overrides
from .evaluator import Evaluator
from .logging_utils import create_logger
from .presenter import banner, render
from .solvers.errors import ConfigError, InputAborted, InvalidInput

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="solvesquare", description="Find real roots of Ax^2 + Bx + C = 0")
    p.add_argument("--a", type=float, default=None, help="Coefficient of x^2")
    p.add_argument("--b", type=float, default=None, help="Coefficient of x")
    p.add_argument("--c", type=float, default=None, help="Constant term")
    p.add_argument("--config", default=None, help="Settings file (YAML or JSON)")
    p.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default=None,
                   help="Report format (default from settings: console)")
    p.add_argument("--max-tries", dest="max_input_tries", type=int, default=None,
                   help="Allowed incorrect answers per coefficient")
    p.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, default=None)
    p.add_argument("--no-banner", dest="show_banner", action="store_false", default=None)
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(
    argv: list[str] | None = None,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    ns = build_parser().parse_args(argv)

    try:
        settings = with_overrides(
            load_settings(ns.config),
            output_format=ns.output_format,
            max_input_tries=ns.max_input_tries,
            log_level=ns.log_level,
            show_banner=ns.show_banner,
        )
    except ConfigError as e:
        write(f"#--- Bad settings: {e}")
        return 2

    create_logger(settings.log_level, logs_dir=settings.logs_dir)
    logger.debug("settings: %s", settings.to_dict())

    if settings.show_banner:
        write(banner(__version__))

    try:
        coeffs = collect_coefficients(
            read=read,
            write=write,
            max_tries=settings.max_input_tries,
            preset={"a": ns.a, "b": ns.b, "c": ns.c},
        )
    except InputAborted as e:
        logger.info("input aborted: %s", e)
        return 1
    except InvalidInput as e:
        write(f"#--- Incorrect input! {e}")
        return 1

    res = Evaluator(cache_enabled=settings.cache_enabled).evaluate(coeffs)
    if not res.ok or res.result is None:
        write(f"#--- {res.message}")
        return 1

    write(render(res.result, settings.output_format))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
