# © 2026 SolveSquare contributors. GPL-3.0-or-later.
import sys

from .cli import main

raise SystemExit(main(sys.argv[1:]))
