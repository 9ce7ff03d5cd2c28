"""Pytest session hygiene.

Puts the repo root and src/ on sys.path (so tests run from a plain checkout)
and removes bytecode caches created during the session.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def _ensure_paths() -> None:
    for p in (REPO_ROOT, REPO_ROOT / "src"):
        s = str(p)
        if s not in sys.path:
            sys.path.insert(0, s)


def _purge(repo_root: Path) -> None:
    for f in repo_root.rglob("*.pyc"):
        f.unlink(missing_ok=True)
    for d in sorted(repo_root.rglob("__pycache__"), reverse=True):
        if d.is_dir() and not any(d.iterdir()):
            d.rmdir()


_ensure_paths()


def pytest_sessionstart(session):
    sys.dont_write_bytecode = True
    _ensure_paths()
    _purge(REPO_ROOT)


def pytest_sessionfinish(session, exitstatus):
    _purge(REPO_ROOT)


@pytest.fixture(autouse=True)
def _clean_solvesquare_env(monkeypatch):
    """Keep SOLVESQUARE_* variables from the outer shell out of the tests."""
    import os

    for k in list(os.environ):
        if k.startswith("SOLVESQUARE_"):
            monkeypatch.delenv(k, raising=False)
