"""Every shipped module carries the copyright and license line near its top."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
LICENSE = "GPL-3.0-or-later"


def _shipped_modules() -> list[Path]:
    paths = sorted((ROOT / "src" / "solvesquare").rglob("*.py"))
    paths += sorted((ROOT / "ui").glob("*.py"))
    paths.append(ROOT / "api.py")
    return paths


def test_every_module_has_copyright_and_license_line():
    modules = _shipped_modules()
    assert len(modules) > 10

    missing = []
    for path in modules:
        head = path.read_text(encoding="utf-8").splitlines()[:20]
        if not any("© 2026" in line and LICENSE in line for line in head):
            missing.append(path.relative_to(ROOT).as_posix())

    assert not missing, "Modules without a copyright/license line:\n" + "\n".join(missing)
