from __future__ import annotations

"""Run settings for the CLI, API and UI.

Settings come from (lowest to highest precedence) the dataclass defaults, an
optional YAML/JSON settings file, and ``SOLVESQUARE_*`` environment
variables. The solver's epsilon is fixed and is not a setting.

Author: © 2026 SolveSquare contributors. GPL-3.0-or-later.
"""

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .solvers.errors import ConfigError

ENV_PREFIX = "SOLVESQUARE_"
OUTPUT_FORMATS = ("console", "summary", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    # Number of allowed incorrect answers per coefficient prompt
    max_input_tries: int = 3
    show_banner: bool = True
    output_format: str = "console"
    log_level: str = "WARNING"
    logs_dir: Optional[str] = None
    cache_enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Settings":
        """Construct Settings from a dict (ignores unknown keys)."""
        names = {f.name for f in fields(Settings)}
        clean = {k: _coerce(k, v) for k, v in (d or {}).items() if k in names}
        return validate_settings(Settings(**clean))


def _as_bool(key: str, v: Any) -> bool:
    if isinstance(v, bool):
        return v
    s = str(v).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ConfigError(f"{key}: expected a boolean, got {v!r}")


def _coerce(key: str, v: Any) -> Any:
    if key == "max_input_tries":
        if isinstance(v, bool):
            raise ConfigError(f"{key}: expected an integer, got {v!r}")
        try:
            return int(str(v).strip())
        except ValueError as e:
            raise ConfigError(f"{key}: expected an integer, got {v!r}") from e
    if key in ("show_banner", "cache_enabled"):
        return _as_bool(key, v)
    if key == "output_format":
        return str(v).strip().lower()
    if key == "log_level":
        return str(v).strip().upper()
    if key == "logs_dir":
        return None if v in (None, "") else str(v)
    return v


def validate_settings(s: Settings) -> Settings:
    if s.max_input_tries < 1:
        raise ConfigError(f"max_input_tries must be >= 1, got {s.max_input_tries}")
    if s.output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {OUTPUT_FORMATS}, got {s.output_format!r}")
    if s.log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {s.log_level!r}")
    return s


def _load_yaml_or_json(path: Path) -> Dict[str, Any]:
    try:
        txt = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read settings file {path}: {e}") from e
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(txt)
        else:
            data = json.loads(txt)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot parse settings file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"settings file {path} must hold a mapping, got {type(data).__name__}")
    return data


def env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in fields(Settings):
        key = ENV_PREFIX + f.name.upper()
        if key in env:
            out[f.name] = env[key]
    return out


def load_settings(path: str | Path | None = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """Defaults, then the settings file (if any), then environment overrides."""
    merged: Dict[str, Any] = {}
    if path is not None:
        merged.update(_load_yaml_or_json(Path(path)))
    merged.update(env_overrides(os.environ if env is None else env))
    return Settings.from_dict(merged)


def with_overrides(s: Settings, **kw: Any) -> Settings:
    """Apply non-None keyword overrides (CLI flags) on top of ``s``."""
    clean = {k: _coerce(k, v) for k, v in kw.items() if v is not None}
    return validate_settings(replace(s, **clean))
